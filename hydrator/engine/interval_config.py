"""Reminder interval configuration: the on-disk record and its parsed form."""

import json
import logging
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from hydrator.parser.duration import DurationParseError, parse_duration

logger = logging.getLogger(__name__)


class FSConfig(BaseModel):
    """The config file record."""

    reminder_interval: str = Field(
        description=(
            "A low-resolution duration in simple string form. It's composed of "
            "any number and a suffix (s for seconds, m for minutes, h for hours), "
            "repeated as many times as one likes. Examples: 30m, 20m30s, "
            "10h10m10s, 10s2h, 20s20s80s."
        ),
    )


@dataclass(frozen=True)
class IntervalConfig:
    """Resolved reminder interval plus how it was obtained."""

    reminder_interval: timedelta
    time_parsing_failed: bool = False
    is_default: bool = False

    @classmethod
    def from_fs_config(cls, fs_config: FSConfig, default_interval: timedelta) -> "IntervalConfig":
        """Parse the configured interval, falling back to ``default_interval``."""
        try:
            interval = parse_duration(fs_config.reminder_interval)
        except DurationParseError as e:
            logger.warning(
                f"Invalid reminder interval {fs_config.reminder_interval!r} "
                f"({e.kind.value}: {e}), using default {default_interval}"
            )
            return cls(reminder_interval=default_interval, time_parsing_failed=True)

        logger.info(f"Reminder interval: {interval}")
        return cls(reminder_interval=interval)

    @classmethod
    def default(cls, default_interval: timedelta) -> "IntervalConfig":
        """Config used when no config file could be read at all."""
        return cls(reminder_interval=default_interval, is_default=True)


def load_interval_config(
    path: Path, default_interval: timedelta, default_text: str
) -> IntervalConfig:
    """Load the interval config from ``path``. Never raises.

    Args:
        path: Location of the JSON config file
        default_interval: Interval used when parsing fails or no file exists
        default_text: Shorthand substituted for a corrupt config record

    Returns:
        The resolved config; ``is_default`` is set only when the file
        could not be read
    """
    logger.info(f"Reading from: {path} in dir {Path.cwd()}")

    try:
        content = path.read_bytes()
    except OSError as e:
        logger.warning(f"Could not read config file {path}: {e}")
        return IntervalConfig.default(default_interval)

    try:
        fs_config = FSConfig.model_validate_json(content.decode("utf-8"))
    except (UnicodeDecodeError, ValidationError) as e:
        logger.warning(f"Corrupt config file {path} ({e}), using {default_text!r}")
        fs_config = FSConfig(reminder_interval=default_text)

    return IntervalConfig.from_fs_config(fs_config, default_interval)


def write_default_config(path: Path, default_text: str) -> None:
    """Write a config file holding the default interval."""
    path.write_text(FSConfig(reminder_interval=default_text).model_dump_json(), encoding="utf-8")
    logger.info(f"Wrote default config to {path}")


def write_schema(path: Path) -> None:
    """Export the config file's JSON schema."""
    path.write_text(json.dumps(FSConfig.model_json_schema(), indent=2), encoding="utf-8")
    logger.info(f"Wrote config schema to {path}")
