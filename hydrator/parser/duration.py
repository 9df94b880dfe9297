"""Compact duration string parsing (``20m30s``, ``1h10m``, ``10s2h``)."""

import logging
from datetime import timedelta
from enum import Enum

logger = logging.getLogger(__name__)

# Seconds per unit suffix
UNIT_MULTIPLIERS = {
    "s": 1,
    "m": 60,
    "h": 60 * 60,
}

# Largest whole-second span a timedelta can hold
MAX_SECONDS = timedelta.max.days * 24 * 60 * 60 + timedelta.max.seconds

DIGITS = "0123456789"


class ParseErrorKind(Enum):
    """Why a duration string was rejected."""

    EMPTY_OR_INVALID = "empty_or_invalid"
    NUMERIC_OVERFLOW = "numeric_overflow"
    MISSING_SUFFIX = "missing_suffix"
    INVALID_SUFFIX = "invalid_suffix"


class DurationParseError(ValueError):
    """Raised when a duration string does not match ``(<digits><unit>)+``."""

    def __init__(self, kind: ParseErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class DurationParser:
    """Left-to-right parser over a trimmed duration string.

    Each token is a run of digits followed by exactly one unit suffix.
    Tokens may repeat units and appear in any order; their values are summed.

    Examples:
        "30m" -> 30 minutes
        "20m30s" -> 20 minutes 30 seconds
        "10s2h" -> 2 hours 10 seconds
        "20s20s80s" -> 2 minutes
    """

    def __init__(self, value: str):
        self.value = value.strip()
        self.pos = 0

    def get(self) -> timedelta:
        """Parse the whole string into a total duration.

        Raises:
            DurationParseError: with the kind of failure encountered
        """
        if not self.value:
            raise DurationParseError(
                ParseErrorKind.EMPTY_OR_INVALID, "Cannot parse from empty string."
            )

        total = 0
        while self.pos < len(self.value):
            logger.debug(f"Parsing: {self.value[self.pos:]!r}")

            magnitude = self._parse_number()
            multiplier = self._parse_suffix_into_multiplier()

            total += magnitude * multiplier
            if total > MAX_SECONDS:
                raise DurationParseError(
                    ParseErrorKind.NUMERIC_OVERFLOW,
                    f"Duration {self.value!r} is too large",
                )

        return timedelta(seconds=total)

    def _parse_number(self) -> int:
        start = self.pos
        end = start
        while end < len(self.value) and self.value[end] in DIGITS:
            end += 1

        if end == start:
            raise DurationParseError(
                ParseErrorKind.EMPTY_OR_INVALID,
                f"No numeric value found at position {start} of {self.value!r}",
            )

        magnitude = int(self.value[start:end])
        if magnitude > MAX_SECONDS:
            raise DurationParseError(
                ParseErrorKind.NUMERIC_OVERFLOW,
                f"Number {self.value[start:end]} is too large",
            )

        self.pos = end
        return magnitude

    def _parse_suffix_into_multiplier(self) -> int:
        if self.pos >= len(self.value):
            raise DurationParseError(
                ParseErrorKind.MISSING_SUFFIX,
                "No duration specifier, use suffixes such as s, m, h "
                "in the interval: 20m30s, 25m",
            )

        suffix = self.value[self.pos]
        self.pos += 1

        multiplier = UNIT_MULTIPLIERS.get(suffix)
        if multiplier is None:
            raise DurationParseError(
                ParseErrorKind.INVALID_SUFFIX, f"Invalid duration suffix: {suffix!r}"
            )
        return multiplier


def parse_duration(value: str) -> timedelta:
    """Parse a shorthand duration string such as ``20m30s``."""
    return DurationParser(value).get()
