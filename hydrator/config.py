"""Configuration management from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

from hydrator.utils.constants import (
    CONFIG_FILE_NAME,
    DEVELOPMENT_INTERVAL,
    FLASH_POLL_SECONDS,
    IDLE_POLL_SECONDS,
    MIN_EDIT_SECONDS,
    PRODUCTION_INTERVAL,
    SCHEMA_FILE_NAME,
    WARNING_GRACE_SECONDS,
)

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration loaded from environment variables."""

    # Telegram
    TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")
    TELEGRAM_CHAT_ID: str = os.getenv("TELEGRAM_CHAT_ID", "")

    # Interval config file
    CONFIG_PATH: Path = Path(os.getenv("CONFIG_PATH", CONFIG_FILE_NAME))
    SCHEMA_PATH: Path = Path(os.getenv("SCHEMA_PATH", SCHEMA_FILE_NAME))

    # Development mode shortens the default interval and exports the schema
    DEV_MODE: bool = _env_flag("DEV_MODE")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Poll pacing
    IDLE_POLL_SECONDS: float = float(os.getenv("IDLE_POLL_SECONDS", str(IDLE_POLL_SECONDS)))
    FLASH_POLL_SECONDS: float = float(os.getenv("FLASH_POLL_SECONDS", str(FLASH_POLL_SECONDS)))
    MIN_EDIT_SECONDS: float = float(os.getenv("MIN_EDIT_SECONDS", str(MIN_EDIT_SECONDS)))
    WARNING_GRACE_SECONDS: float = float(
        os.getenv("WARNING_GRACE_SECONDS", str(WARNING_GRACE_SECONDS))
    )

    @classmethod
    def default_interval_text(cls) -> str:
        """Shorthand interval used when no valid one is configured."""
        return DEVELOPMENT_INTERVAL if cls.DEV_MODE else PRODUCTION_INTERVAL

    @classmethod
    def chat_id(cls) -> int:
        return int(cls.TELEGRAM_CHAT_ID)

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration."""
        if not cls.TELEGRAM_BOT_TOKEN:
            raise ValueError("TELEGRAM_BOT_TOKEN environment variable is required")

        if not cls.TELEGRAM_CHAT_ID:
            raise ValueError("TELEGRAM_CHAT_ID environment variable is required")

        try:
            cls.chat_id()
        except ValueError:
            raise ValueError("TELEGRAM_CHAT_ID must be a numeric chat id")

        if cls.IDLE_POLL_SECONDS <= 0 or cls.FLASH_POLL_SECONDS <= 0:
            raise ValueError("Poll intervals must be positive")
