"""Data models."""

from dataclasses import dataclass

from hydrator.engine.interval_config import IntervalConfig
from hydrator.engine.reminder_state import ReminderState


@dataclass
class ReminderSession:
    """Everything the bot tracks for the single chat it reminds."""

    chat_id: int
    state: ReminderState
    config: IntervalConfig
    started_at: float  # clock reading at startup
    reminder_message_id: int | None = None  # live "Hydrate" message, if any
    shown_indicator: str | None = None  # indicator currently on that message
    last_edit_at: float | None = None  # clock reading of the last send or edit
