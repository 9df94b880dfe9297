"""Poll pacing and visual cue selection for the reminder loop."""

from hydrator.engine.interval_config import IntervalConfig
from hydrator.engine.reminder_state import ReminderPhase, ReminderState
from hydrator.utils.constants import IDLE_INDICATOR, REMINDER_INDICATORS


def next_poll_delay(phase: ReminderPhase, idle_seconds: float, flash_seconds: float) -> float:
    """Poll quickly while reminding so the indicator flashes, slowly otherwise."""
    if phase is ReminderPhase.REMINDING:
        return flash_seconds
    return idle_seconds


def show_parse_warning(
    config: IntervalConfig, started_at: float, now: float, grace_seconds: float
) -> bool:
    """Whether the invalid interval warning is still within its grace period."""
    return config.time_parsing_failed and now - started_at < grace_seconds


def indicator_for(state: ReminderState, now: float | None = None) -> str:
    if not state.reminding:
        return IDLE_INDICATOR
    return REMINDER_INDICATORS[state.oscillation_phase(now)]


def should_edit(
    shown: str | None, indicator: str, last_edit_at: float | None, now: float, min_gap: float
) -> bool:
    """Whether a live reminder message needs its indicator swapped now.

    Edits wait for ``min_gap`` seconds after the previous one, so with one
    second polls the chat flashes slower than the oscillation phase itself.
    """
    if indicator == shown:
        return False
    return last_edit_at is None or now - last_edit_at >= min_gap
