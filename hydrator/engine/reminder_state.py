"""Reminder timing state machine."""

import logging
import time
from datetime import timedelta
from enum import Enum
from typing import Callable

logger = logging.getLogger(__name__)

# Returns the current instant in seconds from a monotonic source
Clock = Callable[[], float]


class ReminderPhase(Enum):
    """Binary state of the reminder."""

    IDLE = "idle"
    REMINDING = "reminding"


class ReminderState:
    """Tracks time since the last drink and decides when to remind.

    The state never schedules anything itself. The caller polls it as often
    as it likes and calls ``acknowledge`` when the user reacts. Every
    ``now`` argument defaults to the injected clock, and successive values
    must not go backwards.
    """

    def __init__(self, reminder_interval: timedelta, clock: Clock = time.monotonic):
        if reminder_interval < timedelta(0):
            raise ValueError(f"Reminder interval must not be negative: {reminder_interval}")

        self.reminder_interval = reminder_interval
        self.clock = clock

        now = clock()
        self.last_acknowledged = now
        self.armed = False
        self.reminding = False
        self.reminding_since = now

    @property
    def phase(self) -> ReminderPhase:
        return ReminderPhase.REMINDING if self.reminding else ReminderPhase.IDLE

    def _now(self, now: float | None) -> float:
        return self.clock() if now is None else now

    def poll(self, now: float | None = None) -> ReminderPhase:
        """Re-evaluate whether the interval has elapsed.

        ``reminding_since`` is only moved on the idle -> reminding transition,
        so repeated polls while reminding keep the oscillation phase stable.
        """
        now = self._now(now)
        was_reminding = self.reminding

        self.reminding = (
            now - self.last_acknowledged > self.reminder_interval.total_seconds()
        )
        self.armed = True

        if self.reminding and not was_reminding:
            self.reminding_since = now
            logger.info(
                f"Reminder interval of {self.reminder_interval} elapsed, reminding"
            )

        return self.phase

    def acknowledge(self, now: float | None = None) -> None:
        """Reset the cycle. Acknowledging early restarts the countdown."""
        now = self._now(now)

        if self.reminding:
            logger.info(f"Reminder acknowledged after {self.reminding_for(now)}")
        else:
            logger.info("Countdown restarted before the reminder fired")

        self.last_acknowledged = now
        self.reminding = False
        self.armed = True

    def oscillation_phase(self, now: float | None = None) -> int:
        """Alternate between 0 and 1 every second while reminding."""
        if not self.reminding:
            return 0
        return int(self._now(now) - self.reminding_since) % 2

    def elapsed(self, now: float | None = None) -> timedelta:
        """Whole seconds since the last acknowledgment."""
        seconds = int(self._now(now) - self.last_acknowledged)
        return timedelta(seconds=max(seconds, 0))

    def reminding_for(self, now: float | None = None) -> timedelta:
        """Whole seconds since the reminder started, zero while idle."""
        if not self.reminding:
            return timedelta(0)
        seconds = int(self._now(now) - self.reminding_since)
        return timedelta(seconds=max(seconds, 0))
