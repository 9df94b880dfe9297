"""Tests for the reminder poll job."""

import asyncio
from datetime import timedelta
from types import SimpleNamespace

from telegram.error import TelegramError

from hydrator.config import Config
from hydrator.engine.interval_config import IntervalConfig
from hydrator.engine.nag_engine import acknowledge, tick
from hydrator.engine.reminder_state import ReminderState
from hydrator.models import ReminderSession
from hydrator.utils.constants import REMINDER_INDICATORS


class FakeBot:
    """Records the calls the engine makes.

    ``during_request`` runs inside the next send or edit, standing in for a
    handler that gets scheduled while the request is in flight.
    """

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent = []
        self.edits = []
        self.during_request = None

    async def _interleave(self):
        callback, self.during_request = self.during_request, None
        if callback is not None:
            await callback()

    async def send_message(self, **kwargs):
        if self.fail:
            raise TelegramError("boom")
        await self._interleave()
        self.sent.append(kwargs)
        return SimpleNamespace(message_id=len(self.sent))

    async def edit_message_text(self, **kwargs):
        if self.fail:
            raise TelegramError("boom")
        await self._interleave()
        self.edits.append(kwargs)


def make_session(clock, seconds=5):
    interval = timedelta(seconds=seconds)
    state = ReminderState(interval, clock=clock)
    return ReminderSession(
        chat_id=42,
        state=state,
        config=IntervalConfig(interval),
        started_at=state.last_acknowledged,
    )


def test_tick_idle(clock):
    """Test that nothing is sent before the interval elapses."""
    bot = FakeBot()
    session = make_session(clock)

    delay = asyncio.run(tick(bot, session, now=3))

    assert delay == Config.IDLE_POLL_SECONDS
    assert bot.sent == []


def test_tick_sends_reminder_once(clock):
    """Test the reminder is sent on the transition and then only edited."""
    bot = FakeBot()
    session = make_session(clock)

    delay = asyncio.run(tick(bot, session, now=6))
    assert delay == Config.FLASH_POLL_SECONDS
    assert len(bot.sent) == 1
    assert bot.sent[0]["chat_id"] == 42
    assert session.reminder_message_id == 1
    assert session.shown_indicator == REMINDER_INDICATORS[0]

    asyncio.run(tick(bot, session, now=6.5))  # same phase
    assert bot.edits == []

    asyncio.run(tick(bot, session, now=7))  # phase flipped, too soon to edit
    assert bot.edits == []

    asyncio.run(tick(bot, session, now=9))  # phase flipped, edit gap passed
    assert len(bot.sent) == 1
    assert len(bot.edits) == 1
    assert bot.edits[0]["message_id"] == 1
    assert session.shown_indicator == REMINDER_INDICATORS[1]
    assert session.last_edit_at == 9


def test_tick_retries_failed_send(clock):
    """Test that a failed send is retried on the next tick."""
    bot = FakeBot(fail=True)
    session = make_session(clock)

    asyncio.run(tick(bot, session, now=6))
    assert session.reminder_message_id is None

    bot.fail = False
    asyncio.run(tick(bot, session, now=7))
    assert len(bot.sent) == 1
    assert session.reminder_message_id == 1


def test_acknowledge_retires_reminder(clock):
    """Test that acknowledging edits the live reminder and resets the cycle."""
    bot = FakeBot()
    session = make_session(clock)
    asyncio.run(tick(bot, session, now=6))

    asyncio.run(acknowledge(bot, session, now=8))

    assert not session.state.reminding
    assert session.state.last_acknowledged == 8
    assert session.reminder_message_id is None
    assert bot.edits[-1]["message_id"] == 1
    assert "Nice" in bot.edits[-1]["text"]

    delay = asyncio.run(tick(bot, session, now=12))
    assert delay == Config.IDLE_POLL_SECONDS
    assert len(bot.sent) == 1


def test_acknowledge_without_reminder(clock):
    """Test acknowledging early touches no messages."""
    bot = FakeBot()
    session = make_session(clock)

    asyncio.run(acknowledge(bot, session, now=2))

    assert bot.edits == []
    assert session.state.last_acknowledged == 2


def test_acknowledge_survives_telegram_error(clock):
    """Test that a failed edit still acknowledges."""
    bot = FakeBot()
    session = make_session(clock)
    asyncio.run(tick(bot, session, now=6))

    bot.fail = True
    asyncio.run(acknowledge(bot, session, now=8))

    assert not session.state.reminding
    assert session.reminder_message_id is None


def test_acknowledge_during_send(clock):
    """Test that a drink acknowledged mid-send does not leave a live reminder."""
    bot = FakeBot()
    session = make_session(clock)
    bot.during_request = lambda: acknowledge(bot, session, now=6.5)

    asyncio.run(tick(bot, session, now=6))

    assert not session.state.reminding
    assert session.reminder_message_id is None
    assert len(bot.sent) == 1
    assert bot.edits[-1]["message_id"] == 1
    assert "Nice" in bot.edits[-1]["text"]

    asyncio.run(tick(bot, session, now=20))  # next cycle gets a fresh message
    assert len(bot.sent) == 2
    assert session.reminder_message_id == 2


def test_acknowledge_during_edit(clock):
    """Test that a flash edit landing after an acknowledgment is undone."""
    bot = FakeBot()
    session = make_session(clock)
    asyncio.run(tick(bot, session, now=6))

    bot.during_request = lambda: acknowledge(bot, session, now=9.5)
    asyncio.run(tick(bot, session, now=9))

    assert not session.state.reminding
    assert session.reminder_message_id is None
    assert "Nice" in bot.edits[-1]["text"]
    assert bot.edits[-1]["message_id"] == 1
