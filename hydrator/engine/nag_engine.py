"""Nag engine - polls the reminder state and keeps the chat in sync."""

import logging

from telegram import Bot
from telegram.error import TelegramError

from hydrator.bot.formatters import format_acknowledged_message, format_reminder_message
from hydrator.bot.keyboards import drink_keyboard
from hydrator.config import Config
from hydrator.engine.pacing import indicator_for, next_poll_delay, should_edit
from hydrator.engine.reminder_state import ReminderPhase
from hydrator.models import ReminderSession

logger = logging.getLogger(__name__)


async def tick(bot: Bot, session: ReminderSession, now: float | None = None) -> float:
    """Poll the reminder state once and update the chat.

    This runs repeatedly and:
    1. Sends a reminder message when the interval has just elapsed
    2. Edits that message when its flashing indicator changes, at most once
       every ``Config.MIN_EDIT_SECONDS``
    3. Returns how long to wait before the next poll

    Telegram failures are logged; a reminder that failed to send is retried
    on the next tick. Handlers may acknowledge while a request is in flight,
    in which case the message is retired instead of kept live.
    """
    state = session.state
    if now is None:
        now = state.clock()

    phase = state.poll(now)

    if phase is ReminderPhase.REMINDING:
        indicator = indicator_for(state, now)
        acknowledged_at = state.last_acknowledged

        try:
            if session.reminder_message_id is None:
                sent_message = await bot.send_message(
                    chat_id=session.chat_id,
                    text=format_reminder_message(indicator),
                    parse_mode="HTML",
                    reply_markup=drink_keyboard(),
                )

                if state.last_acknowledged != acknowledged_at:
                    logger.info("Acknowledged while the reminder was being sent")
                    await _retire_message(bot, session, sent_message.message_id)
                else:
                    session.reminder_message_id = sent_message.message_id
                    session.shown_indicator = indicator
                    session.last_edit_at = now
                    logger.info(f"Sent reminder (message {sent_message.message_id})")

            elif should_edit(
                session.shown_indicator,
                indicator,
                session.last_edit_at,
                now,
                Config.MIN_EDIT_SECONDS,
            ):
                message_id = session.reminder_message_id
                await bot.edit_message_text(
                    chat_id=session.chat_id,
                    message_id=message_id,
                    text=format_reminder_message(indicator),
                    parse_mode="HTML",
                    reply_markup=drink_keyboard(),
                )

                if state.last_acknowledged != acknowledged_at:
                    # Our edit may have landed after the acknowledgment's
                    await _retire_message(bot, session, message_id)
                else:
                    session.shown_indicator = indicator
                    session.last_edit_at = now

        except TelegramError as e:
            logger.error(f"Failed to update reminder: {e}")

    return next_poll_delay(phase, Config.IDLE_POLL_SECONDS, Config.FLASH_POLL_SECONDS)


async def acknowledge(bot: Bot, session: ReminderSession, now: float | None = None) -> None:
    """Record that the user drank and retire the live reminder message."""
    session.state.acknowledge(now)

    message_id = session.reminder_message_id
    session.reminder_message_id = None
    session.shown_indicator = None
    session.last_edit_at = None

    if message_id is None:
        return

    try:
        await _retire_message(bot, session, message_id)
    except TelegramError as e:
        logger.error(f"Failed to retire reminder message {message_id}: {e}")


async def _retire_message(bot: Bot, session: ReminderSession, message_id: int) -> None:
    await bot.edit_message_text(
        chat_id=session.chat_id,
        message_id=message_id,
        text=format_acknowledged_message(session.state),
        parse_mode="HTML",
    )
