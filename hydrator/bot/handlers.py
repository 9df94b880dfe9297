"""Command handlers."""

import logging

from telegram import Update
from telegram.ext import ContextTypes

from hydrator.bot.formatters import (
    format_config_summary,
    format_help_message,
    format_parse_warning,
    format_status,
    format_welcome_message,
)
from hydrator.config import Config
from hydrator.engine.nag_engine import acknowledge
from hydrator.engine.pacing import show_parse_warning
from hydrator.models import ReminderSession

logger = logging.getLogger(__name__)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command."""
    if not update.message:
        return

    await update.message.reply_html(format_welcome_message())


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command."""
    if not update.message:
        return

    await update.message.reply_html(format_help_message())


async def status_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /status command - time since the last drink."""
    if not update.message:
        return

    session: ReminderSession = context.bot_data["session"]
    now = session.state.clock()

    message = format_status(session.state, now)
    if show_parse_warning(session.config, session.started_at, now, Config.WARNING_GRACE_SECONDS):
        message = format_parse_warning() + "\n\n" + message

    await update.message.reply_html(message)


async def drink_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /drink command - acknowledge, restarting the countdown."""
    if not update.message:
        return

    session: ReminderSession = context.bot_data["session"]
    await acknowledge(context.bot, session)

    await update.message.reply_html(format_status(session.state))


async def config_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /config command - show the active interval."""
    if not update.message:
        return

    session: ReminderSession = context.bot_data["session"]
    await update.message.reply_html(format_config_summary(session.config))
