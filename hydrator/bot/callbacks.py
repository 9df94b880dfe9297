"""Callback query handlers for inline buttons."""

import logging

from telegram import Update
from telegram.ext import ContextTypes

from hydrator.engine.nag_engine import acknowledge
from hydrator.models import ReminderSession
from hydrator.utils.constants import DRINK_CALLBACK

logger = logging.getLogger(__name__)


async def handle_drink_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle '💧 I drank' button press."""
    query = update.callback_query
    if not query:
        return

    session: ReminderSession = context.bot_data["session"]

    if not query.message or query.message.chat.id != session.chat_id:
        await query.answer("Not your reminder.")
        return

    await acknowledge(context.bot, session)
    await query.answer("💧 Nice!")


async def callback_router(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Route callback queries to appropriate handlers."""
    if not update.callback_query:
        return

    query = update.callback_query
    data = query.data

    if not data:
        return

    if data == DRINK_CALLBACK:
        await handle_drink_callback(update, context)
    else:
        logger.warning(f"Unknown callback data: {data!r}")
        await query.answer("Unknown action")
