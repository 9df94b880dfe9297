"""Global error handler for the bot."""

import logging
import traceback

from telegram import Update
from telegram.error import NetworkError, RetryAfter, TimedOut
from telegram.ext import ContextTypes

logger = logging.getLogger(__name__)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle errors in the bot."""
    error = context.error

    # Flood control and flaky connections resolve themselves on the next poll
    if isinstance(error, RetryAfter):
        logger.warning(f"Rate limited by Telegram, retry after {error.retry_after}s")
        return
    if isinstance(error, (TimedOut, NetworkError)):
        logger.warning(f"Network error: {error}")
        return

    logger.error("Exception while handling an update:", exc_info=error)

    # Log full traceback
    if error is not None:
        tb_string = "".join(traceback.format_exception(None, error, error.__traceback__))
        logger.error(f"Traceback:\n{tb_string}")

    # Try to notify the user
    if isinstance(update, Update) and update.effective_message:
        try:
            await update.effective_message.reply_text(
                "😅 Oops! Something went wrong.\n\n"
                "The error has been logged. Use /help for the command list."
            )
        except Exception as e:
            logger.error(f"Failed to send error message to user: {e}")
