"""Main entry point for the hydration reminder bot."""

import logging
import sys
import time

from telegram.error import TelegramError
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    CommandHandler,
    ContextTypes,
    filters,
)

from hydrator.bot.callbacks import callback_router
from hydrator.bot.formatters import format_parse_warning
from hydrator.bot.handlers import (
    config_command,
    drink_command,
    help_command,
    start_command,
    status_command,
)
from hydrator.config import Config
from hydrator.engine.interval_config import (
    load_interval_config,
    write_default_config,
    write_schema,
)
from hydrator.engine.nag_engine import tick
from hydrator.engine.reminder_state import ReminderState
from hydrator.models import ReminderSession
from hydrator.parser.duration import parse_duration
from hydrator.utils.error_handler import error_handler

# Configure logging
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    stream=sys.stdout,
)

logger = logging.getLogger(__name__)


def build_session() -> ReminderSession:
    """Load the interval config and create the reminder state."""
    default_text = Config.default_interval_text()
    default_interval = parse_duration(default_text)

    config = load_interval_config(Config.CONFIG_PATH, default_interval, default_text)

    if config.is_default:
        try:
            write_default_config(Config.CONFIG_PATH, default_text)
        except OSError as e:
            logger.error(f"Could not write default config: {e}")

    if Config.DEV_MODE:
        try:
            write_schema(Config.SCHEMA_PATH)
        except OSError as e:
            logger.error(f"Could not write config schema: {e}")

    state = ReminderState(config.reminder_interval, clock=time.monotonic)
    return ReminderSession(
        chat_id=Config.chat_id(),
        state=state,
        config=config,
        started_at=state.last_acknowledged,
    )


async def tick_job(context: ContextTypes.DEFAULT_TYPE) -> None:
    """Job callback: poll once, then schedule the next poll."""
    session: ReminderSession = context.bot_data["session"]
    delay = Config.IDLE_POLL_SECONDS

    try:
        delay = await tick(context.bot, session)
    finally:
        # Keep polling even if this tick blew up
        if context.job_queue:
            context.job_queue.run_once(tick_job, when=delay, name="tick")


async def post_init(application: Application) -> None:
    """Initialize bot resources after application is created."""
    session = build_session()
    application.bot_data["session"] = session

    if session.config.time_parsing_failed:
        try:
            await application.bot.send_message(
                chat_id=session.chat_id,
                text=format_parse_warning(),
                parse_mode="HTML",
            )
        except TelegramError as e:
            logger.error(f"Failed to send interval warning: {e}")

    # Start polling
    job_queue = application.job_queue
    if job_queue:
        job_queue.run_once(tick_job, when=0, name="tick")
        logger.info(f"Reminder loop started (interval: {session.config.reminder_interval})")
    else:
        logger.error("Job queue unavailable, install python-telegram-bot[job-queue]")

    logger.info("Hydration reminder initialized successfully")


def main() -> None:
    """Start the bot."""
    # Validate configuration
    try:
        Config.validate()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    # Create application
    application = (
        Application.builder()
        .token(Config.TELEGRAM_BOT_TOKEN)
        .post_init(post_init)
        .build()
    )

    # Only the configured chat may drive the reminder
    chat_filter = filters.Chat(chat_id=Config.chat_id())

    # Commands
    application.add_handler(CommandHandler("start", start_command, filters=chat_filter))
    application.add_handler(CommandHandler("help", help_command, filters=chat_filter))
    application.add_handler(CommandHandler("status", status_command, filters=chat_filter))
    application.add_handler(CommandHandler("drink", drink_command, filters=chat_filter))
    application.add_handler(CommandHandler("config", config_command, filters=chat_filter))

    # Callback queries (buttons)
    application.add_handler(CallbackQueryHandler(callback_router))

    # Error handler
    application.add_error_handler(error_handler)

    # Start the bot
    logger.info("Starting hydration reminder bot...")
    application.run_polling(allowed_updates=["message", "callback_query"])


if __name__ == "__main__":
    main()
