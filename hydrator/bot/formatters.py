"""Message text formatters."""

from hydrator.engine.interval_config import IntervalConfig
from hydrator.engine.pacing import indicator_for
from hydrator.engine.reminder_state import ReminderState
from hydrator.utils.time_utils import format_shorthand, to_string_mins_secs


def format_reminder_message(indicator: str) -> str:
    """Format the flashing reminder."""
    return f"{indicator} <b>Hydrate 💧</b> {indicator}"


def format_acknowledged_message(state: ReminderState) -> str:
    """Replacement text for a reminder once the user drank."""
    return (
        "✓ <b>Nice</b>\n\n"
        f"Next reminder in {format_shorthand(state.reminder_interval)}."
    )


def format_status(state: ReminderState, now: float | None = None) -> str:
    """Format the current state, like hovering over the reminder window."""
    if state.reminding:
        return (
            f"{indicator_for(state, now)} <b>Hydrate 💧</b>\n"
            f"Reminding for {to_string_mins_secs(state.reminding_for(now))}"
        )

    return (
        f"{indicator_for(state, now)} <b>Nice</b>\n"
        f"Last drink {to_string_mins_secs(state.elapsed(now))} ago, "
        f"reminding every {format_shorthand(state.reminder_interval)}"
    )


def format_parse_warning() -> str:
    """Warning shown after startup when the configured interval was invalid."""
    return (
        "⚠️ <b>Invalid reminder interval, using default</b>\n"
        "Missing a duration suffix such as s, m or h?\n"
        "Example: <code>10m</code>, <code>20m30s</code>, <code>1h1m1s</code>"
    )


def format_config_summary(config: IntervalConfig) -> str:
    """Describe where the active interval came from."""
    if config.is_default:
        source = "built-in default (no config file found)"
    elif config.time_parsing_failed:
        source = "built-in default (config file interval was invalid)"
    else:
        source = "config file"

    return (
        f"<b>Reminder interval:</b> {format_shorthand(config.reminder_interval)}\n"
        f"<b>Source:</b> {source}"
    )


def format_welcome_message() -> str:
    """Format the welcome message for /start."""
    return """
<b>Hydration Reminder</b> 💧

I'll remind you to drink water at a fixed interval and keep flashing until you tell me you did.

• Tap <b>💧 I drank</b> on a reminder, or send /drink
• /status - Time since your last drink
• /help - Full command list
""".strip()


def format_help_message() -> str:
    """Format the help message."""
    return """
<b>Hydration Reminder Commands</b> 💧

/drink - Mark that you drank (restarts the countdown, even early)
/status - Time since your last drink or how long I've been reminding
/config - Show the active reminder interval

<b>Configuring the interval:</b>
Set <code>reminder_interval</code> in the config file using a number and a suffix (s, m or h), repeated as you like:
<code>30m</code>, <code>20m30s</code>, <code>1h10m</code>, <code>10s2h</code>
""".strip()
