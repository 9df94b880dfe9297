"""Duration formatting utilities."""

from datetime import timedelta

from hydrator.parser.duration import UNIT_MULTIPLIERS


def format_shorthand(duration: timedelta) -> str:
    """Format a duration in the shorthand accepted by the duration parser.

    Sub-second remainders are dropped.

    Examples:
        630 seconds -> "10m30s"
        4230 seconds -> "1h10m30s"
        0 seconds -> "0s"
    """
    remaining = int(duration.total_seconds())
    if remaining <= 0:
        return "0s"

    parts = []
    for unit in ("h", "m", "s"):
        value, remaining = divmod(remaining, UNIT_MULTIPLIERS[unit])
        if value:
            parts.append(f"{value}{unit}")

    return "".join(parts)


def to_string_mins_secs(duration: timedelta) -> str:
    """Format a duration as a compact clock.

    Examples:
        7 seconds -> "07"
        75 seconds -> "01:15"
        2 hours -> "120:00"
    """
    total = max(int(duration.total_seconds()), 0)
    minutes, seconds = divmod(total, 60)

    if minutes <= 0:
        return f"{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"
