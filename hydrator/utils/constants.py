"""Constants and default values."""

# Reminder interval defaults, in the shorthand the duration parser accepts
PRODUCTION_INTERVAL = "20m"
DEVELOPMENT_INTERVAL = "5s"

# Files written next to the bot
CONFIG_FILE_NAME = "hrconfig.json"
SCHEMA_FILE_NAME = "schema.json"

# Poll pacing (seconds)
IDLE_POLL_SECONDS = 5.0
FLASH_POLL_SECONDS = 1.0

# Minimum gap between reminder message edits (seconds); Telegram allows
# about one edit per second per chat
MIN_EDIT_SECONDS = 3.0

# How long a bad interval warning stays visible after startup (seconds)
WARNING_GRACE_SECONDS = 10.0

# Alternating indicators shown while reminding, indexed by oscillation phase
REMINDER_INDICATORS = ("🔵", "🔴")
IDLE_INDICATOR = "⚪"

# Callback data for the acknowledge button
DRINK_CALLBACK = "drink"
