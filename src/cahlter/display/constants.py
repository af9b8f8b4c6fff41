"""Constants for the Rich logging setup."""

# Emoji mappings for log levels and operations
EMOJI_MAP = {
    "warning": "⚠️",
    "error": "❌",
    "init": "⚡",
    "prepare": "⚙️",
    "read": "💿",
    "build": "🏗️",
    "serve": "🌐",
    "done": "✅",
}

# Log format
LOG_FORMAT = "%(message)s"
