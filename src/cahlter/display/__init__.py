"""
Rich-based terminal output for cahlter.
"""

from .constants import EMOJI_MAP
from .rich_logger import VALID_LOG_LEVELS, EmojiLoggerAdapter, setup_rich_logger


__all__ = [
    "EMOJI_MAP",
    "VALID_LOG_LEVELS",
    "EmojiLoggerAdapter",
    "setup_rich_logger",
]
