"""Rich-based logger configuration for cahlter."""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from .constants import EMOJI_MAP, LOG_FORMAT


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_rich_logger(
    name: str = "Cahlter",
    level: int | str = logging.INFO,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """
    Set up a Rich-based logger with emoji support.

    Args:
        name: Logger name, library modules log to its children
        level: Logging level, as a number or a name such as "DEBUG"
        show_time: Show timestamp in logs
        show_path: Show file path in logs

    Returns:
        Configured logger instance
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    console = Console(stderr=True)

    rich_handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        markup=False,
    )
    rich_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()  # Clear any existing handlers
    logger.addHandler(rich_handler)
    logger.propagate = False

    return logger


class EmojiLoggerAdapter(logging.LoggerAdapter[logging.Logger]):
    """
    Logger adapter that adds emojis to log messages.

    Usage:
        logger = setup_rich_logger("Cahlter")
        emoji_logger = EmojiLoggerAdapter(logger, {})
        emoji_logger.info("Building...", extra={"emoji": "build"})
    """

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        """Add emoji prefix to messages based on the extra data."""
        extra = kwargs.get("extra", {})
        emoji_key = extra.pop("emoji", None) if isinstance(extra, dict) else None

        if emoji_key and emoji_key in EMOJI_MAP:
            msg = f"{EMOJI_MAP[emoji_key]} {msg}"

        return msg, kwargs

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("extra", {}).setdefault("emoji", "warning")
        super().warning(msg, *args, **kwargs)

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("extra", {}).setdefault("emoji", "error")
        super().error(msg, *args, **kwargs)
