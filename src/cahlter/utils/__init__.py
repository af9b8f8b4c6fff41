"""Shared helpers for cahlter."""

from .exceptions import (
    CahlterError,
    ConfigError,
    InvalidChapterPath,
    InvalidSummaryFormat,
    MissingChapterContent,
    RenderFailed,
    SummarizeFailed,
    VaultError,
    WriteFailed,
)
from .numbering import next_chapter_number


__all__ = [
    "CahlterError",
    "ConfigError",
    "InvalidChapterPath",
    "InvalidSummaryFormat",
    "MissingChapterContent",
    "RenderFailed",
    "SummarizeFailed",
    "VaultError",
    "WriteFailed",
    "next_chapter_number",
]
