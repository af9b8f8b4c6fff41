"""Custom exception hierarchy for cahlter."""

from pathlib import Path


class CahlterError(Exception):
    """Base exception for all cahlter errors."""


class SummarizeFailed(CahlterError):
    """Raised when the table of contents cannot be built from the source tree."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class MissingChapterContent(SummarizeFailed):
    """Raised when a chapter has no resolvable markdown file."""


class InvalidSummaryFormat(SummarizeFailed):
    """Raised when a summary file does not follow the navigation grammar."""

    def __init__(self, message: str, path: Path | str | None = None, line: int | None = None):
        super().__init__(message, path)
        self.line = line


class InvalidChapterPath(CahlterError):
    """Raised when a chapter's content is not rooted under the source directory."""


class RenderFailed(CahlterError):
    """Raised when a chapter cannot be rendered to HTML."""


class WriteFailed(CahlterError):
    """Raised when a file or directory of the output tree cannot be created."""


class ConfigError(CahlterError):
    """Raised when the vault configuration cannot be read or written."""


class VaultError(CahlterError):
    """Raised on invalid vault lifecycle operations (e.g. initializing twice)."""
