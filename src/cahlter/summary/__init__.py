"""Summarizers: build a vault's table of contents from its source directory."""

import logging
from pathlib import Path
from typing import Protocol

from ..models.content import Summary
from .file_tree import FileTreeSummarizer
from .summary_file import SUMMARY_FILE_NAMES, SummaryFileSummarizer, find_summary_file


logger = logging.getLogger("Cahlter.Summary")


class Summarizer(Protocol):
    """Strategy deriving a Summary from source input."""

    def summarize(self) -> Summary: ...


def get_summarizer(src_dir: Path | str, ignore: tuple[str, ...] | list[str] = ()) -> Summarizer:
    """Pick the summary file strategy when ``src_dir`` has one, else the file tree."""
    src_dir = Path(src_dir)
    summary_file = find_summary_file(src_dir)
    if summary_file is not None:
        logger.debug("Using summary file %s", summary_file)
        return SummaryFileSummarizer(summary_file)

    logger.debug("No summary file in %s, summarizing the file tree", src_dir)
    return FileTreeSummarizer(src_dir, ignore=ignore)


def summarize(src_dir: Path | str, ignore: tuple[str, ...] | list[str] = ()) -> Summary:
    """Build the table of contents of ``src_dir``."""
    return get_summarizer(src_dir, ignore=ignore).summarize()


__all__ = [
    "SUMMARY_FILE_NAMES",
    "FileTreeSummarizer",
    "Summarizer",
    "SummaryFileSummarizer",
    "get_summarizer",
    "summarize",
]
