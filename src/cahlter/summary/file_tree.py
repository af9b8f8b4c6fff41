"""Summarize a vault from its directory layout."""

import logging
from pathlib import Path

from ..models.content import Chapter, Summary
from ..utils.exceptions import MissingChapterContent, SummarizeFailed
from ..utils.numbering import next_chapter_number


logger = logging.getLogger("Cahlter.Summary")

# Checked in this order, case-sensitively
MAIN_CHAPTER_FILE_NAMES = ("index.md", "readme.md", "INDEX.md", "README.md")
MARKDOWN_SUFFIX = ".md"


class FileTreeSummarizer:
    """Create a summary from the file tree.

    Every directory is a chapter whose content is an ``index.md``,
    ``readme.md``, ``INDEX.md``, ``README.md`` or ``<directory name>.md``
    file inside it; the remaining markdown files of the directory are its
    subchapters. Standalone markdown files are chapters of their own.
    Entries are numbered in lexicographic order, so a tree such as:

        chapter1/
            index.md
            subchapter1.md
            subchapter2.md
        chapter2.md
        chapter3.md

    is summarized as:

        Chapter1 (chapter1/index.md) 1
            Subchapter1 (chapter1/subchapter1.md) 1.1
            Subchapter2 (chapter1/subchapter2.md) 1.2
        Chapter2 (chapter2.md) 2
        Chapter3 (chapter3.md) 3
    """

    def __init__(self, path: Path | str, ignore: tuple[str, ...] | list[str] = ()):
        self.path = Path(path)
        self.ignore = frozenset(ignore)

    def summarize(self) -> Summary:
        return Summary(items=self.find_chapters("1"))

    def find_chapters(self, initial_number: str, directory: Path | None = None) -> list[Chapter]:
        """Find all the chapters in ``directory`` (default: the summarizer root).

        Args:
            initial_number: Number given to the first chapter found
            directory: Directory to enumerate

        Returns:
            Chapters in lexicographic order of their file names
        """
        directory = directory if directory is not None else self.path
        # The root is not a chapter, so none of its files are consumed as main content
        is_chapter_dir = directory != self.path

        chapters: list[Chapter] = []
        number = initial_number
        for entry in self._list_dir(directory):
            if entry.is_symlink() and entry.is_dir():
                logger.debug("Skipping symlinked directory %s", entry)
                continue
            if entry.is_dir():
                chapter = Chapter(
                    title=self.format_chapter_title(entry.name),
                    number=number,
                    content=self.find_main_chapter_content(entry),
                    subchapters=self.find_chapters(f"{number}.1", entry),
                )
            elif entry.suffix == MARKDOWN_SUFFIX and entry.is_file():
                if is_chapter_dir and self.is_main_content(entry):
                    continue
                chapter = Chapter(
                    title=self.format_chapter_title(entry.stem),
                    number=number,
                    content=entry,
                )
            else:
                continue

            logger.debug("Found chapter %s %s (%s)", chapter.number, chapter.title, entry)
            chapters.append(chapter)
            number = next_chapter_number(number)

        return chapters

    def find_main_chapter_content(self, directory: Path) -> Path:
        """Return the markdown file holding the content of a directory chapter.

        Raises:
            MissingChapterContent: If no candidate file exists
        """
        names = {entry.name for entry in self._list_dir(directory) if entry.is_file()}
        for candidate in (*MAIN_CHAPTER_FILE_NAMES, directory.name + MARKDOWN_SUFFIX):
            if candidate in names:
                return directory / candidate

        raise MissingChapterContent(
            f"Could not find content for chapter {directory}. "
            f"Create an index.md, a README.md or a {directory.name}.md file.",
            directory,
        )

    @staticmethod
    def is_main_content(path: Path) -> bool:
        """Check if ``path`` is a candidate main content file of its directory."""
        return path.name in MAIN_CHAPTER_FILE_NAMES or path.stem == path.parent.name

    @staticmethod
    def format_chapter_title(name: str) -> str:
        """Capitalize the first letter of a file or directory name.

        chapter -> Chapter, chapter2 -> Chapter2
        """
        return name[:1].upper() + name[1:]

    def _list_dir(self, directory: Path) -> list[Path]:
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise SummarizeFailed(f"Failed to read contents of {directory}: {e}", directory) from e
        return [
            entry
            for entry in entries
            if not entry.name.startswith(".") and entry.name not in self.ignore
        ]
