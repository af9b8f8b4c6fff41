"""Summarize a vault from an explicit navigation file (summary.md).

The navigation file is a small markdown subset, parsed line by line:

    [Introduction](./intro.md)

    - [Chapter 1](./chapter1.md)
        - [Chapter 1.1](./chapter1/chapter1.1.md)
    - [Chapter 2](./chapter2.md)

    # Reference

    - [Glossary](./glossary.md)

Standalone links are unnumbered chapters, headings are sections and bullet
lists are numbered chapters nested by indentation. Each list starts its
numbering again at 1 once a heading or a standalone link interrupts it.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from ..models.content import Chapter, Item, Section, Summary
from ..utils.exceptions import InvalidSummaryFormat, MissingChapterContent, SummarizeFailed
from ..utils.numbering import next_chapter_number


logger = logging.getLogger("Cahlter.Summary")

SUMMARY_FILE_NAMES = ("summary.md", "SUMMARY.md", "SUMMARY.MD", "Summary.md")

LINK = r"\[(?P<title>[^\]]+)\]\((?P<target>[^)\s]+)\)"
HEADING_RE = re.compile(r"^#{1,6}\s+(?P<title>.+?)\s*$")
LINK_RE = re.compile(rf"^{LINK}\s*$")
LIST_ITEM_RE = re.compile(rf"^(?P<indent>[ \t]*)[-*+]\s+{LINK}\s*$")

TAB_WIDTH = 4


@dataclass
class _ListNode:
    """A bullet of the navigation file, numbered once its list is known."""

    title: str
    content: Path
    indent: int
    number: str = ""
    children: list["_ListNode"] = field(default_factory=list)


class SummaryFileSummarizer:
    """Parse a navigation file into a summary mixing chapters and sections."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def summarize(self) -> Summary:
        return Summary(items=self.find_items())

    def find_items(self) -> list[Item]:
        """Parse the navigation file top to bottom, preserving source order."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SummarizeFailed(f"Failed to read summary file {self.path}: {e}", self.path) from e

        entries: list[Item | _ListNode] = []
        # Open bullets of the current list, outermost first
        stack: list[_ListNode] = []
        number = "1"

        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue

            if match := LIST_ITEM_RE.match(line):
                node = _ListNode(
                    title=match.group("title").strip(),
                    content=self._resolve(match.group("target"), lineno),
                    indent=len(match.group("indent").expandtabs(TAB_WIDTH)),
                )
                while stack and stack[-1].indent >= node.indent:
                    stack.pop()
                if stack:
                    stack[-1].children.append(node)
                else:
                    node.number = number
                    number = next_chapter_number(number)
                    entries.append(node)
                stack.append(node)
                continue

            if line[:1].isspace():
                raise InvalidSummaryFormat(
                    f"{self.path}:{lineno}: unexpected indented line {line.strip()!r}",
                    self.path,
                    lineno,
                )

            if match := HEADING_RE.match(line):
                entries.append(Section(title=match.group("title")))
            elif match := LINK_RE.match(line):
                entries.append(
                    Chapter(
                        title=match.group("title").strip(),
                        content=self._resolve(match.group("target"), lineno),
                    )
                )
            else:
                raise InvalidSummaryFormat(
                    f"{self.path}:{lineno}: expected a heading, a link or a list of links, "
                    f"found {line.strip()!r}",
                    self.path,
                    lineno,
                )

            # Anything but a bullet ends the current list
            stack.clear()
            number = "1"

        items = [
            self._to_chapter(entry, entry.number) if isinstance(entry, _ListNode) else entry
            for entry in entries
        ]
        logger.debug("Parsed %d items from %s", len(items), self.path)
        return items

    def _to_chapter(self, node: _ListNode, number: str) -> Chapter:
        subchapters: list[Item] = []
        child_number = f"{number}.1"
        for child in node.children:
            subchapters.append(self._to_chapter(child, child_number))
            child_number = next_chapter_number(child_number)
        return Chapter(
            title=node.title, number=number, content=node.content, subchapters=subchapters
        )

    def _resolve(self, target: str, lineno: int) -> Path:
        """Resolve a link target relative to the summary file's directory."""
        content = Path(os.path.normpath(self.path.parent / target))
        if not content.is_file():
            raise MissingChapterContent(
                f"{self.path}:{lineno}: chapter content {target} does not exist ({content})",
                content,
            )
        return content


def find_summary_file(src_dir: Path) -> Path | None:
    """Return the navigation file of ``src_dir``, if there is one."""
    for name in SUMMARY_FILE_NAMES:
        candidate = src_dir / name
        if candidate.is_file():
            return candidate
    return None
