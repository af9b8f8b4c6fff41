"""Pydantic models for the vault's table of contents."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


# Empty (unnumbered) or dot-separated positive integers: "1", "1.2", "1.2.3"
CHAPTER_NUMBER_PATTERN = r"^(?:[1-9][0-9]*(?:\.[1-9][0-9]*)*)?$"


class Section(BaseModel):
    """Non-navigable heading grouping chapters in the sidebar."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["section"] = "section"
    title: str


class Chapter(BaseModel):
    """Navigable content node backed by a markdown file.

    Chapters own their subchapters; order is the sidebar order.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["chapter"] = "chapter"
    title: str = Field(..., description="Title shown in the sidebar")
    number: str = Field(
        default="",
        pattern=CHAPTER_NUMBER_PATTERN,
        description="Hierarchical number, empty for unnumbered chapters",
    )
    content: Path = Field(..., description="Markdown file backing the chapter")
    subchapters: list["Item"] = Field(default_factory=list)

    def has_subchapters(self) -> bool:
        """Check if chapter has nested items."""
        return len(self.subchapters) > 0

    def is_numbered(self) -> bool:
        return bool(self.number)


Item = Annotated[Chapter | Section, Field(discriminator="kind")]

# Enable forward references for recursive Chapter model
Chapter.model_rebuild()


class Summary(BaseModel):
    """Ordered top-level table of contents."""

    model_config = ConfigDict(frozen=True)

    items: list[Item] = Field(default_factory=list)


class Content:
    """A vault's content, built fresh for every build.

    Wraps a :class:`Summary` and exposes the top-level chapters and
    sections as read-only views.
    """

    def __init__(self, summary: Summary):
        self._summary = summary

    @classmethod
    def from_path(cls, src_dir: Path | str, ignore: tuple[str, ...] = ()) -> "Content":
        """Summarize ``src_dir`` with the matching strategy."""
        # pylint: disable=import-outside-toplevel
        from ..summary import summarize  # noqa: PLC0415

        return cls(summarize(src_dir, ignore=ignore))

    @property
    def summary(self) -> Summary:
        return self._summary

    @property
    def chapters(self) -> list[Chapter]:
        """Top-level chapters in sidebar order."""
        return [item for item in self._summary.items if isinstance(item, Chapter)]

    @property
    def sections(self) -> list[Section]:
        """Top-level sections in sidebar order."""
        return [item for item in self._summary.items if isinstance(item, Section)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Content):
            return NotImplemented
        return self._summary == other._summary

    def __repr__(self) -> str:
        return f"Content(summary={self._summary!r})"
