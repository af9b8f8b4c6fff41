"""
Site builder - Writes one HTML page per chapter into the output directory.
"""

import logging
from pathlib import Path

from ..models.content import Chapter, Content
from ..renderer.context import RenderContext
from ..renderer.page import PageRenderer
from ..utils.exceptions import WriteFailed


logger = logging.getLogger("Cahlter.Builder")


class SiteBuilder:
    """
    Materializes the pages of a vault.

    The output tree mirrors the source tree: every page is written where
    its sidebar URL points to, so a chapter with subchapters gets the
    directory its content lives in, holding its own page and the pages of
    its subchapters.
    """

    def __init__(self, context: RenderContext, renderer: PageRenderer | None = None):
        self.context = context
        self.renderer = renderer if renderer is not None else PageRenderer(context)

    def build(self, content: Content, destination: Path | str) -> list[Path]:
        """
        Write every chapter of ``content`` under ``destination``.

        Returns:
            Paths of the written pages, in traversal order

        Raises:
            WriteFailed: If a directory or a page cannot be created
        """
        destination = Path(destination)
        self._create_dir(destination)

        written: list[Path] = []
        for chapter in content.chapters:
            self._write_chapter(chapter, destination, written)
        return written

    def page_path(self, chapter: Chapter, destination: Path) -> Path:
        """Output file of a chapter: its URL resolved under ``destination``."""
        return destination.joinpath(*self.context.target(chapter.content).split("/")[1:])

    def _write_chapter(self, chapter: Chapter, destination: Path, written: list[Path]) -> None:
        path = self.page_path(chapter, destination)
        self._create_dir(path.parent)
        self._write_file(path, self.renderer.render(chapter))
        written.append(path)

        # Depth-first, in sidebar order
        for item in chapter.subchapters:
            if isinstance(item, Chapter):
                self._write_chapter(item, destination, written)

    @staticmethod
    def _create_dir(path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteFailed(f"Could not create directory {path}: {e}") from e

    @staticmethod
    def _write_file(path: Path, html: str) -> None:
        logger.debug("Writing %s", path)
        try:
            path.write_text(html, encoding="utf-8")
        except OSError as e:
            raise WriteFailed(f"Could not write {path}: {e}") from e


def build(content: Content, context: RenderContext, destination: Path | str) -> None:
    """Render and write every chapter of ``content`` under ``destination``."""
    SiteBuilder(context).build(content, destination)
