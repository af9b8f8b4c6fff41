"""
Page renderer - Turns one chapter into a complete HTML document.
"""

import logging
from collections.abc import Callable
from pathlib import Path

import markdown
from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from markupsafe import Markup

from ..models.content import Chapter, Item, Section
from ..utils.exceptions import RenderFailed
from .context import RenderContext


logger = logging.getLogger("Cahlter.Renderer")

DEFAULT_STYLESHEET = "/main.css"
DEFAULT_SCRIPT = "/index.js"
MARKDOWN_EXTENSIONS = ["extra", "sane_lists"]


def convert_markdown(text: str) -> str:
    """Convert markdown to HTML."""
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS, output_format="html")


class PageRenderer:
    """
    Renders chapters of a vault into HTML pages.

    A page is made of:
    - A header with the configured links and the theme selector
    - A sidebar with the whole table of contents
    - The chapter's markdown converted to HTML
    """

    def __init__(
        self,
        context: RenderContext,
        converter: Callable[[str], str] = convert_markdown,
    ):
        """
        Initialize the renderer.

        Args:
            context: Content, configuration and source root of the build
            converter: Markdown to HTML conversion function
        """
        self.context = context
        self.converter = converter

        templates_dir = Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(enabled_extensions=("html", "j2")),
            keep_trailing_newline=True,
        )

    def render(self, chapter: Chapter) -> str:
        """
        Render the complete HTML document of a chapter.

        Raises:
            RenderFailed: If the markdown cannot be read or a template fails
        """
        try:
            markdown_text = chapter.content.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RenderFailed(f"Failed to read chapter {chapter.content}: {e}") from e

        config = self.context.config
        try:
            template = self.env.get_template("page.html.j2")
            return template.render(
                theme=config.appearance.default_theme,
                site_title=config.general.title,
                chapter_title=chapter.title,
                stylesheets=self.stylesheets(),
                scripts=[DEFAULT_SCRIPT] if config.general.use_default else [],
                header=Markup(self.render_header()),
                sidebar=Markup(self.render_sidebar(current=chapter)),
                body=Markup(self.converter(markdown_text)),
            )
        except TemplateError as e:
            raise RenderFailed(f"Failed to render chapter {chapter.content}: {e}") from e

    def render_header(self) -> str:
        """Render the header with the site links."""
        template = self.env.get_template("header.html.j2")
        return template.render(
            links=self.context.config.links,
            themes=self.context.config.appearance.themes,
        )

    def render_sidebar(self, current: Chapter | None = None) -> str:
        """Render the sidebar with every item of the table of contents."""
        table_of_contents = "".join(
            self.render_item(item, current) for item in self.context.content.summary.items
        )
        template = self.env.get_template("sidebar.html.j2")
        return template.render(
            title=self.context.config.general.title,
            table_of_contents=Markup(table_of_contents),
        )

    def render_item(self, item: Item, current: Chapter | None = None) -> str:
        if isinstance(item, Section):
            return self.render_sidebar_section(item)
        return self.render_sidebar_chapter(item, current)

    def render_sidebar_chapter(self, chapter: Chapter, current: Chapter | None = None) -> str:
        """Render a chapter link followed by its subchapters."""
        subchapters = "".join(self.render_item(item, current) for item in chapter.subchapters)
        enumerate_chapters = self.context.config.general.enumerate

        template = self.env.get_template("sidebar/chapter.html.j2")
        return template.render(
            title=chapter.title,
            number=chapter.number if enumerate_chapters else "",
            target=self.context.target(chapter.content),
            active=current is not None and current.content == chapter.content,
            subchapters=Markup(subchapters),
        )

    def render_sidebar_section(self, section: Section) -> str:
        template = self.env.get_template("sidebar/section.html.j2")
        return template.render(title=section.title)

    def stylesheets(self) -> list[str]:
        """Root-relative URLs of the stylesheets linked by every page.

        Custom stylesheets are copied flat into the output root, so only
        their base name is kept.
        """
        config = self.context.config
        stylesheets = [DEFAULT_STYLESHEET] if config.general.use_default else []
        stylesheets.extend("/" + Path(path).name for path in config.appearance.custom)
        return stylesheets


def render(chapter: Chapter, context: RenderContext) -> str:
    """Render one chapter of ``context`` into an HTML document."""
    logger.debug("Rendering %s", chapter.content)
    return PageRenderer(context).render(chapter)
