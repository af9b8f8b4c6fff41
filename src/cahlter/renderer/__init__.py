"""Renderer module - Turns the content model into HTML pages."""

from .context import RenderContext
from .page import PageRenderer, convert_markdown, render


__all__ = ["PageRenderer", "RenderContext", "convert_markdown", "render"]
