"""
cahlter - A minimalistic static web site generator.

Turns a vault (a directory of markdown files) into a navigable
multi-page HTML site.
"""

__version__ = "0.1.0"

from .models import Chapter, Config, Content, Item, Section, Summary  # noqa: E402
from .renderer import RenderContext, render  # noqa: E402
from .summary import summarize  # noqa: E402
from .vault import Vault, build  # noqa: E402


__all__ = [
    "Chapter",
    "Config",
    "Content",
    "Item",
    "RenderContext",
    "Section",
    "Summary",
    "Vault",
    "__version__",
    "build",
    "render",
    "summarize",
]
