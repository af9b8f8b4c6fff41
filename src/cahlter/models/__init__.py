"""Data models for cahlter."""

from .config import CONFIG_FILE, Appearance, CahlterSettings, Config, General, Language, Link
from .content import Chapter, Content, Item, Section, Summary


__all__ = [
    "CONFIG_FILE",
    "Appearance",
    "CahlterSettings",
    "Chapter",
    "Config",
    "Content",
    "General",
    "Item",
    "Language",
    "Link",
    "Section",
    "Summary",
]
