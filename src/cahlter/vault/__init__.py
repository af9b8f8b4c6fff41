"""Vault module - Builds a static site out of a directory of markdown files."""

from .builder import SiteBuilder, build
from .vault import Vault


__all__ = ["SiteBuilder", "Vault", "build"]
