"""
cahlter CLI module.

This module provides the Click-based command-line interface for cahlter.
"""

from .commands import cli


__all__ = ["cli"]
