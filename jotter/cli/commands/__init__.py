"""
FILE: jotter/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

from .system import (
    version,
    help,
)

__all__ = [
    "version",
    "help",
]
