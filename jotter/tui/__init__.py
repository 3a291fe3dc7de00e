"""
FILE: jotter/tui/__init__.py
PURPOSE: Full-screen interactive editor package
EXPORTS:
  - main() (from tui.main)
DEPENDENCIES:
  - prompt_toolkit (raw input, key parsing, mouse mode)
  - rich (layout, alternate screen, drawing)
  - jotter.core.service (state machine)
"""

from .main import main

__all__ = ["main"]
