"""
FILE: jotter/cli/app.py
PURPOSE: Shared Typer application and consoles for CLI commands
EXPORTS:
  - app (Typer application)
  - console, error_console (rich consoles)
  - configure_logging(log_file) - Enable file logging
  - __version__
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output)
  - logging (stdlib)
NOTES:
  - Lives apart from cli.main so "python -m jotter.cli.main" and the
    command modules share one app instance
  - Logging goes to a file only; the terminal belongs to the editor
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .. import __version__
from ..core.constants import LOG_FORMAT

# Typer app setup
app = typer.Typer(
    name="jotter",
    help="Minimal terminal task list editor",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)


def configure_logging(log_file: Optional[Path]) -> None:
    """
    Send debug logs to log_file; without it nothing is logged.

    Args:
        log_file: Destination file, or None to leave logging off
    """
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format=LOG_FORMAT,
    )
    logging.getLogger(__name__).debug("jotter v%s logging to %s", __version__, log_file)
