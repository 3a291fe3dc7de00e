"""
FILE: jotter/cli/main.py
PURPOSE: Typer-based CLI entry point
EXPORTS:
  - app (Typer application, from cli.app)
  - main() (entry point)
  - version() - Show version
  - help() - Show usage and key bindings
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output)
  - jotter.tui (interactive editor)
NOTES:
  - Running "jotter" with no command opens the editor
  - --log-file is the only option; the editor itself takes no arguments
  - Exit codes: 0=success, 1=error
"""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from .app import app, configure_logging, error_console


@app.callback(invoke_without_command=True)
def default_command(
    ctx: typer.Context,
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Write debug logs to this file",
        dir_okay=False,
        writable=True,
    ),
):
    """
    Default callback - opens the editor when no command is specified.

    If a subcommand is invoked, this only sets up logging.
    """
    configure_logging(log_file)

    if ctx.invoked_subcommand is None:
        # Import here to avoid loading terminal dependencies for one-shot commands
        from ..tui import main as tui_main
        try:
            tui_main()
        except Exception as e:
            error_console.print(f"[red]Error starting editor:[/red] {escape(str(e))}")
            raise typer.Exit(1)


# Import command modules to register commands with app
from .commands import (
    version,
    help,
)


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
