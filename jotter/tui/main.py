"""
FILE: jotter/tui/main.py
PURPOSE: Interaction loop for the full-screen task list editor
EXPORTS:
  - run_app(session, state) - Draw/read/dispatch loop
  - run() - Open a terminal session and run the loop
  - main() - Entry point for the editor
DEPENDENCIES:
  - rich (console output for fatal errors)
  - jotter.core.service (state machine)
  - jotter.tui.session (terminal ownership)
  - jotter.tui.display (frame rendering)
  - jotter.tui.keys (key translation)
NOTES:
  - Strictly sequential: render, wait for one event, apply one transition
  - A resize arrives as an ignored key, so the loop just redraws
  - State is created here and passed explicitly; there is no global
  - Session errors are fatal and reported once, in main()
"""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape

from ..core import service
from ..core.exceptions import JotterError
from ..core.models import AppState
from .display import build_layout
from .keys import to_key_event
from .session import TerminalSession

logger = logging.getLogger(__name__)

# Rich consoles for the frame and for fatal errors
console = Console()
error_console = Console(stderr=True)


def run_app(session: TerminalSession, state: AppState) -> None:
    """
    Run the editor until the quit key is pressed.

    Args:
        session: Open terminal session to draw on and read from
        state: Editor state, mutated in place
    """
    while True:
        session.draw(build_layout(state))
        event = to_key_event(session.read_key())
        if not service.handle_key(state, event):
            break


def run(session: Optional[TerminalSession] = None) -> AppState:
    """
    Start with an empty task list in Normal mode and run the editor.

    Args:
        session: Session to use (defaults to one on the real terminal)

    Returns:
        The final state, discarded by callers that only need the side effects
    """
    state = AppState()
    with session or TerminalSession(console=console) as active:
        run_app(active, state)
    logger.info("editor closed with %d task(s)", len(state.tasks))
    return state


def main() -> None:
    """
    Entry point for the editor.

    Called when user runs: jotter
    """
    try:
        run()
    except JotterError as e:
        error_console.print(f"[red]Fatal error:[/red] {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
