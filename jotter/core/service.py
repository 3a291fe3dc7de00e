"""
FILE: jotter/core/service.py
PURPOSE: Mode state machine - applies one key press to the editor state
EXPORTS:
  - handle_key(state, event) -> bool
  - enter_editing(state) -> None
  - leave_editing(state) -> None
  - append_char(state, char) -> None
  - delete_last_char(state) -> None
  - commit_input(state) -> str
DEPENDENCIES:
  - jotter.core.models (AppState, Mode, KeyEvent, KeyKind)
  - jotter.core.constants (QUIT_KEY, EDIT_KEY)
NOTES:
  - Every key press causes at most one mutation
  - Unrecognized keys are no-ops, never errors
  - QUIT_KEY ends the session from either mode, so a literal "q" cannot
    be typed into a task; unsaved input is discarded
  - Esc keeps the input buffer; re-entering Editing resumes it
"""

import logging

from .constants import EDIT_KEY, QUIT_KEY
from .models import AppState, KeyEvent, KeyKind, Mode

logger = logging.getLogger(__name__)


# --- Single transitions ---


def enter_editing(state: AppState) -> None:
    """Switch from Normal to Editing mode."""
    state.mode = Mode.EDITING
    logger.debug("mode: normal -> editing (buffer=%r)", state.input)


def leave_editing(state: AppState) -> None:
    """Switch back to Normal mode, keeping the input buffer as-is."""
    state.mode = Mode.NORMAL
    logger.debug("mode: editing -> normal (buffer=%r)", state.input)


def append_char(state: AppState, char: str) -> None:
    state.input += char


def delete_last_char(state: AppState) -> None:
    """Drop the last character of the buffer; empty buffer is left alone."""
    state.input = state.input[:-1]


def commit_input(state: AppState) -> str:
    """
    Move the input buffer into the task list.

    Empty input is committed as an empty task; there is no validation.

    Returns:
        The committed text
    """
    text = state.input
    state.tasks.append(text)
    state.input = ""
    logger.info("task %d committed: %r", len(state.tasks) - 1, text)
    return text


# --- Dispatch ---


def _handle_normal(state: AppState, event: KeyEvent) -> None:
    if event.is_char(EDIT_KEY):
        enter_editing(state)


def _handle_editing(state: AppState, event: KeyEvent) -> None:
    if event.kind is KeyKind.CHAR:
        append_char(state, event.char)
    elif event.kind is KeyKind.ENTER:
        commit_input(state)
    elif event.kind is KeyKind.ESCAPE:
        leave_editing(state)
    elif event.kind is KeyKind.BACKSPACE:
        delete_last_char(state)


def handle_key(state: AppState, event: KeyEvent) -> bool:
    """
    Apply one key press to the state.

    Args:
        state: Editor state, mutated in place
        event: Normalized key press

    Returns:
        False when the program should quit, True to keep running
    """
    if event.is_char(QUIT_KEY):
        if state.is_editing and state.input:
            logger.info("quit while editing, discarding %r", state.input)
        else:
            logger.info("quit from %s mode", state.mode.value)
        return False

    if state.mode is Mode.NORMAL:
        _handle_normal(state, event)
    else:
        _handle_editing(state, event)
    return True
