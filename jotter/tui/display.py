"""
FILE: jotter/tui/display.py
PURPOSE: Build the full-screen frame for the editor state
EXPORTS:
  - build_layout(state) -> Padding - Complete frame renderable
  - menu_text() -> Text - Tab strip contents
  - help_text(mode) -> Text - Mode-dependent help line
  - format_task(index, text) -> str - One task list row
  - tasks_text(tasks) -> Text - Task list contents
DEPENDENCIES:
  - rich (Layout, Panel, Padding, Text)
  - jotter.core.models (AppState, Mode)
  - jotter.core.constants (labels, styles)
NOTES:
  - Pure projection of state: nothing here mutates AppState
  - No retained diffing; every frame is rebuilt from scratch
  - Sizes come from the console at render time, so a resized terminal
    is picked up on the next redraw
  - Task text goes through Text, never markup, so "[x]" renders literally
"""

from typing import Sequence

from rich.layout import Layout
from rich.padding import Padding
from rich.panel import Panel
from rich.text import Text

from ..core.constants import (
    EDITING_HELP,
    EDITING_INPUT_STYLE,
    FRAME_MARGIN,
    INPUT_TITLE,
    KEY_STYLE,
    MENU_BORDER_STYLE,
    MENU_DIVIDER,
    MENU_TAB_STYLE,
    MENU_TABS,
    MENU_TITLE,
    NORMAL_HELP,
    TASKS_TITLE,
)
from ..core.models import AppState, Mode


def menu_text() -> Text:
    """Render the tab strip. Only "Home" exists and it is not selectable."""
    text = Text()
    for position, tab in enumerate(MENU_TABS):
        if position:
            text.append(f" {MENU_DIVIDER} ")
        text.append(tab, style=MENU_TAB_STYLE)
    return text


def help_text(mode: Mode) -> Text:
    """
    Build the help line for the current mode.

    Args:
        mode: Current interaction mode

    Returns:
        Text with key names in bold
    """
    fragments = NORMAL_HELP if mode is Mode.NORMAL else EDITING_HELP
    text = Text()
    for fragment, is_key in fragments:
        text.append(fragment, style=KEY_STYLE if is_key else None)
    return text


def format_task(index: int, text: str) -> str:
    return f"{index}: {text}"


def tasks_text(tasks: Sequence[str]) -> Text:
    """List every task as "<index>: <text>", zero-based, in insertion order."""
    return Text("\n".join(format_task(i, task) for i, task in enumerate(tasks)))


def build_layout(state: AppState) -> Padding:
    """
    Create the editor frame.

    Stacked top to bottom:
      - Menu strip with the single "Home" tab
      - Help line for the current mode
      - Input box (yellow while editing)
      - Task list filling the remaining height

    Args:
        state: Current editor state (read only)

    Returns:
        Renderable sized to whatever height the console gives it
    """
    menu_panel = Panel(
        menu_text(),
        title=MENU_TITLE,
        title_align="left",
        border_style=MENU_BORDER_STYLE,
    )

    input_panel = Panel(
        Text(state.input),
        title=INPUT_TITLE,
        title_align="left",
        style=EDITING_INPUT_STYLE if state.is_editing else "none",
    )

    tasks_panel = Panel(
        tasks_text(state.tasks),
        title=TASKS_TITLE,
        title_align="left",
    )

    layout = Layout(name="root")
    layout.split_column(
        Layout(menu_panel, name="menu", size=3),
        Layout(help_text(state.mode), name="help", size=1),
        Layout(input_panel, name="input", size=3),
        Layout(tasks_panel, name="tasks", ratio=1),
    )

    return Padding(layout, FRAME_MARGIN)
