"""
FILE: jotter/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - QUIT_KEY, EDIT_KEY: Command keys
  - MENU_TABS, MENU_TITLE, INPUT_TITLE, TASKS_TITLE: Panel labels
  - NORMAL_HELP, EDITING_HELP: Help line fragments
  - Style names for the renderer
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Single source of truth for key bindings and labels
  - Help fragments are (text, is_key) pairs; keys are rendered bold
"""

# Command keys
QUIT_KEY = "q"
EDIT_KEY = "a"

# Menu strip (placeholder for future tabs; only one exists)
MENU_TABS = ("Home",)
MENU_TITLE = "Menu"
MENU_DIVIDER = "|"

# Box titles
INPUT_TITLE = "Input"
TASKS_TITLE = "Tasks"

# Help line fragments
NORMAL_HELP = (
    ("Press ", False),
    ("q", True),
    (" to exit, ", False),
    ("a", True),
    (" to add task", False),
)
EDITING_HELP = (
    ("Press ", False),
    ("Esc", True),
    (" to stop adding, ", False),
    ("Enter", True),
    (" to add task in todo list", False),
)

# Styles
MENU_BORDER_STYLE = "cyan"
MENU_TAB_STYLE = "white"
EDITING_INPUT_STYLE = "yellow"
KEY_STYLE = "bold"
FRAME_MARGIN = 2

# Logging
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
