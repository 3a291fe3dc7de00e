"""
FILE: jotter/tui/keys.py
PURPOSE: Translate prompt_toolkit key presses into KeyEvents
EXPORTS:
  - to_key_event(key_press) -> KeyEvent
DEPENDENCIES:
  - prompt_toolkit (KeyPress, Keys)
  - jotter.core.models (KeyEvent, KeyKind)
NOTES:
  - Keys is a str enum, so it must be checked before plain characters
  - DEL (0x7f) and ^H both decode to Keys.ControlH (Backspace)
  - Arrows, control keys, mouse reports, CPR responses and pastes are OTHER
"""

from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys

from ..core.models import KeyEvent, KeyKind

# Raw mode delivers Enter as ^M; some terminals send ^J
ENTER_KEYS = (Keys.ControlM, Keys.ControlJ)

_SPECIAL_KEYS = {
    Keys.Escape: KeyKind.ESCAPE,
    Keys.ControlH: KeyKind.BACKSPACE,
}


def to_key_event(key_press: KeyPress) -> KeyEvent:
    """
    Convert a parsed key press to a KeyEvent.

    Args:
        key_press: KeyPress produced by a prompt_toolkit Input

    Returns:
        KeyEvent; unknown keys map to KeyKind.OTHER
    """
    key = key_press.key

    if isinstance(key, Keys):
        if key in ENTER_KEYS:
            return KeyEvent(KeyKind.ENTER)
        return KeyEvent(_SPECIAL_KEYS.get(key, KeyKind.OTHER))

    if len(key) == 1 and key.isprintable():
        return KeyEvent.from_char(key)

    return KeyEvent(KeyKind.OTHER)
