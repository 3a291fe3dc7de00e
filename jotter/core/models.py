"""
FILE: jotter/core/models.py
PURPOSE: Domain models for the editor state and key events
EXPORTS:
  - Mode (enum)
  - KeyKind (enum)
  - KeyEvent (dataclass)
  - AppState (dataclass)
DEPENDENCIES:
  - dataclasses (stdlib)
  - enum (stdlib)
  - typing (stdlib)
NOTES:
  - AppState is created once per run and mutated in place by service
  - tasks is append-only; nothing removes or rewrites an entry
  - input survives a round-trip through Normal mode
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Mode(Enum):
    """Interaction mode deciding how key presses are interpreted."""

    NORMAL = "normal"
    EDITING = "editing"


class KeyKind(Enum):
    """Kinds of key press the state machine distinguishes."""

    CHAR = "char"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """A single normalized key press."""

    kind: KeyKind
    char: Optional[str] = None

    @classmethod
    def from_char(cls, char: str) -> "KeyEvent":
        """Build a CHAR event for one printable character."""
        return cls(KeyKind.CHAR, char)

    def is_char(self, char: str) -> bool:
        return self.kind is KeyKind.CHAR and self.char == char


@dataclass
class AppState:
    """
    Editor state owned by the interaction loop.

    Attributes:
        tasks: Committed task strings in insertion order
        input: Text being composed, emptied on each commit
        mode: Current interaction mode
    """

    tasks: List[str] = field(default_factory=list)
    input: str = ""
    mode: Mode = Mode.NORMAL

    @property
    def is_editing(self) -> bool:
        return self.mode is Mode.EDITING
