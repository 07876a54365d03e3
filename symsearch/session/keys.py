"""Key vocabulary understood by a search session."""

from enum import Enum
from typing import Optional


class KeyCommand(Enum):
    """Commands a search session reacts to."""

    ACTIVATE = "activate"
    CANCEL = "cancel"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"


# Key names that trigger a command; modifier-prefixed names are not listed
KEY_COMMANDS = {
    "Enter": KeyCommand.ACTIVATE,
    "Escape": KeyCommand.CANCEL,
    "Esc": KeyCommand.CANCEL,
    "ArrowUp": KeyCommand.MOVE_UP,
    "Up": KeyCommand.MOVE_UP,
    "ArrowDown": KeyCommand.MOVE_DOWN,
    "Down": KeyCommand.MOVE_DOWN,
}

# Keys whose name is affected by Shift
_NAMED_KEYS = frozenset(KEY_COMMANDS)


def key_string(key: str, shift: bool = False, alt: bool = False, ctrl: bool = False) -> str:
    """Compose a key name with its modifiers, e.g. "Ctrl+Shift+Enter".

    Shift is only spelled out for named keys; for printable keys it is
    already reflected in the character itself.
    """
    name = key
    if shift and key in _NAMED_KEYS:
        name = f"Shift+{name}"
    if alt:
        name = f"Alt+{name}"
    if ctrl:
        name = f"Ctrl+{name}"
    return name


def parse_key(name: str) -> Optional[KeyCommand]:
    """Map a composed key name to a command, or None if it is not handled."""
    return KEY_COMMANDS.get(name)


def is_focus_shortcut(key: str, ctrl: bool = False, meta: bool = False) -> bool:
    """True for the global "focus the search input" shortcut (Ctrl/Cmd+K or /)."""
    return (key == "k" and (ctrl or meta)) or key == "/"
