"""Keyboard input handling using curtsies-style tokens."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass(frozen=True)
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'l', 'left', 'page_down')
    raw: str  # The token as delivered by curtsies


# Curtsies names that differ from ours
_ALIASES = {
    'pageup': 'page_up',
    'page_up': 'page_up',
    'pagedown': 'page_down',
    'page_down': 'page_down',
}

_SPECIALS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'page_up', 'page_down',
}


class KeyboardHandler:
    """Turns terminal key tokens into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self) -> Optional[KeyEvent]:
        """Block for the next key and parse it."""
        key = self.terminal.get_key()
        if not key:
            return None
        return self.parse_key(key)

    def events(self):
        """Yield key events until input runs dry."""
        while (event := self.get_key_event()) is not None:
            yield event

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key name such as '<UP>', '<Ctrl-c>' or 'k'."""
        key_str = str(key)

        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            name = key_str[1:-1].lower().replace('+', '-')
            parts = name.split('-')
            base = _ALIASES.get(parts[-1], parts[-1])
            mods = set(parts[:-1])
            if 'ctrl' in mods and len(base) == 1:
                return KeyEvent(KeyType.CTRL, base, key_str)
            if not mods and len(base) == 1:
                return KeyEvent(KeyType.REGULAR, base, key_str)
            if base in _SPECIALS:
                return KeyEvent(KeyType.SPECIAL, base, key_str)
            # Unknown token; nothing is bound to it
            return KeyEvent(KeyType.SPECIAL, name, key_str)

        if len(key_str) == 1 and 1 <= ord(key_str) <= 26:  # Ctrl-A .. Ctrl-Z
            return KeyEvent(KeyType.CTRL, chr(ord('a') + ord(key_str) - 1), key_str)

        return KeyEvent(KeyType.REGULAR, key_str, key_str)
