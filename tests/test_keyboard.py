"""Test keyboard input handling."""

import pytest
from lineview.keyboard import KeyboardHandler, KeyEvent, KeyType


class MockTerminal:
    """Mock terminal interface for testing."""

    def __init__(self, keys=()):
        self._key_queue = list(keys)

    def get_key(self):
        """Mock get_key that returns from queue."""
        if self._key_queue:
            return self._key_queue.pop(0)
        return None


@pytest.mark.parametrize("token,value", [
    ("<UP>", "up"),
    ("<DOWN>", "down"),
    ("<LEFT>", "left"),
    ("<RIGHT>", "right"),
    ("<HOME>", "home"),
    ("<END>", "end"),
    ("<PAGEUP>", "page_up"),
    ("<PAGEDOWN>", "page_down"),
])
def test_special_tokens(token, value):
    handler = KeyboardHandler(MockTerminal())
    event = handler.parse_key(token)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == value
    assert event.raw == token


@pytest.mark.parametrize("key", ["l", "j", "k", "i", "L", "J", "K", "I", "d", "q"])
def test_command_letters_are_regular(key):
    event = KeyboardHandler(MockTerminal()).parse_key(key)
    assert event == KeyEvent(KeyType.REGULAR, key, key)


def test_angle_brackets_are_regular_characters():
    handler = KeyboardHandler(MockTerminal())
    assert handler.parse_key("<").value == "<"
    assert handler.parse_key(">").value == ">"
    assert handler.parse_key(">").key_type == KeyType.REGULAR


def test_ctrl_tokens():
    handler = KeyboardHandler(MockTerminal())
    event = handler.parse_key("<Ctrl-c>")
    assert event.key_type == KeyType.CTRL
    assert event.value == "c"


def test_raw_control_characters():
    handler = KeyboardHandler(MockTerminal())
    assert handler.parse_key("\x03") == KeyEvent(KeyType.CTRL, "c", "\x03")
    assert handler.parse_key("\r") == KeyEvent(KeyType.CTRL, "m", "\r")
    assert handler.parse_key("\n") == KeyEvent(KeyType.CTRL, "j", "\n")
    assert handler.parse_key("\x1b").key_type == KeyType.REGULAR


def test_enter_is_plain_ctrl_key():
    handler = KeyboardHandler(MockTerminal())
    assert handler.parse_key("<Ctrl-j>") == KeyEvent(KeyType.CTRL, "j", "<Ctrl-j>")
    assert handler.parse_key("<Ctrl-m>") == KeyEvent(KeyType.CTRL, "m", "<Ctrl-m>")


@pytest.mark.parametrize("token,name", [
    ("<ESC>", "esc"),
    ("<SPACE>", "space"),
    ("<TAB>", "tab"),
])
def test_unbound_named_keys_keep_their_names(token, name):
    event = KeyboardHandler(MockTerminal()).parse_key(token)
    assert event == KeyEvent(KeyType.SPECIAL, name, token)


def test_unknown_token_is_special():
    event = KeyboardHandler(MockTerminal()).parse_key("<F5>")
    assert event.key_type == KeyType.SPECIAL
    assert event.value == "f5"


def test_get_key_event_reads_terminal():
    handler = KeyboardHandler(MockTerminal(["<DOWN>"]))
    event = handler.get_key_event()
    assert event.value == "down"
    assert handler.get_key_event() is None


def test_events_stops_when_input_ends():
    handler = KeyboardHandler(MockTerminal(["k", "<UP>", "q"]))
    assert [e.value for e in handler.events()] == ["k", "up", "q"]
