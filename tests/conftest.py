"""Shared fixtures: a scripted stand-in for blessed.Terminal."""

import curses
import io
from contextlib import contextmanager

import pytest
from blessed.keyboard import Keystroke

KEYSTROKES = {
    "up": lambda: Keystroke("\x1b[A", curses.KEY_UP, "KEY_UP"),
    "down": lambda: Keystroke("\x1b[B", curses.KEY_DOWN, "KEY_DOWN"),
    "right": lambda: Keystroke("\x1b[C", curses.KEY_RIGHT, "KEY_RIGHT"),
    "enter": lambda: Keystroke("\n", curses.KEY_ENTER, "KEY_ENTER"),
    "escape": lambda: Keystroke("\x1b", 361, "KEY_ESCAPE"),
    "space": lambda: Keystroke(" "),
}


def keystroke(name: str) -> Keystroke:
    """Build the keystroke blessed would return for ``name`` (or a literal char)."""
    if isinstance(name, Keystroke):
        return name
    if name in KEYSTROKES:
        return KEYSTROKES[name]()
    return Keystroke(name)


class FakeTerminal:
    """Records output and replays keystrokes.

    ``get_location`` reports the starting row plus every newline written
    so far, like a tall terminal that never scrolls.
    """

    def __init__(self, keys=(), row=5, is_a_tty=True):
        self.stream = io.StringIO()
        self.keys = [keystroke(k) if isinstance(k, str) else k for k in keys]
        self.row = row
        self.is_a_tty = is_a_tty
        self.in_cbreak = False
        self.esc_delays = []

    @contextmanager
    def cbreak(self):
        self.in_cbreak = True
        try:
            yield
        finally:
            self.in_cbreak = False

    def inkey(self, timeout=None, esc_delay=0.35):
        self.esc_delays.append(esc_delay)
        if not self.keys:
            raise AssertionError("menu asked for more keys than scripted")
        key = self.keys.pop(0)
        if isinstance(key, type) and issubclass(key, BaseException):
            raise key()
        return key

    def get_location(self, timeout=None):
        newlines = self.stream.getvalue().count("\n")
        return self.row - 1 + newlines, 0

    @property
    def output(self):
        return self.stream.getvalue()


@pytest.fixture
def make_term():
    def factory(*keys, **kwargs):
        return FakeTerminal(keys, **kwargs)

    return factory
