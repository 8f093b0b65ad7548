"""Logical commands decoded from key presses."""

from enum import Enum


class Command(Enum):
    """A key press the selection state machines understand."""

    UP = "up"
    DOWN = "down"
    SPACE = "space"
    ENTER = "enter"

    @property
    def ends_session(self) -> bool:
        """Whether this command confirms the menu."""
        return self is Command.ENTER
