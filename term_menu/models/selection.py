"""Selection state machines shared by single- and multi-choice menus.

Both machines start looping with the first row highlighted and react to
the same command set. ``Command.ENTER`` is the only command that ends
the loop; once confirmed, ``active`` holds ``NO_INDEX`` so the final
redraw shows every row without highlight.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from term_menu.config import (
    MULTI_CHECKED_PREFIX,
    MULTI_UNCHECKED_PREFIX,
    NO_INDEX,
    SINGLE_SELECTED_PREFIX,
    SINGLE_UNSELECTED_PREFIX,
)
from term_menu.models.command import Command
from term_menu.utils.coercion import coerce_checked, coerce_index, coerce_options


@dataclass
class Selection(ABC):
    """Cursor position and confirmation state over a fixed option list."""

    options: tuple[str, ...]
    active: int = field(default=0, init=False)
    confirmed: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.options = coerce_options(self.options)

    def __len__(self) -> int:
        return len(self.options)

    def move_up(self) -> None:
        """Move the cursor up, wrapping to the last row."""
        self.active = (self.active - 1) % len(self.options)

    def move_down(self) -> None:
        """Move the cursor down, wrapping to the first row."""
        self.active = (self.active + 1) % len(self.options)

    def confirm(self) -> None:
        """Enter the terminal state."""
        self.active = NO_INDEX
        self.confirmed = True

    def apply(self, command: Command | None) -> bool:
        """Apply one decoded command. Returns True once confirmed."""
        if self.confirmed or command is None:
            return self.confirmed

        if command is Command.UP:
            self.move_up()
        elif command is Command.DOWN:
            self.move_down()
        elif command is Command.SPACE:
            self.toggle()
        elif command.ends_session:
            self.confirm()

        return self.confirmed

    @abstractmethod
    def toggle(self) -> None:
        """React to space on the highlighted row."""
        ...

    @abstractmethod
    def prefix(self, index: int) -> str:
        """Selection indicator drawn before option ``index``."""
        ...

    @property
    @abstractmethod
    def result(self) -> Any:
        """Value handed back to the caller."""
        ...


@dataclass
class MultiSelection(Selection):
    """Checkbox menu: every option toggles independently."""

    checked: list[bool] = field(default_factory=list)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.checked = coerce_checked(self.checked, len(self.options))

    def toggle(self) -> None:
        self.checked[self.active] = not self.checked[self.active]

    def prefix(self, index: int) -> str:
        return MULTI_CHECKED_PREFIX if self.checked[index] else MULTI_UNCHECKED_PREFIX

    @property
    def result(self) -> list[bool]:
        return list(self.checked)


@dataclass
class SingleSelection(Selection):
    """Radio menu: zero or one option chosen at a time."""

    selected: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        self.selected = coerce_index(self.selected, len(self.options))

    def toggle(self) -> None:
        """Choose the highlighted row, or clear the choice if it is already chosen."""
        if self.active == self.selected:
            self.selected = NO_INDEX
        else:
            self.selected = self.active

    def prefix(self, index: int) -> str:
        return SINGLE_SELECTED_PREFIX if index == self.selected else SINGLE_UNSELECTED_PREFIX

    @property
    def selected_option(self) -> str | None:
        """The chosen label, or None when nothing is chosen."""
        if 0 <= self.selected < len(self.options):
            return self.options[self.selected]
        return None

    @property
    def result(self) -> str:
        return self.selected_option or ""

