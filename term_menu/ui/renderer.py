"""Drawing of option lines and the navigation legend."""

from term_menu.config import (
    CHECKMARK,
    CHECKMARK_COLOR,
    LEGEND,
    REVERSE_OFF,
    REVERSE_ON,
    STYLE_RESET,
)
from term_menu.models import Selection
from term_menu.ui.terminal import TerminalControl


class Renderer:
    """Draws option rows at fixed terminal rows."""

    def __init__(self, control: TerminalControl) -> None:
        self.control = control

    def format_prefix(self, prefix: str) -> str:
        """Color a checkmark prefix; other prefixes are drawn verbatim."""
        if CHECKMARK in prefix:
            return f"[{CHECKMARK_COLOR}{CHECKMARK}{STYLE_RESET}]"
        return prefix

    def inactive_line(self, label: str, prefix: str) -> str:
        return f"{self.format_prefix(prefix)}\t{STYLE_RESET}{label}"

    def active_line(self, label: str, prefix: str) -> str:
        return f"{self.format_prefix(prefix)}\t{REVERSE_ON}{label}{REVERSE_OFF}"

    def draw_inactive(self, label: str, prefix: str) -> None:
        self.control.write(self.inactive_line(label, prefix))

    def draw_active(self, label: str, prefix: str) -> None:
        self.control.write(self.active_line(label, prefix))

    def print_options(
        self, selection: Selection, start_row: int, active_index: int | None = None
    ) -> None:
        """Redraw every option, highlighting ``active_index``.

        Defaults to the selection's cursor. An index outside the option
        range draws every row inactive.
        """
        if active_index is None:
            active_index = selection.active

        for i, label in enumerate(selection.options):
            self.control.move_cursor(start_row + i)
            if i == active_index:
                self.draw_active(label, selection.prefix(i))
            else:
                self.draw_inactive(label, selection.prefix(i))

    def print_legend(self) -> None:
        """Print the navigation help above the menu."""
        for line in LEGEND:
            self.control.write(line + "\n")
