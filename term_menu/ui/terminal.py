"""Low-level cursor control on a blessed terminal."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from blessed import Terminal

from term_menu.config import CURSOR_HIDE, CURSOR_POSITION, CURSOR_SHOW
from term_menu.errors import TerminalNotInteractiveError

logger = logging.getLogger(__name__)


class TerminalControl:
    """Cursor visibility, positioning and position queries.

    Sequences are written verbatim rather than looked up in terminfo so
    every terminal receives the same bytes.
    """

    def __init__(self, term: Terminal) -> None:
        self.term = term

    def write(self, text: str) -> None:
        """Write text to the terminal stream and flush."""
        print(text, end="", file=self.term.stream, flush=True)

    def hide_cursor(self) -> None:
        self.write(CURSOR_HIDE)

    def show_cursor(self) -> None:
        self.write(CURSOR_SHOW)

    def move_cursor(self, row: int, col: int = 1) -> None:
        """Move the write cursor to 1-based ``(row, col)``."""
        self.write(CURSOR_POSITION.format(row=row, col=col))

    def query_cursor_row(self) -> int:
        """Ask the terminal where the cursor is and return its 1-based row.

        Blocks until the terminal answers the position report.
        """
        row, _col = self.term.get_location()
        if row < 0:
            raise TerminalNotInteractiveError("Terminal did not report the cursor position")
        # blessed reports 0-based coordinates
        return row + 1

    @contextmanager
    def hidden_cursor(self) -> Iterator[None]:
        """Hide the cursor for the duration of the block, showing it on every exit."""
        self.hide_cursor()
        try:
            yield
        finally:
            self.show_cursor()
            logger.debug("cursor restored")
