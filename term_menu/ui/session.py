"""Menu sessions: one interactive call from first draw to result."""

import logging
import signal
import threading
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from blessed import Terminal

from term_menu.errors import TerminalNotInteractiveError
from term_menu.models import MultiSelection, Selection, SingleSelection
from term_menu.ui.keys import KeyDecoder
from term_menu.ui.renderer import Renderer
from term_menu.ui.terminal import TerminalControl
from term_menu.utils import is_true

logger = logging.getLogger(__name__)


@contextmanager
def interrupt_on_sigterm() -> Iterator[None]:
    """Turn SIGTERM into KeyboardInterrupt so it unwinds through cleanup."""
    # Signal handlers can only be installed from the main thread
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def handle_signal(signum: int, frame: Any) -> None:
        raise KeyboardInterrupt

    previous = signal.signal(signal.SIGTERM, handle_signal)
    try:
        yield
    finally:
        signal.signal(signal.SIGTERM, previous if previous is not None else signal.SIG_DFL)


class MenuSession:
    """Runs one selection state machine against the terminal.

    The option block is drawn on blank lines printed below the current
    cursor position. Echo is disabled and the cursor hidden only while
    the input loop runs; both come back on every exit path, including
    KeyboardInterrupt, which is re-raised once the terminal is restored.
    """

    def __init__(
        self,
        selection: Selection,
        legend: bool | str = False,
        term: Terminal | None = None,
    ) -> None:
        self.selection = selection
        self.legend = is_true(legend)
        self.term = term if term is not None else Terminal()
        self.control = TerminalControl(self.term)
        self.renderer = Renderer(self.control)
        self.keys = KeyDecoder(self.term)
        self.start_row = 0
        self.last_row = 0

    def run(self) -> Any:
        """Run the menu until confirmed and return the selection's result."""
        if not self.term.is_a_tty:
            raise TerminalNotInteractiveError("Menus need an interactive terminal")

        logger.debug(
            "menu session started: %s with %d options",
            type(self.selection).__name__,
            len(self.selection),
        )
        if self.legend:
            self.renderer.print_legend()
        self._reserve_rows()

        with interrupt_on_sigterm(), self.term.cbreak(), self.control.hidden_cursor():
            try:
                self._input_loop()
            except KeyboardInterrupt:
                logger.info("menu interrupted, restoring terminal")
                raise
            finally:
                self.control.move_cursor(self.last_row)
                self.control.write("\n")

        logger.debug("menu confirmed with %r", self.selection.result)
        return self.selection.result

    def _reserve_rows(self) -> None:
        """Print one blank line per option and remember where they landed."""
        count = len(self.selection)
        self.control.write("\n" * count)
        # Query after printing so any scrolling is already accounted for
        self.last_row = self.control.query_cursor_row()
        self.start_row = self.last_row - count
        logger.debug("reserved rows %d..%d", self.start_row, self.last_row - 1)

    def _input_loop(self) -> None:
        while not self.selection.confirmed:
            self.renderer.print_options(self.selection, self.start_row)
            self.selection.apply(self.keys.read())

        # Confirmed: active is out of range, so nothing is highlighted
        self.renderer.print_options(self.selection, self.start_row)


def multiselect(
    options: Iterable[str],
    defaults: Sequence[object] | None = None,
    *,
    legend: bool | str = False,
    term: Terminal | None = None,
) -> list[bool]:
    """Show a checkbox menu and return one flag per option, in option order.

    ``defaults`` holds ``"true"``/``"false"`` (or bools) per option;
    missing entries start unchecked.
    """
    selection = MultiSelection(tuple(options), checked=list(defaults or ()))
    return MenuSession(selection, legend=legend, term=term).run()


def singleselect(
    options: Iterable[str],
    default: int | str | None = 0,
    *,
    legend: bool | str = False,
    term: Terminal | None = None,
) -> str:
    """Show a radio menu and return the chosen label, or "" if none is chosen."""
    selection = SingleSelection(tuple(options), selected=default)
    return MenuSession(selection, legend=legend, term=term).run()
