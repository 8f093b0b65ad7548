"""Interactive single- and multi-choice menus for the terminal."""

from term_menu.errors import MenuConfigError, MenuError, TerminalNotInteractiveError
from term_menu.ui import MenuSession, multiselect, singleselect

__version__ = "1.0.0"

__all__ = [
    "MenuConfigError",
    "MenuError",
    "MenuSession",
    "TerminalNotInteractiveError",
    "multiselect",
    "singleselect",
]
