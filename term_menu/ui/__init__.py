"""Terminal interaction for menus."""

from term_menu.ui.keys import KeyDecoder
from term_menu.ui.renderer import Renderer
from term_menu.ui.session import MenuSession, multiselect, singleselect
from term_menu.ui.terminal import TerminalControl

__all__ = [
    "KeyDecoder",
    "MenuSession",
    "Renderer",
    "TerminalControl",
    "multiselect",
    "singleselect",
]
