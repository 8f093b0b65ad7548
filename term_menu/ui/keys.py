"""Key decoding for menu navigation."""

import logging

from blessed import Terminal
from blessed.keyboard import Keystroke

from term_menu.config import ESCAPE_TIMEOUT_S, KEY_COMMANDS
from term_menu.models import Command

logger = logging.getLogger(__name__)


class KeyDecoder:
    """Turns raw key presses into menu commands.

    ``blessed`` collects the rest of an escape sequence for at most
    ``escape_timeout`` seconds after a bare ESC; a lone ESC, or any
    sequence other than the arrows and Enter, decodes to no command.
    """

    def __init__(self, term: Terminal, escape_timeout: float = ESCAPE_TIMEOUT_S) -> None:
        self.term = term
        self.escape_timeout = escape_timeout

    def read(self) -> Command | None:
        """Block for one key press and decode it."""
        key: Keystroke = self.term.inkey(esc_delay=self.escape_timeout)
        command = self.decode(key)
        logger.debug("key %r decoded as %s", str(key), command)
        return command

    @staticmethod
    def decode(key: Keystroke) -> Command | None:
        """Map one keystroke to a command, or None if it means nothing here."""
        if key.is_sequence:
            name = KEY_COMMANDS.get(key.name or "")
            return Command(name) if name else None
        if key in ("", "\n", "\r"):
            return Command.ENTER
        if key == " ":
            return Command.SPACE
        return None
