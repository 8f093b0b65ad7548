"""Configuration and constants for terminal menus."""

# Terminal control sequences
CURSOR_SHOW: str = "\033[?25h"
CURSOR_HIDE: str = "\033[?25l"
CURSOR_POSITION: str = "\033[{row};{col}H"

# Styling sequences
REVERSE_ON: str = "\033[7m"
REVERSE_OFF: str = "\033[27m"
STYLE_RESET: str = "\033[0m"
CHECKMARK_COLOR: str = "\033[38;5;46m"

# Seconds to wait for the rest of an escape sequence after a bare ESC
ESCAPE_TIMEOUT_S: float = 0.1

# Selection glyphs
CHECKMARK: str = "✔"
MULTI_CHECKED_PREFIX: str = f"[{CHECKMARK}]"
MULTI_UNCHECKED_PREFIX: str = "[ ]"
SINGLE_SELECTED_PREFIX: str = " ◯ "
SINGLE_UNSELECTED_PREFIX: str = " ⬤ "

# Sentinel for "no row" (cursor) and "nothing chosen" (single-select)
NO_INDEX: int = -1

# Literal accepted as "on" for legend flags and multi-select defaults
TRUE_LITERAL: str = "true"

# Navigation legend, printed above the options when requested
LEGEND: tuple[str, ...] = (
    "↓ (Down Arrow)\t=> down",
    "↑ (Up Arrow)\t=> up",
    "⎵ (Space)\t=> toggle selection",
    "⏎ (Enter)\t=> confirm selection",
    "",
)

# blessed key names mapped to command names
KEY_COMMANDS: dict[str, str] = {
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_ENTER": "enter",
}
