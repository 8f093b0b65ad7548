"""Data models for terminal menus."""

from term_menu.models.command import Command
from term_menu.models.selection import MultiSelection, Selection, SingleSelection

__all__ = [
    "Command",
    "Selection",
    "MultiSelection",
    "SingleSelection",
]
