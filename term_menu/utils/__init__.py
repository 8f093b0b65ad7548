"""Utility functions for terminal menus."""

from term_menu.utils.coercion import (
    coerce_checked,
    coerce_index,
    coerce_options,
    is_true,
)

__all__ = [
    "coerce_checked",
    "coerce_index",
    "coerce_options",
    "is_true",
]
