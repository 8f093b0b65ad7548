"""Coercion of menu arguments into typed values."""

from collections.abc import Iterable, Sequence

from term_menu.config import TRUE_LITERAL
from term_menu.errors import MenuConfigError


def is_true(value: object) -> bool:
    """Return True for ``True`` or the literal ``"true"``; anything else is off."""
    if isinstance(value, bool):
        return value
    return isinstance(value, str) and value == TRUE_LITERAL


def coerce_options(options: Iterable[str]) -> tuple[str, ...]:
    """Validate the option labels and freeze their order."""
    labels = tuple(options)
    if not labels:
        raise MenuConfigError("A menu needs at least one option")
    for index, label in enumerate(labels):
        if not isinstance(label, str) or not label:
            raise MenuConfigError(f"Option {index} must be a non-empty string, got {label!r}")
    return labels


def coerce_checked(defaults: Sequence[object] | None, count: int) -> list[bool]:
    """One flag per option; entries past the end of ``defaults`` are unchecked."""
    defaults = defaults or ()
    return [is_true(defaults[i]) if i < len(defaults) else False for i in range(count)]


def coerce_index(default: int | str | None, count: int) -> int:
    """Validate a default selection index against ``count`` options."""
    if default is None:
        return 0
    if isinstance(default, bool) or not isinstance(default, (int, str)):
        raise MenuConfigError(f"Default selection must be an index, got {default!r}")
    try:
        index = int(default)
    except (TypeError, ValueError):
        raise MenuConfigError(f"Default selection must be an index, got {default!r}") from None
    if not 0 <= index < count:
        raise MenuConfigError(f"Default selection {index} is outside 0..{count - 1}")
    return index
