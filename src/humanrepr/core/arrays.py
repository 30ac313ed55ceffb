"""Formatting of array-shaped values.

Tuples and :class:`array.array` instances are treated as arrays: fixed
shape, rendered with parentheses so they read differently from the
bracketed output of mutable collections.
"""

from __future__ import annotations

import array

from humanrepr.core import stringifier

_ARRAY_TYPES: tuple[type, ...] = (tuple, array.array)


def is_array(value: object) -> bool:
    """Return ``True`` if *value* is a tuple or an ``array.array``."""
    return isinstance(value, _ARRAY_TYPES)


def format_array(value: object) -> str | None:
    """Render an array as ``(e1, e2, ...)``.

    Returns ``None`` for ``None`` and for anything that is not an array.
    Elements, nested arrays included, are rendered with
    :func:`~humanrepr.core.stringifier.to_string_of`.
    """
    if value is None or not is_array(value):
        return None
    if len(value) == 0:
        return "()"
    return "(" + ", ".join(_render(element) for element in value) + ")"


def _render(element: object) -> str:
    rendered = stringifier.to_string_of(element)
    return "None" if rendered is None else rendered
