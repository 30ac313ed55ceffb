"""Text quoting helpers used when rendering ``str`` values."""

from __future__ import annotations

QUOTE: str = "'"
"""Character placed on both sides of quoted text."""


def quote(text: str | None) -> str | None:
    """Return *text* wrapped in single quotes, or ``None`` for ``None``."""
    if text is None:
        return None
    return f"{QUOTE}{text}{QUOTE}"


def quote_if_text(value: object) -> object:
    """Quote *value* when it is a ``str``; return anything else unchanged."""
    if isinstance(value, str):
        return quote(value)
    return value
