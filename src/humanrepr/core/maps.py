"""Formatting of keyed mappings."""

from __future__ import annotations

from collections.abc import Mapping

from humanrepr.core import stringifier

SELF_REFERENCE: str = "(this Map)"


def format_map(mapping: Mapping[object, object] | None) -> str | None:
    """Render *mapping* as ``{k1: v1, k2: v2}``.

    Keys and values are rendered with
    :func:`~humanrepr.core.stringifier.to_string_of`.  ``None`` yields
    ``None``, an empty mapping yields ``{}``, and a key or value that is
    the mapping itself yields ``(this Map)``.
    """
    if mapping is None:
        return None
    if not mapping:
        return "{}"
    entries = [
        f"{_render(key, mapping)}: {_render(value, mapping)}"
        for key, value in mapping.items()
    ]
    return "{" + ", ".join(entries) + "}"


def _render(item: object, owner: Mapping[object, object]) -> str:
    if item is owner:
        return SELF_REFERENCE
    rendered = stringifier.to_string_of(item)
    return "None" if rendered is None else rendered
