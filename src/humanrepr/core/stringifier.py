"""Human-readable rendering of arbitrary values.

:func:`to_string_of` inspects the runtime category of its argument and
hands containers to the matching formatter.  Dispatch order (first
match wins):

1. Arrays (tuples, ``array.array``)  → :func:`~humanrepr.core.arrays.format_array`
2. Classes                           → fully qualified name
3. Collections                       → :func:`~humanrepr.core.collection_helpers.format_collection`
4. Mappings                          → :func:`~humanrepr.core.maps.format_map`
5. Filesystem paths                  → absolute path, not normalized
6. :class:`~humanrepr.core.models.Size` → ``(w=<width>, h=<height>)``
7. Text                              → quoted with :func:`~humanrepr.core.strings.quote`
8. Anything else                     → ``str(value)``, ``None`` for ``None``
"""

from __future__ import annotations

import os
from collections.abc import Collection, Mapping

from humanrepr.core import arrays, collection_helpers, maps
from humanrepr.core.models import Size
from humanrepr.core.strings import quote

_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray)


def to_string_of(value: object) -> str | None:
    """Return the display string of *value*, or ``None`` for ``None``."""
    if arrays.is_array(value):
        return arrays.format_array(value)
    if isinstance(value, type):
        return _class_name(value)
    if _is_collection(value):
        return collection_helpers.format_collection(value)  # type: ignore[arg-type]
    if isinstance(value, Mapping):
        return maps.format_map(value)
    if isinstance(value, os.PathLike):
        return _absolute_path(value)
    if isinstance(value, Size):
        return f"(w={value.width}, h={value.height})"
    if isinstance(value, str):
        return quote(value)
    return None if value is None else str(value)


def _class_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _absolute_path(value: os.PathLike) -> str:
    # Prefixes the working directory without collapsing ".." segments.
    path = os.fsdecode(os.fspath(value))
    return path if os.path.isabs(path) else os.path.join(os.getcwd(), path)


def _is_collection(value: object) -> bool:
    return isinstance(value, Collection) and not isinstance(
        value, (*_TEXT_TYPES, Mapping)
    )
