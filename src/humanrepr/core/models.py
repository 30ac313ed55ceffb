"""Value types understood by the stringifier and the collection helpers.

:class:`Size` is a frozen dataclass, in the same spirit as the other
immutable value objects of the package.  :class:`OrderedSet` is the
set type returned by :func:`~humanrepr.core.collection_helpers.set_of`
and :func:`~humanrepr.core.collection_helpers.duplicates_from`.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, MutableSet
from dataclasses import dataclass
from typing import Any


# ---------------------------------------------------------------------------
# 2D size descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Size:
    """A width/height pair, e.g. the dimensions of a window or an image."""

    width: int
    """Horizontal extent."""

    height: int
    """Vertical extent."""


# ---------------------------------------------------------------------------
# Insertion-ordered set
# ---------------------------------------------------------------------------

class OrderedSet(MutableSet):
    """Mutable set that iterates in insertion order.

    Adding an element that is already present keeps its original
    position.  Comparison with other sets ignores order, as for any
    :class:`collections.abc.Set`.
    """

    __slots__ = ("_items",)

    def __init__(self, elements: Iterable[Hashable] = ()) -> None:
        self._items: dict[Any, None] = dict.fromkeys(elements)

    def __contains__(self, element: object) -> bool:
        return element in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, value: Hashable) -> None:
        self._items[value] = None

    def discard(self, value: Hashable) -> None:
        self._items.pop(value, None)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"
