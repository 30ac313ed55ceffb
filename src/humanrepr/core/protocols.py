"""Protocols (interfaces) consumed by the collection helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class CollectionFilter(Protocol[T_co]):
    """Contract for objects that select elements out of a collection.

    Any object that implements :meth:`filter` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def filter(self, target: Iterable[Any] | None) -> list[T_co]:
        """Return a new list with the selected elements of *target*."""
        ...  # pragma: no cover
