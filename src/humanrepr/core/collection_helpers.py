"""Small, pure helpers over collections.

Every function in this module is a **pure** transformation: no I/O,
no side effects, and the input is never mutated.  Helpers that build
something from their input return ``None`` when given ``None``;
helpers that answer a question about their input return a safe empty
default instead.  The single exception is
:func:`has_only_null_elements`, which refuses ``None`` outright.
"""

from __future__ import annotations

from collections.abc import Collection, Hashable, Iterable, Sized
from typing import Any, TypeVar

from humanrepr.core import stringifier
from humanrepr.core.models import OrderedSet
from humanrepr.core.protocols import CollectionFilter
from humanrepr.exceptions import InvalidArgumentError

T = TypeVar("T")

SELF_REFERENCE: str = "(this Collection)"


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def list_of(*elements: T) -> list[T]:
    """Return a new list holding *elements* in argument order."""
    return list(elements)


def set_of(*elements: T) -> OrderedSet:
    """Return a new :class:`OrderedSet` of *elements*, first occurrence first.

    Unhashable elements raise ``TypeError``.
    """
    return OrderedSet(elements)  # type: ignore[arg-type]


def list_from(elements: Iterable[T] | None) -> list[T] | None:
    """Like :func:`list_of`, but takes the elements as one iterable.

    ``None`` yields ``None`` rather than an empty list.
    """
    if elements is None:
        return None
    return list(elements)


def set_from(elements: Iterable[Hashable] | None) -> OrderedSet | None:
    """Like :func:`set_of`, but takes the elements as one iterable.

    ``None`` yields ``None`` rather than an empty set.
    """
    if elements is None:
        return None
    return OrderedSet(elements)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def duplicates_from(collection: Iterable[Hashable] | None) -> OrderedSet:
    """Return the elements that occur more than once in *collection*.

    Each duplicated element appears once in the result, in the order in
    which its first repetition was found.  ``None`` and empty input
    yield an empty set.  Unhashable elements raise ``TypeError``.
    """
    duplicates = OrderedSet()
    if collection is None:
        return duplicates
    seen_once: set[Hashable] = set()
    for element in collection:
        if element in seen_once:
            duplicates.add(element)
            continue
        seen_once.add(element)
    return duplicates


def is_empty(collection: Sized | None) -> bool:
    """Return ``True`` if *collection* is ``None`` or has no elements."""
    return collection is None or len(collection) == 0


def has_only_null_elements(collection: Collection[Any] | None) -> bool:
    """Return ``True`` if every element of *collection* is ``None``.

    An empty collection is **not** considered to hold only ``None``
    elements and yields ``False``.

    Raises
    ------
    InvalidArgumentError
        When *collection* itself is ``None``.
    """
    if collection is None:
        raise InvalidArgumentError("The collection to check should not be None")
    if len(collection) == 0:
        return False
    return all(element is None for element in collection)


# ---------------------------------------------------------------------------
# Transformations
# ---------------------------------------------------------------------------

def filter_collection(
    target: Iterable[Any] | None,
    collection_filter: CollectionFilter[T],
) -> list[T]:
    """Apply *collection_filter* to *target* and return its result."""
    return collection_filter.filter(target)


def non_null_elements(collection: Iterable[T | None] | None) -> tuple[T, ...] | None:
    """Return an immutable tuple of the non-``None`` elements of *collection*.

    Iteration order is kept, so an ordered input gives an ordered
    result.  An empty or all-``None`` input gives ``()``; ``None`` gives
    ``None``.
    """
    if collection is None:
        return None
    return tuple(element for element in collection if element is not None)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_collection(collection: Iterable[Any] | None) -> str | None:
    """Render *collection* as ``[e1, e2, ..., en]``.

    Elements are rendered with
    :func:`~humanrepr.core.stringifier.to_string_of`.  ``None`` yields
    ``None`` and an empty collection yields ``[]``.  An element that is
    the collection itself is rendered as ``(this Collection)``.
    """
    if collection is None:
        return None
    parts = [_render(element, collection) for element in collection]
    return "[" + ", ".join(parts) + "]"


def _render(element: object, owner: object) -> str:
    if element is owner:
        return SELF_REFERENCE
    rendered = stringifier.to_string_of(element)
    return "None" if rendered is None else rendered
