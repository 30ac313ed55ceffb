"""Ready-made :class:`~humanrepr.core.protocols.CollectionFilter` implementations."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from humanrepr.exceptions import InvalidArgumentError

T = TypeVar("T")


class TypeFilter(Generic[T]):
    """Keeps the elements that are instances of a given type.

    >>> TypeFilter(int).filter([1, "a", 2.0, 3])
    [1, 3]
    """

    def __init__(self, kind: type[T]) -> None:
        self.kind: type[T] = kind

    def filter(self, target: Iterable[Any] | None) -> list[T]:
        if target is None:
            raise InvalidArgumentError("The collection to filter should not be None")
        return [element for element in target if isinstance(element, self.kind)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.__qualname__})"
