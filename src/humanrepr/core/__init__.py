"""Core layer — pure rendering and collection logic.

Rules
-----
* No ``print()`` calls.
* No logging, no filesystem or network I/O.
* No imports from ``cli`` or ``config``.
* Inputs are never mutated.
"""

from humanrepr.core.arrays import format_array, is_array
from humanrepr.core.collection_helpers import (
    duplicates_from,
    filter_collection,
    format_collection,
    has_only_null_elements,
    is_empty,
    list_from,
    list_of,
    non_null_elements,
    set_from,
    set_of,
)
from humanrepr.core.filters import TypeFilter
from humanrepr.core.maps import format_map
from humanrepr.core.models import OrderedSet, Size
from humanrepr.core.protocols import CollectionFilter
from humanrepr.core.stringifier import to_string_of
from humanrepr.core.strings import quote, quote_if_text

__all__: list[str] = [
    "CollectionFilter",
    "OrderedSet",
    "Size",
    "TypeFilter",
    "duplicates_from",
    "filter_collection",
    "format_array",
    "format_collection",
    "format_map",
    "has_only_null_elements",
    "is_array",
    "is_empty",
    "list_from",
    "list_of",
    "non_null_elements",
    "quote",
    "quote_if_text",
    "set_from",
    "set_of",
    "to_string_of",
]
