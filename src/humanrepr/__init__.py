"""humanrepr — human-readable string representations of Python values.

Pure, stateless helpers for rendering objects and collections, plus a
handful of small collection utilities.
"""

from humanrepr.core import (
    CollectionFilter,
    OrderedSet,
    Size,
    TypeFilter,
    duplicates_from,
    filter_collection,
    format_array,
    format_collection,
    format_map,
    has_only_null_elements,
    is_array,
    is_empty,
    list_from,
    list_of,
    non_null_elements,
    quote,
    quote_if_text,
    set_from,
    set_of,
    to_string_of,
)
from humanrepr.version import __version__

__all__: list[str] = [
    "CollectionFilter",
    "OrderedSet",
    "Size",
    "TypeFilter",
    "__version__",
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
