"""Tests for the array, mapping, and text formatters.

Covers core/arrays.py, core/maps.py, and core/strings.py.
"""

from __future__ import annotations

import array
from collections import OrderedDict
from typing import Any

from humanrepr.core.arrays import format_array, is_array
from humanrepr.core.maps import format_map
from humanrepr.core.models import Size
from humanrepr.core.strings import quote, quote_if_text


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------

class TestIsArray:
    def test_tuple(self) -> None:
        assert is_array((1,))

    def test_array_module(self) -> None:
        assert is_array(array.array("d"))

    def test_list_is_not_an_array(self) -> None:
        assert not is_array([1])

    def test_none_is_not_an_array(self) -> None:
        assert not is_array(None)


class TestFormatArray:
    def test_none(self) -> None:
        assert format_array(None) is None

    def test_non_array(self) -> None:
        assert format_array([1, 2]) is None

    def test_empty(self) -> None:
        assert format_array(()) == "()"
        assert format_array(array.array("i")) == "()"

    def test_elements(self) -> None:
        assert format_array((1, "b", None)) == "(1, 'b', None)"

    def test_nested(self) -> None:
        assert format_array(((1, 2), (3,))) == "((1, 2), (3))"

    def test_sizes(self) -> None:
        assert format_array((Size(1, 2),)) == "((w=1, h=2))"

    def test_floats(self) -> None:
        assert format_array(array.array("d", [0.5, 2.0])) == "(0.5, 2.0)"


# ---------------------------------------------------------------------------
# Mappings
# ---------------------------------------------------------------------------

class TestFormatMap:
    def test_none(self) -> None:
        assert format_map(None) is None

    def test_empty(self) -> None:
        assert format_map({}) == "{}"

    def test_entries_in_order(self) -> None:
        assert format_map({"b": 1, "a": None}) == "{'b': 1, 'a': None}"

    def test_keys_are_rendered(self) -> None:
        assert format_map({(1, 2): [3]}) == "{(1, 2): [3]}"

    def test_self_reference_as_value(self) -> None:
        mapping: dict[str, Any] = {"x": 1}
        mapping["self"] = mapping
        assert format_map(mapping) == "{'x': 1, 'self': (this Map)}"

    def test_other_mapping_types(self) -> None:
        assert format_map(OrderedDict(z=0)) == "{'z': 0}"


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

class TestQuote:
    def test_quote(self) -> None:
        assert quote("abc") == "'abc'"

    def test_quote_none(self) -> None:
        assert quote(None) is None

    def test_quote_if_text_quotes_strings(self) -> None:
        assert quote_if_text("x") == "'x'"

    def test_quote_if_text_passes_other_values(self) -> None:
        marker = object()
        assert quote_if_text(marker) is marker
        assert quote_if_text(None) is None
