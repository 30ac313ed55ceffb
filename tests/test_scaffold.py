"""Smoke tests for package wiring.

These tests prove that:
* The public API is re-exported from the top-level package.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

import humanrepr
from humanrepr import __version__
from humanrepr.cli import exit_codes
from humanrepr.exceptions import (
    EnvironmentError,
    HumanReprError,
    InputParseError,
    InvalidArgumentError,
)


# ---------------------------------------------------------------------------
# Version and public API
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


class TestPublicApi:
    @pytest.mark.parametrize("name", humanrepr.__all__)
    def test_exported_names_exist(self, name: str) -> None:
        assert hasattr(humanrepr, name)

    def test_top_level_rendering(self) -> None:
        assert humanrepr.to_string_of(["a", (1,), {"k": None}]) == "['a', (1), {'k': None}]"


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [InvalidArgumentError, InputParseError, EnvironmentError],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[HumanReprError]
    ) -> None:
        assert issubclass(exc_class, HumanReprError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(HumanReprError, Exception)

    def test_invalid_argument_is_value_error(self) -> None:
        assert issubclass(InvalidArgumentError, ValueError)

    def test_hint_is_stored(self) -> None:
        err = HumanReprError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert HumanReprError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_values(self) -> None:
        assert exit_codes.SUCCESS == 0
        assert exit_codes.GENERAL_ERROR == 1
        assert exit_codes.UNEXPECTED_ERROR == 2
        assert exit_codes.KEYBOARD_INTERRUPT == 130
