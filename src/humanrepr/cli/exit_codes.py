"""Process exit codes returned by the ``humanrepr`` command."""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed without error."""

GENERAL_ERROR: int = 1
"""A HumanReprError was caught and its message displayed."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the HumanReprError hierarchy escaped."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C (128 + SIGINT)."""
