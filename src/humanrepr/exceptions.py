"""Custom exception hierarchy for humanrepr.

Every error raised on purpose by this package inherits from
:class:`HumanReprError`.  The pure helpers in :mod:`humanrepr.core`
raise exactly one kind of error, :class:`InvalidArgumentError`; the
remaining subclasses belong to the command-line layer.

Hierarchy
---------
HumanReprError
├── InvalidArgumentError
├── InputParseError
└── EnvironmentError
"""

from __future__ import annotations


class HumanReprError(Exception):
    """Base exception for all humanrepr errors.

    The CLI error boundary renders the message and the optional hint
    without leaking a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Arguments -------------------------------------------------------------

class InvalidArgumentError(HumanReprError, ValueError):
    """Raised when a helper receives an argument it cannot accept.

    Also a :class:`ValueError`, so callers that do not know about this
    package can still catch it.
    """


# --- CLI input -------------------------------------------------------------

class InputParseError(HumanReprError):
    """Raised when command-line input is not valid JSON of the right shape."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(HumanReprError):
    """Raised when an optional runtime dependency is not available."""
