"""Allow ``python -m humanrepr`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m humanrepr`` behaves identically to the ``humanrepr``
console script.
"""

from __future__ import annotations

from humanrepr.cli.app import cli

if __name__ == "__main__":
    cli()
