"""CLI application entry point and command routing for humanrepr.

This module is the **sole error boundary** of the command line.  It
catches :class:`~humanrepr.exceptions.HumanReprError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a short
message via the console, and returns a well-defined exit code.

Commands
--------
* ``humanrepr show VALUE``        — render a JSON value
* ``humanrepr duplicates VALUE``  — list the repeated items of a JSON array
* ``humanrepr doctor``            — environment diagnostics
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from humanrepr.cli import exit_codes
from humanrepr.cli.console import console
from humanrepr.config.logging import configure_logging
from humanrepr.core import duplicates_from, format_collection, to_string_of
from humanrepr.exceptions import HumanReprError, InputParseError
from humanrepr.version import __version__

logger = logging.getLogger(__name__)

_JSON_HINT = "Pass a JSON document, e.g. '[1, 2, 2]' or '{\"a\": 1}', or '-' to read stdin."


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="humanrepr",
        description="Human-readable rendering of JSON values.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit log records as JSON lines.",
    )

    subparsers = parser.add_subparsers(dest="command")

    show = subparsers.add_parser("show", help="Render a JSON value.")
    show.add_argument("value", help="JSON document, or '-' to read stdin.")

    duplicates = subparsers.add_parser(
        "duplicates", help="List the items that occur more than once in a JSON array."
    )
    duplicates.add_argument("value", help="JSON array, or '-' to read stdin.")

    subparsers.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

def _read_value(raw: str) -> Any:
    """Decode *raw* as JSON, reading stdin when *raw* is ``-``."""
    if raw == "-":
        raw = sys.stdin.read()
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InputParseError(f"Invalid JSON input: {exc.msg}", hint=_JSON_HINT) from exc


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_show(raw: str) -> int:
    value = _read_value(raw)
    logger.debug("Rendering value of type %s", type(value).__name__)
    console.echo(str(to_string_of(value)))
    return exit_codes.SUCCESS


def _handle_duplicates(raw: str) -> int:
    values = _read_value(raw)
    if not isinstance(values, list):
        raise InputParseError(
            f"Expected a JSON array, got {type(values).__name__}.",
            hint=_JSON_HINT,
        )
    try:
        duplicates = duplicates_from(values)
    except TypeError as exc:
        raise InputParseError(
            "Array items must be strings, numbers, booleans or null.",
            hint="Nested arrays and objects cannot be compared for duplicates.",
        ) from exc
    logger.debug("Found %d duplicated items among %d", len(duplicates), len(values))
    console.echo(str(format_collection(duplicates)))
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    from humanrepr.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the humanrepr CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, log_json=args.log_json)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS
    if args.command == "doctor":
        return _handle_doctor()
    if args.command == "duplicates":
        return _handle_duplicates(args.value)
    return _handle_show(args.value)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except HumanReprError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
