"""``humanrepr doctor`` — environment diagnostics command.

Collects the versions of the interpreter and of the runtime
dependencies and renders them as a Rich table, or as plain text when
Rich is not installed.
"""

from __future__ import annotations

import importlib
import logging
import platform
import sys
from importlib import metadata

from humanrepr.cli import exit_codes
from humanrepr.cli.console import console
from humanrepr.version import __version__

logger = logging.getLogger(__name__)

Check = tuple[str, str, str]
"""(label, value, status) row of the doctor table."""


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    """Return the row for the running interpreter."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _distribution_version(name: str) -> str:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return "unknown"


def _dependency_check(name: str, *, required: bool) -> Check:
    """Return the row for an importable dependency.

    A missing required dependency is a FAIL; a missing optional one is
    only a WARN.
    """
    try:
        importlib.import_module(name)
    except ImportError:
        status = "[red]FAIL[/red]" if required else "[yellow]WARN[/yellow]"
        return name, "NOT INSTALLED", status
    return name, _distribution_version(name), "[green]OK[/green]"


def _os_check() -> Check:
    """Return the row for the operating system."""
    system_raw = platform.system()
    system_display = {"Darwin": "macOS"}.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _humanrepr_version_check() -> Check:
    return "humanrepr", __version__, "[green]OK[/green]"


def collect_checks() -> list[Check]:
    """Run every diagnostic collector, in display order."""
    return [
        _humanrepr_version_check(),
        _python_version_check(),
        _dependency_check("structlog", required=True),
        _dependency_check("rich", required=False),
        _os_check(),
    ]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_table(checks: list[Check]) -> None:
    print("\nhumanrepr doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _print_rich_table(checks: list[Check]) -> None:
    from rich.table import Table

    table = Table(
        title="humanrepr doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = collect_checks()
    has_failure = any("FAIL" in status for _, _, status in checks)
    logger.debug("Collected %d doctor checks (failed=%s)", len(checks), has_failure)

    try:
        _print_rich_table(checks)
        rich_available = True
    except ImportError:
        _print_plain_table(checks)
        rich_available = False

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
