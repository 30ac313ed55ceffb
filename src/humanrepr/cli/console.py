"""Console helpers with optional Rich support.

Rich is imported lazily so that ``--help`` and ``--version`` keep
working when it is not installed.  Two streams are used:

* :meth:`_ConsoleProxy.print` — status and error messages on stderr,
  with Rich markup.
* :meth:`_ConsoleProxy.echo` — command results on stdout, printed
  verbatim (rendered values often contain ``[...]``, which must not be
  read as markup).
"""

from __future__ import annotations

import sys
from typing import Any

from humanrepr.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed.",
            hint="Install with: pip install 'humanrepr[ui]'",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console targeting stderr (default) or stdout."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with a plain-text fallback."""

    def print(self, *objects: object) -> None:
        """Render to stderr with Rich when available."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)

    def echo(self, text: str) -> None:
        """Write *text* to stdout without markup or highlighting."""
        try:
            rich_console = get_rich_console(stderr=False)
        except EnvironmentError:
            print(text)
            return
        rich_console.print(
            text, markup=False, highlight=False, emoji=False, soft_wrap=True,
        )


console = _ConsoleProxy()
