"""Shared console helpers for command implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from rich.markup import escape

from ci_release.exceptions import ExternalToolError

if TYPE_CHECKING:
    from rich.console import Console


def fail(err_console: Console, context: str, error: Exception) -> NoReturn:
    """Report ``error`` and exit with status 1.

    Tool output is shown verbatim; messages are escaped because commit
    messages and versions routinely contain square brackets.
    """
    err_console.print(f"[red]{escape(context)}:[/] {escape(str(error))}")
    if isinstance(error, ExternalToolError) and error.stderr:
        err_console.print(f"[red]{escape(error.stderr.strip())}[/]")
    raise SystemExit(1) from error
