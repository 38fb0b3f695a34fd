"""
Helpers shared by CLI commands.
"""
from typing import Optional

import typer
from rich.console import Console

from wellness.cli.logging import setup_cli_logging
from wellness.core.context import AppContext

console = Console()

_context: Optional[AppContext] = None


def get_context() -> AppContext:
    """Return the process-wide application context, creating it on first use."""
    global _context
    if _context is None:
        setup_cli_logging("wellness")
        _context = AppContext()
    return _context


def set_context(context: Optional[AppContext]) -> None:
    global _context
    _context = context


def confirm_action(message: str, default: bool = False) -> bool:
    return typer.confirm(message, default=default)


def fail(message: str, code: int = 1) -> None:
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(code=code)
