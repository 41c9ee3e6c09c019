"""Rich console utilities for output formatting."""

from __future__ import annotations

import logging
import platform

from rich.console import Console
from rich.markup import escape
from rich.logging import RichHandler


def create_console() -> Console:
    """Create a configured Rich console."""
    # Windows-specific console settings
    if platform.system() == "Windows":
        return Console(legacy_windows=True, emoji=False)
    return Console()


def create_err_console() -> Console:
    """Create a Rich console writing to stderr."""
    if platform.system() == "Windows":
        return Console(stderr=True, legacy_windows=True, emoji=False)
    return Console(stderr=True)


def setup_logging(console: Console, verbose: bool = False) -> None:
    """Route package log records to the console through Rich."""
    handler = RichHandler(console=console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    pkg_logger = logging.getLogger("find_biggest_file")
    pkg_logger.handlers = [handler]
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg_logger.propagate = False


def print_success(console: Console, message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{escape(message)}[/green]")


def print_error(console: Console, message: str) -> None:
    """Print an error message."""
    console.print(f"[red]{escape(message)}[/red]")
