"""Rendering of scan results."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from find_biggest_file.core.results import FileFound, SearchResult
from find_biggest_file.core.scanner import ScanResult
from find_biggest_file.patterns import SearchPattern


def format_result(result: SearchResult) -> str:
    """Render a single result as one line of text."""
    if isinstance(result, FileFound):
        return f"File: {result.path}; Size: {result.size} bytes"
    return result.message


def render_lines(results: Mapping[SearchPattern, SearchResult]) -> list[str]:
    """Render one line per pattern, in pattern order."""
    return [format_result(result) for result in results.values()]


class Reporter:
    """Displays scan results on the console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def display_results(self, result: ScanResult) -> None:
        """Print one plain line per distinct pattern."""
        for line in render_lines(result.results):
            # Written verbatim: no markup, emoji codes or control-code stripping
            typer.echo(line, file=self.console.file, color=True)

        self._display_errors(result)

    def display_table(self, result: ScanResult) -> None:
        """Display results in a formatted table."""
        table = Table(
            title="Biggest Files",
            show_header=True,
            header_style="bold magenta",
        )
        table.add_column("#", style="dim", width=4)
        table.add_column("Pattern", style="yellow")
        table.add_column("Size", justify="right", style="cyan", width=10)
        table.add_column("Result", style="white", overflow="fold")

        for i, (pattern, search_result) in enumerate(result.results.items(), 1):
            if isinstance(search_result, FileFound):
                table.add_row(
                    str(i),
                    Text(pattern.description),
                    search_result.size_human,
                    Text(str(search_result.path)),
                )
            else:
                table.add_row(
                    str(i),
                    Text(pattern.description),
                    "-",
                    Text(search_result.message, style="dim"),
                )

        self.console.print(table)
        self.console.print(
            f"\n[dim]{len(result.found)} of {len(result.results)} patterns matched, "
            f"{result.files_scanned} files scanned.[/dim]"
        )

        self._display_errors(result)

    def _display_errors(self, result: ScanResult) -> None:
        if result.scan_errors:
            self.err_console.print(
                f"[yellow]Skipped {len(result.scan_errors)} entries due to errors.[/yellow]"
            )
