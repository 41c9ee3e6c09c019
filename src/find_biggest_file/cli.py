"""Find Biggest File CLI - Main entry point."""

from __future__ import annotations

from pathlib import Path

import typer

from find_biggest_file import __version__
from find_biggest_file.config import (
    DEFAULT_CONFIG_FILENAME,
    ConfigError,
    load_config_from_file,
    write_default_config,
)
from find_biggest_file.core.exporter import EXPORT_FORMATS, export_result
from find_biggest_file.core.reporter import Reporter
from find_biggest_file.core.scanner import Scanner
from find_biggest_file.ui.console import (
    create_console,
    create_err_console,
    print_error,
    print_success,
    setup_logging,
)

app = typer.Typer(
    name="find-biggest-file",
    help="Find the biggest file for each search pattern in a directory tree.",
    add_completion=False,
)
console = create_console()
err_console = create_err_console()


def _run_init() -> None:
    """Write the example config, exit with error if it cannot be written."""
    try:
        target = write_default_config(Path(DEFAULT_CONFIG_FILENAME))
    except ConfigError as e:
        print_error(err_console, f"Config error: {e}")
        raise typer.Exit(1) from e
    print_success(err_console, f"Created default config: {target}")


def _run_scan(
    config_file_path: Path,
    table: bool,
    export: Path | None,
    export_format: str,
) -> None:
    """Load the config, scan its root folder and report the results."""
    try:
        config = load_config_from_file(config_file_path)
    except ConfigError as e:
        print_error(err_console, f"Config error: {e}")
        raise typer.Exit(1) from e

    scanner = Scanner(console=err_console)
    results = scanner.scan(config)

    reporter = Reporter(console=console, err_console=err_console)
    if table:
        reporter.display_table(results)
    else:
        reporter.display_results(results)

    if export is not None:
        try:
            export_result(results, export, export_format)  # type: ignore[arg-type]
        except OSError as e:
            print_error(err_console, f"Cannot write export {export}: {e}")
            raise typer.Exit(1) from e
        print_success(err_console, f"Exported results to {export}")


@app.command()
def main(
    init: bool = typer.Option(
        False,
        "--init",
        "-i",
        help=f"Write an example config to ./{DEFAULT_CONFIG_FILENAME}",
    ),
    config_file_path: Path | None = typer.Option(
        None,
        "--config-file-path",
        "-c",
        help="Path to a JSON config file; scans its root folder",
    ),
    table: bool = typer.Option(
        False,
        "--table",
        "-t",
        help="Show results as a table instead of plain lines",
    ),
    export: Path | None = typer.Option(
        None,
        "--export",
        "-e",
        help="Also write results to this file",
    ),
    export_format: str = typer.Option(
        "json",
        "--format",
        "-f",
        help="Export format: json or csv",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log skipped entries and other details",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        is_eager=True,
    ),
) -> None:
    """Find the biggest file matching each pattern of a config file."""
    if version:
        console.print(f"Find Biggest File v{__version__}")
        raise typer.Exit(0)

    setup_logging(err_console, verbose=verbose)

    if export_format not in EXPORT_FORMATS:
        print_error(err_console, f"Invalid export format: '{export_format}' (use: json, csv)")
        raise typer.Exit(1)

    if not init and config_file_path is None:
        err_console.print(
            "[dim]Nothing to do. Use --init to create an example config "
            "or --config-file-path to run a search.[/dim]"
        )
        raise typer.Exit(0)

    if init:
        _run_init()

    if config_file_path is not None:
        _run_scan(config_file_path, table, export, export_format)


if __name__ == "__main__":
    app()
