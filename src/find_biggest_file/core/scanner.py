"""Single-pass directory scanner that finds the biggest file per pattern."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

if TYPE_CHECKING:
    from rich.progress import TaskID

from find_biggest_file.config import Config
from find_biggest_file.core.aggregator import ResultAggregator
from find_biggest_file.core.results import FileFound, NoFileFound, SearchResult
from find_biggest_file.patterns import EntryFacts, SearchPattern

logger = logging.getLogger(__name__)

# Common filesystem errors to catch during scanning
FILESYSTEM_ERRORS = (PermissionError, OSError)


@dataclass
class ScanResult:
    """Results from a directory scan."""

    root_path: Path
    results: dict[SearchPattern, SearchResult] = field(default_factory=dict)
    files_scanned: int = 0
    scan_errors: list[str] = field(default_factory=list)

    @property
    def found(self) -> dict[SearchPattern, FileFound]:
        """Patterns that matched at least one file."""
        return {p: r for p, r in self.results.items() if isinstance(r, FileFound)}

    @property
    def missing(self) -> dict[SearchPattern, NoFileFound]:
        """Patterns that matched nothing."""
        return {p: r for p, r in self.results.items() if isinstance(r, NoFileFound)}


class Scanner:
    """Walks a directory tree once and tracks the biggest match for each pattern."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def scan(self, config: Config) -> ScanResult:
        """
        Scan ``config.root_folder`` against every distinct search pattern.

        Unreadable entries are skipped and recorded in ``scan_errors``;
        they never abort the scan.

        Args:
            config: Parsed configuration

        Returns:
            ScanResult with one result per distinct pattern
        """
        root = config.root_folder
        aggregator = ResultAggregator(config.search_patterns)
        patterns = aggregator.patterns
        result = ScanResult(root_path=root)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
        ) as progress:
            task = progress.add_task("Searching for files...", total=None)

            for path, size in self._walk(root, result, progress, task):
                result.files_scanned += 1
                facts = EntryFacts.from_path(path)
                for pattern in patterns:
                    if pattern.matches(facts):
                        aggregator.update(pattern, path, size)

        result.results = dict(aggregator.results)
        logger.debug(
            "Scanned %d files under %s (%d skipped entries)",
            result.files_scanned,
            root,
            len(result.scan_errors),
        )
        return result

    def _walk(
        self,
        root: Path,
        result: ScanResult,
        progress: Progress,
        task_id: TaskID,
    ) -> Iterator[tuple[Path, int]]:
        """
        Yield ``(path, size)`` for every readable regular file under root.

        Depth-first, entries in name order. Symlinked directories are not
        descended; symlinks to files are followed.
        """
        try:
            root_is_dir = root.is_dir()
            root_is_file = not root_is_dir and root.is_file()
        except FILESYSTEM_ERRORS as e:
            self._record_error(result, root, e, logging.WARNING)
            return

        if root_is_file:
            size = self._file_size(root, result)
            if size is not None:
                yield root, size
            return

        if not root_is_dir:
            self._record_error(
                result, root, "not a directory or does not exist", logging.WARNING
            )
            return

        stack = [iter(self._list_dir(root, result))]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            entry_path = Path(entry.path)
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file()
            except FILESYSTEM_ERRORS as e:
                self._record_error(result, entry_path, e)
                continue

            if is_dir:
                progress.update(task_id, description=f"Scanning: {escape(entry_path.name[:40])}")
                stack.append(iter(self._list_dir(entry_path, result)))
            elif is_file:
                try:
                    size = entry.stat().st_size
                except FILESYSTEM_ERRORS as e:
                    self._record_error(result, entry_path, e)
                    continue
                yield entry_path, size

    def _list_dir(self, path: Path, result: ScanResult) -> list[os.DirEntry[str]]:
        """List a directory sorted by name, or nothing if it cannot be read."""
        try:
            with os.scandir(path) as entries:
                return sorted(entries, key=lambda e: e.name)
        except FILESYSTEM_ERRORS as e:
            self._record_error(result, path, e)
            return []

    def _file_size(self, path: Path, result: ScanResult) -> Optional[int]:
        try:
            return path.stat().st_size
        except FILESYSTEM_ERRORS as e:
            self._record_error(result, path, e)
            return None

    @staticmethod
    def _record_error(
        result: ScanResult, path: Path, error: object, level: int = logging.DEBUG
    ) -> None:
        logger.log(level, "Skipping %s: %s", path, error)
        result.scan_errors.append(f"{path}: {error}")
