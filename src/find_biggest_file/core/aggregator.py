"""Running-maximum aggregation of matches per search pattern."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from find_biggest_file.core.results import FileFound, NoFileFound, SearchResult
from find_biggest_file.patterns import SearchPattern, dedupe_patterns


class ResultAggregator:
    """Holds the current best result for every distinct pattern."""

    def __init__(self, patterns: Iterable[SearchPattern]):
        self._results: dict[SearchPattern, SearchResult] = {
            pattern: NoFileFound(pattern.not_found_message())
            for pattern in dedupe_patterns(patterns)
        }

    @property
    def patterns(self) -> list[SearchPattern]:
        """Distinct patterns in the order they were registered."""
        return list(self._results)

    @property
    def results(self) -> Mapping[SearchPattern, SearchResult]:
        """Read-only view of the result map."""
        return MappingProxyType(self._results)

    def update(self, pattern: SearchPattern, path: Path, size: int) -> bool:
        """
        Offer a matching file for a pattern.

        The file replaces the current result only if nothing was found yet
        or it is strictly larger, so the first file seen wins a tie.

        Returns:
            True if the stored result changed

        Raises:
            KeyError: If the pattern was never registered
        """
        try:
            current = self._results[pattern]
        except KeyError:
            raise KeyError(f"Unknown search pattern: {pattern!r}") from None

        if isinstance(current, FileFound) and size <= current.size:
            return False

        self._results[pattern] = FileFound(path=path, size=size)
        return True

    def __len__(self) -> int:
        return len(self._results)
