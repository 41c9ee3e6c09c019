"""Per-pattern search results."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


def format_size(size_bytes: int) -> str:
    """Convert bytes to human-readable format."""
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} PB"


@dataclass(frozen=True)
class NoFileFound:
    """No file has matched the pattern yet."""

    message: str


@dataclass(frozen=True)
class FileFound:
    """The largest matching file seen so far."""

    path: Path
    size: int

    @property
    def size_human(self) -> str:
        """Return human-readable size."""
        return format_size(self.size)


SearchResult = Union[NoFileFound, FileFound]
