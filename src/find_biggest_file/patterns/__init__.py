"""Search pattern definitions and matching."""

from __future__ import annotations

from .base import (
    BasicPattern,
    BiggestFileInFolderPattern,
    EntryFacts,
    SearchPattern,
    dedupe_patterns,
    file_extension,
)

__all__ = [
    "BasicPattern",
    "BiggestFileInFolderPattern",
    "EntryFacts",
    "SearchPattern",
    "dedupe_patterns",
    "file_extension",
]
