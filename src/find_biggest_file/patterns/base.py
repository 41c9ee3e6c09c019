"""Search pattern definitions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


def file_extension(name: str) -> Optional[str]:
    """
    Return the extension of a file name, without the leading dot.

    Names without a dot, and dot-files such as ``.bashrc``, have no
    extension. A trailing dot gives an empty extension.
    """
    if name in ("", "..") or "." not in name:
        return None
    stem, _, extension = name.rpartition(".")
    if not stem:
        return None
    return extension


@dataclass(frozen=True)
class EntryFacts:
    """Facts about a single filesystem entry that patterns match against."""

    name: str
    extension: Optional[str]
    parent_name: Optional[str]
    is_file: bool = True

    @classmethod
    def from_path(cls, path: Path, is_file: bool = True) -> EntryFacts:
        """Build facts from a path without touching the filesystem."""
        return cls(
            name=path.name,
            extension=file_extension(path.name),
            parent_name=path.parent.name or None,
            is_file=is_file,
        )


@dataclass(frozen=True)
class BasicPattern:
    """Match any file whose name equals ``file_name`` exactly."""

    file_name: str

    def matches(self, facts: EntryFacts) -> bool:
        return facts.is_file and facts.name == self.file_name

    def not_found_message(self) -> str:
        return f"No file found with the name: {self.file_name}!"

    @property
    def description(self) -> str:
        return self.file_name


@dataclass(frozen=True)
class BiggestFileInFolderPattern:
    """Match files with extension ``file_type`` directly inside a folder named ``folder``."""

    folder: str
    file_type: str

    def matches(self, facts: EntryFacts) -> bool:
        return (
            facts.is_file
            and facts.parent_name is not None
            and facts.parent_name == self.folder
            and facts.extension is not None
            and facts.extension == self.file_type
        )

    def not_found_message(self) -> str:
        return (
            f"Inside the folder: {self.folder}, "
            f"no file was found with extension: {self.file_type}!"
        )

    @property
    def description(self) -> str:
        return f"{self.folder}/*.{self.file_type}"


SearchPattern = Union[BasicPattern, BiggestFileInFolderPattern]


def dedupe_patterns(patterns: Iterable[SearchPattern]) -> list[SearchPattern]:
    """Drop repeated patterns, keeping the first occurrence of each."""
    return list(dict.fromkeys(patterns))
