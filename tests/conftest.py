"""Pytest configuration and fixtures."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest


def write_file(path: Path, size: int) -> Path:
    """Create a file of ``size`` bytes, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def make_file():
    """Return a helper that creates files of a given size."""
    return write_file


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def basic_tree(temp_dir: Path):
    """Two example.txt files of different sizes in sibling folders."""
    write_file(temp_dir / "a" / "example.txt", 10)
    write_file(temp_dir / "b" / "example.txt", 20)
    write_file(temp_dir / "b" / "other.txt", 999)
    yield temp_dir


@pytest.fixture
def folder_tree(temp_dir: Path):
    """An Example folder with txt files and a bigger txt file elsewhere."""
    write_file(temp_dir / "Example" / "report.txt", 5)
    write_file(temp_dir / "Example" / "big.txt", 500)
    write_file(temp_dir / "Example" / "huge.log", 4000)
    write_file(temp_dir / "Other" / "huge.txt", 9000)
    yield temp_dir
