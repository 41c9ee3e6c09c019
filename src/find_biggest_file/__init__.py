"""Find Biggest File - locate the largest file for each search pattern."""

from __future__ import annotations

__version__ = "0.1.0"
