"""Core scanning and reporting functionality."""

from __future__ import annotations

from .aggregator import ResultAggregator
from .reporter import Reporter
from .scanner import Scanner, ScanResult

__all__ = ["ResultAggregator", "Reporter", "Scanner", "ScanResult"]
