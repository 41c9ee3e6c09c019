"""Export scan results to JSON and CSV formats."""

from __future__ import annotations

import csv
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

from find_biggest_file.config import pattern_to_dict
from find_biggest_file.core.results import FileFound

if TYPE_CHECKING:
    from find_biggest_file.core.results import SearchResult
    from find_biggest_file.core.scanner import ScanResult
    from find_biggest_file.patterns import SearchPattern

ExportFormat = Literal["json", "csv"]
EXPORT_FORMATS: tuple[ExportFormat, ...] = ("json", "csv")

CSV_FIELDNAMES = [
    "pattern",
    "found",
    "path",
    "size_bytes",
    "size_human",
    "message",
]


def _entry_to_dict(pattern: SearchPattern, result: SearchResult) -> dict[str, Any]:
    """Convert one pattern/result pair to serializable dict."""
    if isinstance(result, FileFound):
        return {
            "pattern": pattern_to_dict(pattern),
            "found": True,
            "path": str(result.path),
            "size_bytes": result.size,
            "size_human": result.size_human,
        }
    return {
        "pattern": pattern_to_dict(pattern),
        "found": False,
        "message": result.message,
    }


def result_to_dict(result: ScanResult) -> dict[str, Any]:
    """Convert ScanResult to serializable dict."""
    return {
        "type": "biggest_files",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "root_path": str(result.root_path),
        "files_scanned": result.files_scanned,
        "pattern_count": len(result.results),
        "found_count": len(result.found),
        "results": [_entry_to_dict(p, r) for p, r in result.results.items()],
        "scan_errors": result.scan_errors,
    }


def export_json(result: ScanResult, output_path: Path, *, indent: int = 2) -> None:
    """
    Export scan results to JSON file.

    Args:
        result: Scan result to export
        output_path: Path to write JSON file
        indent: JSON indentation level (default: 2)
    """
    data = result_to_dict(result)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)


def export_csv(result: ScanResult, output_path: Path) -> None:
    """Export scan results to CSV file, one row per pattern."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDNAMES)
        writer.writeheader()
        for pattern, search_result in result.results.items():
            row = _entry_to_dict(pattern, search_result)
            row["pattern"] = json.dumps(row["pattern"])
            writer.writerow(row)


def export_result(
    result: ScanResult,
    output_path: Path,
    format: ExportFormat = "json",
) -> None:
    """
    Export scan results to file in specified format.

    Raises:
        ValueError: If format is not supported
    """
    if format == "json":
        export_json(result, output_path)
    elif format == "csv":
        export_csv(result, output_path)
    else:
        raise ValueError(f"Unsupported export format: {format}")
