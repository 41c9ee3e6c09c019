"""Configuration file handling for Find Biggest File.

The config is a JSON document. Each search pattern is encoded as a
single-key object whose key names the pattern type::

    {
      "search_patterns": [
        {"Basic": "example.txt"},
        {"BiggestFileInFolder": {"folder": "Example", "file_type": "txt"}}
      ],
      "root_folder": "."
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from find_biggest_file.patterns import BasicPattern, BiggestFileInFolderPattern, SearchPattern

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "Example_Config.json"

BASIC_TAG = "Basic"
BIGGEST_FILE_IN_FOLDER_TAG = "BiggestFileInFolder"
PATTERN_TAGS = (BASIC_TAG, BIGGEST_FILE_IN_FOLDER_TAG)


class ConfigError(ValueError):
    """Raised when a config file cannot be read, parsed or written."""


@dataclass
class Config:
    """Root configuration container."""

    search_patterns: list[SearchPattern] = field(default_factory=list)
    root_folder: Path = field(default_factory=lambda: Path("."))


def default_config() -> Config:
    """Return the example configuration written by ``--init``."""
    return Config(
        search_patterns=[
            BasicPattern("example.txt"),
            BiggestFileInFolderPattern(folder="Example", file_type="txt"),
        ],
        root_folder=Path("."),
    )


def pattern_to_dict(pattern: SearchPattern) -> dict[str, Any]:
    """Encode a pattern as a single-key tagged object."""
    if isinstance(pattern, BasicPattern):
        return {BASIC_TAG: pattern.file_name}
    return {
        BIGGEST_FILE_IN_FOLDER_TAG: {
            "folder": pattern.folder,
            "file_type": pattern.file_type,
        }
    }


def config_to_dict(config: Config) -> dict[str, Any]:
    """Convert Config to a JSON-serializable dict."""
    return {
        "search_patterns": [pattern_to_dict(p) for p in config.search_patterns],
        "root_folder": str(config.root_folder),
    }


def _validate_pattern(data: Any, where: str) -> list[str]:
    """Validate one encoded pattern and return list of errors."""
    if not isinstance(data, dict) or len(data) != 1:
        return [f"{where}: expected an object with exactly one pattern type"]

    tag, value = next(iter(data.items()))
    if tag == BASIC_TAG:
        if not isinstance(value, str):
            return [f"{where}: {BASIC_TAG} expects a file name string"]
        return []

    if tag == BIGGEST_FILE_IN_FOLDER_TAG:
        if not isinstance(value, dict):
            return [f"{where}: {BIGGEST_FILE_IN_FOLDER_TAG} expects an object"]
        errors = []
        for key in ("folder", "file_type"):
            if not isinstance(value.get(key), str):
                errors.append(f"{where}.{key}: missing or not a string")
        return errors

    return [f"{where}: unknown pattern type '{tag}' (use: {', '.join(PATTERN_TAGS)})"]


def _validate_config(data: Any) -> list[str]:
    """Validate decoded JSON and return list of errors."""
    if not isinstance(data, dict):
        return ["config must be a JSON object"]

    errors: list[str] = []

    patterns = data.get("search_patterns")
    if not isinstance(patterns, list):
        errors.append("search_patterns: missing or not a list")
    else:
        for i, item in enumerate(patterns):
            errors.extend(_validate_pattern(item, f"search_patterns[{i}]"))

    if not isinstance(data.get("root_folder"), str):
        errors.append("root_folder: missing or not a string")

    return errors


def pattern_from_dict(data: dict[str, Any]) -> SearchPattern:
    """Decode a single-key tagged object into a pattern."""
    errors = _validate_pattern(data, "pattern")
    if errors:
        raise ConfigError("; ".join(errors))

    tag, value = next(iter(data.items()))
    if tag == BASIC_TAG:
        return BasicPattern(value)
    return BiggestFileInFolderPattern(folder=value["folder"], file_type=value["file_type"])


def config_from_dict(data: Any) -> Config:
    """
    Convert decoded JSON to Config.

    Raises:
        ConfigError: If the data does not match the config schema
    """
    errors = _validate_config(data)
    if errors:
        raise ConfigError(f"Config validation failed: {'; '.join(errors)}")

    return Config(
        search_patterns=[pattern_from_dict(item) for item in data["search_patterns"]],
        root_folder=Path(data["root_folder"]),
    )


def load_config_from_file(path: Path) -> Config:
    """
    Load configuration from a JSON file.

    Raises:
        ConfigError: If the file cannot be read or is not a valid config
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    try:
        config = config_from_dict(data)
    except ConfigError as e:
        raise ConfigError(f"{e} ({path})") from e

    logger.debug("Loaded %d search patterns from %s", len(config.search_patterns), path)
    return config


def write_default_config(path: Path = Path(DEFAULT_CONFIG_FILENAME)) -> Path:
    """
    Write the example configuration as pretty-printed JSON.

    An existing file at ``path`` is overwritten.

    Raises:
        ConfigError: If the file cannot be written
    """
    text = json.dumps(config_to_dict(default_config()), indent=2)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot write config {path}: {e}") from e

    logger.debug("Wrote default config to %s", path)
    return path
