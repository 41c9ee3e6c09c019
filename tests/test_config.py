"""Tests for the configuration module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from find_biggest_file.config import (
    DEFAULT_CONFIG_FILENAME,
    Config,
    ConfigError,
    _validate_config,
    config_from_dict,
    config_to_dict,
    default_config,
    load_config_from_file,
    pattern_from_dict,
    pattern_to_dict,
    write_default_config,
)
from find_biggest_file.patterns import BasicPattern, BiggestFileInFolderPattern

EXAMPLE_JSON = {
    "search_patterns": [
        {"Basic": "example.txt"},
        {"BiggestFileInFolder": {"folder": "Example", "file_type": "txt"}},
    ],
    "root_folder": ".",
}


class TestConfig:
    """Tests for Config dataclass."""

    def test_default_values(self):
        config = Config()
        assert config.search_patterns == []
        assert config.root_folder == Path(".")

    def test_default_config(self):
        config = default_config()
        assert config.search_patterns == [
            BasicPattern("example.txt"),
            BiggestFileInFolderPattern(folder="Example", file_type="txt"),
        ]
        assert config.root_folder == Path(".")


class TestPatternCodec:
    """Tests for pattern_to_dict / pattern_from_dict."""

    def test_basic_encoding(self):
        assert pattern_to_dict(BasicPattern("a.txt")) == {"Basic": "a.txt"}

    def test_folder_encoding(self):
        encoded = pattern_to_dict(BiggestFileInFolderPattern("Docs", "pdf"))
        assert encoded == {"BiggestFileInFolder": {"folder": "Docs", "file_type": "pdf"}}

    def test_decode_basic(self):
        assert pattern_from_dict({"Basic": "a.txt"}) == BasicPattern("a.txt")

    def test_decode_folder(self):
        data = {"BiggestFileInFolder": {"folder": "Docs", "file_type": "pdf"}}
        assert pattern_from_dict(data) == BiggestFileInFolderPattern("Docs", "pdf")

    def test_decode_unknown_tag(self):
        with pytest.raises(ConfigError, match="unknown pattern type 'Glob'"):
            pattern_from_dict({"Glob": "*.txt"})


class TestValidateConfig:
    """Tests for _validate_config function."""

    def test_valid_config(self):
        assert _validate_config(EXAMPLE_JSON) == []

    def test_not_an_object(self):
        assert _validate_config([]) == ["config must be a JSON object"]

    def test_missing_fields(self):
        errors = _validate_config({})
        assert len(errors) == 2
        assert "search_patterns" in errors[0]
        assert "root_folder" in errors[1]

    def test_collects_every_pattern_error(self):
        data = {
            "search_patterns": [
                {"Basic": 3},
                {"BiggestFileInFolder": {"folder": "A"}},
                {"Basic": "a", "Extra": "b"},
                "example.txt",
            ],
            "root_folder": ".",
        }
        errors = _validate_config(data)
        assert len(errors) == 4
        assert errors[0].startswith("search_patterns[0]")
        assert errors[1] == "search_patterns[1].file_type: missing or not a string"
        assert errors[2].startswith("search_patterns[2]")
        assert errors[3].startswith("search_patterns[3]")

    def test_unknown_top_level_keys_ignored(self):
        data = dict(EXAMPLE_JSON, comment="ignored")
        assert _validate_config(data) == []


class TestConfigFromDict:
    """Tests for config_from_dict / config_to_dict."""

    def test_example(self):
        assert config_from_dict(EXAMPLE_JSON) == default_config()

    def test_keeps_duplicates_and_order(self):
        data = {
            "search_patterns": [{"Basic": "b"}, {"Basic": "a"}, {"Basic": "b"}],
            "root_folder": "/data",
        }
        config = config_from_dict(data)
        assert config.search_patterns == [BasicPattern("b"), BasicPattern("a"), BasicPattern("b")]
        assert config.root_folder == Path("/data")

    def test_invalid_raises(self):
        with pytest.raises(ConfigError, match="Config validation failed"):
            config_from_dict({"search_patterns": "nope", "root_folder": "."})

    def test_to_dict(self):
        assert config_to_dict(default_config()) == EXAMPLE_JSON


class TestLoadConfigFromFile:
    """Tests for load_config_from_file function."""

    def test_load_valid_file(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps(EXAMPLE_JSON))
        assert load_config_from_file(config_file) == default_config()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read config"):
            load_config_from_file(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{ not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config_from_file(config_file)

    def test_schema_mismatch_names_file(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"search_patterns": []}))
        with pytest.raises(ConfigError, match="root_folder") as exc_info:
            load_config_from_file(config_file)
        assert str(config_file) in str(exc_info.value)

    def test_config_error_is_value_error(self, tmp_path):
        with pytest.raises(ValueError):
            load_config_from_file(tmp_path / "nope.json")


class TestWriteDefaultConfig:
    """Tests for write_default_config function."""

    def test_round_trip(self, tmp_path):
        path = write_default_config(tmp_path / DEFAULT_CONFIG_FILENAME)
        assert load_config_from_file(path) == default_config()

    def test_pretty_printed(self, tmp_path):
        path = write_default_config(tmp_path / DEFAULT_CONFIG_FILENAME)
        text = path.read_text()
        assert "\n  " in text
        assert json.loads(text) == EXAMPLE_JSON

    def test_overwrites_existing(self, tmp_path):
        path = tmp_path / DEFAULT_CONFIG_FILENAME
        path.write_text("old")
        write_default_config(path)
        assert json.loads(path.read_text()) == EXAMPLE_JSON

    def test_unwritable_target(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot write config"):
            write_default_config(tmp_path / "missing-dir" / DEFAULT_CONFIG_FILENAME)
