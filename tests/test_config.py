"""
Tests for configuration loading and saving
(reminder_export/core/models.py, reminder_export/core/config.py).
"""

import json
import os

import pytest

from reminder_export.core.config import (
    CONFIG_ENV_VAR,
    get_default_config_path,
    load_config,
    save_config,
)
from reminder_export.core.exceptions import ConfigurationError
from reminder_export.core.models import ExportConfig, OutputFormat


class TestOutputFormat:

    @pytest.mark.parametrize("value, expected", [
        ("full", OutputFormat.FULL),
        ("fullJson", OutputFormat.FULL),
        ("simple", OutputFormat.SIMPLE),
        ("remindmd", OutputFormat.SIMPLE),
        (OutputFormat.SIMPLE, OutputFormat.SIMPLE),
    ])
    def test_parse(self, value, expected):
        assert OutputFormat.parse(value) == expected

    def test_unknown(self):
        with pytest.raises(ConfigurationError, match="Unknown output format"):
            OutputFormat.parse("yaml")


class TestExportConfig:

    def test_defaults(self):
        config = ExportConfig()
        assert config.include_lists == ".*"
        assert config.exclude_lists == ""
        assert config.include_completed is False
        assert config.output_format == OutputFormat.FULL
        assert config.output_path is None

    def test_format_string_is_parsed(self):
        assert ExportConfig(output_format="remindmd").output_format == OutputFormat.SIMPLE

    def test_invalid_timeout(self):
        with pytest.raises(ConfigurationError):
            ExportConfig(fetch_timeout=0)

    def test_invalid_indent(self):
        with pytest.raises(ConfigurationError):
            ExportConfig(indent=-1)


class TestLoadAndSave:

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(str(tmp_path / "nope.json")) == ExportConfig()

    def test_invalid_json_gives_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"export": ', encoding="utf-8")
        assert load_config(str(path)) == ExportConfig()

    def test_non_object_gives_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_config(str(path)) == ExportConfig()

    def test_export_section(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "export": {
                "include_lists": "Work",
                "exclude_lists": "Archive",
                "include_completed": True,
                "output_format": "simple",
            }
        }), encoding="utf-8")
        config = load_config(str(path))
        assert config.include_lists == "Work"
        assert config.exclude_lists == "Archive"
        assert config.include_completed is True
        assert config.output_format == OutputFormat.SIMPLE

    def test_top_level_keys(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"exclude_lists": "Old", "fetch_timeout": 5}),
                        encoding="utf-8")
        config = load_config(str(path))
        assert config.exclude_lists == "Old"
        assert config.fetch_timeout == 5.0

    @pytest.mark.parametrize("settings", [
        {"include_completed": "false"},
        {"include_completed": 1},
        {"indent": "two"},
        {"indent": None},
        {"fetch_timeout": "soon"},
        {"fetch_timeout": [30]},
    ])
    def test_mistyped_values_rejected(self, tmp_path, settings):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"export": settings}), encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_string_false_does_not_enable_completed(self):
        with pytest.raises(ConfigurationError, match="include_completed"):
            ExportConfig.from_dict({"export": {"include_completed": "false"}})

    def test_numeric_strings_accepted(self):
        config = ExportConfig.from_dict({"export": {"indent": "4", "fetch_timeout": "2.5"}})
        assert config.indent == 4
        assert config.fetch_timeout == 2.5

    def test_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        original = ExportConfig(include_lists="Home", include_completed=True,
                                output_format=OutputFormat.SIMPLE,
                                output_path=str(tmp_path / "out.json"))
        save_config(original, str(path))
        assert load_config(str(path)) == original

    def test_default_path_env_override(self, monkeypatch, tmp_path):
        target = tmp_path / "custom.json"
        monkeypatch.setenv(CONFIG_ENV_VAR, str(target))
        assert get_default_config_path() == target

    def test_default_path_xdg(self, monkeypatch, tmp_path):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_default_config_path() == tmp_path / "reminder2json" / "config.json"
