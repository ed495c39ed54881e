"""
Tests for configuration loading.
"""

import json

import pytest
from src.streamflow_daily.core.config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment overrides out of the tests."""
    for name in ("CONFIG_FILE", "FLOW_UNIT", "TIMEZONE", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_config(tmp_path):
    def _write(data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write


class TestConfig:
    """Test cases for Config."""

    def test_load(self, write_config):
        config = Config(write_config({
            "processing": {
                "timezone": "America/Denver",
                "flow_unit": "CMS",
                "horizons": ["long_range"],
            },
            "logging": {"level": "DEBUG"},
        }))

        assert config.timezone == "America/Denver"
        assert config.flow_unit == "CMS"
        assert config.horizons == ["long_range"]
        assert config.log_level == "DEBUG"
        assert config.log_file is None
        assert config.get("processing.timezone") == "America/Denver"
        assert config.get("processing.missing", "fallback") == "fallback"

    def test_defaults(self, write_config):
        config = Config(write_config({"processing": {}}))

        assert config.timezone == "UTC"
        assert config.flow_unit == "CFS"
        assert config.horizons == ["medium_range", "long_range"]
        assert config.log_level == "INFO"

    def test_unit_context(self, write_config):
        config = Config(write_config({"processing": {"flow_unit": "cms"}}))
        assert config.unit_context.current_unit == "CMS"

    def test_env_overrides(self, write_config, monkeypatch):
        path = write_config({"processing": {"flow_unit": "CFS", "timezone": "UTC"}})
        monkeypatch.setenv("FLOW_UNIT", "CMS")
        monkeypatch.setenv("TIMEZONE", "Europe/Berlin")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        config = Config(path)

        assert config.flow_unit == "CMS"
        assert config.timezone == "Europe/Berlin"
        assert config.log_level == "WARNING"

    def test_config_file_from_env(self, write_config, monkeypatch):
        monkeypatch.setenv("CONFIG_FILE", write_config({"processing": {"flow_unit": "CMS"}}))
        assert Config().flow_unit == "CMS"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "absent.json"))

    def test_missing_processing_section(self, write_config):
        with pytest.raises(ValueError, match="processing"):
            Config(write_config({"logging": {}}))

    def test_invalid_flow_unit(self, write_config):
        with pytest.raises(ValueError, match="flow_unit"):
            Config(write_config({"processing": {"flow_unit": "GPM"}}))

    def test_invalid_timezone(self, write_config):
        with pytest.raises(ValueError, match="Invalid timezone"):
            Config(write_config({"processing": {"timezone": "Atlantis/Central"}}))

    def test_unknown_horizon(self, write_config):
        with pytest.raises(ValueError, match="short_range"):
            Config(write_config({"processing": {"horizons": ["short_range"]}}))
