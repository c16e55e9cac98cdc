"""Tests for config loading and dotted-key lookup."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from skycast.config.loader import get_config_value, load_config
from skycast.config.schema import Units


@pytest.fixture(autouse=True)
def _no_env_key(monkeypatch):
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.provider.api_key == "yaml-key"
        assert config.provider.units == Units.METRIC
        assert config.search.default_city == "Ahmedabad"
        assert config.search.suggestion_limit == 3

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "absent.yaml")
        assert config.search.default_city == "Rajkot"
        assert config.provider.api_key == ""

    def test_none_path_uses_defaults(self):
        config = load_config(None)
        assert config.search.suggestion_limit == 5

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.provider.weather_base_url == "https://api.openweathermap.org/data/2.5"

    def test_env_fills_empty_api_key(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "env-key")
        path = tmp_path / "c.yaml"
        path.write_text("provider:\n  api_key: ''\n")
        assert load_config(path).provider.api_key == "env-key"

    def test_yaml_key_wins_over_env(self, config_yaml_path: Path, monkeypatch):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "env-key")
        assert load_config(config_yaml_path).provider.api_key == "yaml-key"

    def test_imperial_units_rejected(self, tmp_path: Path):
        path = tmp_path / "imperial.yaml"
        path.write_text("provider:\n  units: imperial\n")
        with pytest.raises(ValidationError):
            load_config(path)


class TestGetConfigValue:
    def test_nested(self, default_config):
        assert get_config_value(default_config, "search.default_city") == "Rajkot"
        assert get_config_value(default_config, "provider.timeout_seconds") == 10.0

    def test_missing_key(self, default_config):
        with pytest.raises(KeyError):
            get_config_value(default_config, "search.nonexistent")
