"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from skycast.config.schema import AppConfig
from skycast.ingest.openweather_client import OpenWeatherClient

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str):
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def current_payload() -> dict:
    return load_fixture("current_rajkot.json")


@pytest.fixture
def forecast_payload() -> dict:
    return load_fixture("forecast_rajkot.json")


@pytest.fixture
def geocode_payload() -> list[dict]:
    return load_fixture("geocode_rajk.json")


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def client() -> OpenWeatherClient:
    return OpenWeatherClient(
        api_key="test-key",
        weather_base_url="https://test-owm.example.com/data/2.5",
        geocoding_base_url="https://test-owm.example.com/geo/1.0",
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"api_key": "yaml-key", "units": "metric"},
        "search": {"default_city": "Ahmedabad", "suggestion_limit": 3},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
