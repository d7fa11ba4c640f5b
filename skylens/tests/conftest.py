"""Shared test fixtures."""

import json
import sqlite3
from datetime import UTC, datetime
from pathlib import Path

import pytest
import respx
import yaml

from skylens.models.common import City, TemperatureUnit
from skylens.models.weather import WeatherInfo
from skylens.storage.database import open_database

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _isolate_respx_global_router():
    """Keep routes added to respx's global router from leaking between tests."""
    respx.mock.snapshot()
    yield
    respx.mock.rollback()


class FakeWeatherService:
    """Records calls and returns a canned WeatherInfo or raises a canned error."""

    def __init__(self, info: WeatherInfo | None = None, error: Exception | None = None):
        self.info = info
        self.error = error
        self.calls: list[tuple[City, TemperatureUnit]] = []

    async def fetch_weather(self, city: City, unit: TemperatureUnit) -> WeatherInfo:
        self.calls.append((city, unit))
        if self.error is not None:
            raise self.error
        assert self.info is not None
        return self.info


def make_weather_info(
    city_name: str = "Toronto",
    temperature: float = 25.0,
    feels_like: float = 27.0,
    unit: TemperatureUnit = TemperatureUnit.METRIC,
) -> WeatherInfo:
    return WeatherInfo(
        city_name=city_name,
        condition="Sunny",
        temperature=temperature,
        feels_like=feels_like,
        last_updated=datetime(2023, 10, 18, 14, 30, tzinfo=UTC),
        weather_code=32,
        unit=unit,
        image_base_url="https://icons.example.com/",
    )


@pytest.fixture
def db(tmp_path: Path) -> sqlite3.Connection:
    conn = open_database(tmp_path / "test.db")
    yield conn
    conn.close()


@pytest.fixture
def observation_payload() -> dict:
    with open(FIXTURE_DIR / "observation_toronto.json") as f:
        return json.load(f)


@pytest.fixture
def sample_info() -> WeatherInfo:
    return make_weather_info()


@pytest.fixture
def weather_info_factory():
    return make_weather_info


@pytest.fixture
def fake_service(sample_info: WeatherInfo) -> FakeWeatherService:
    return FakeWeatherService(info=sample_info)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"base_url": "https://test-weather.example.com/placecode"},
        "contact": {"submission_delay_seconds": 0},
        "storage": {"db_path": str(tmp_path / "prefs.db")},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
