"""Shared test fixtures."""

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
import yaml

from weatherapp.config.schema import AppConfig, DisplayConfig, ProviderConfig

TEST_BASE_URL = "https://test-owm.example.com"
SERIES_START = datetime(2026, 2, 9, 0, 0, 0, tzinfo=UTC)  # a Monday

# Temperature and condition of the 12:00 sample on each of the five days
MIDDAY_SAMPLES = [
    (10.4, "light rain", "10d"),
    (11.5, "few clouds", "02d"),
    (12.6, "clear sky", "01d"),
    (-0.5, "snow", "13d"),
    (14.49, "overcast clouds", "04d"),
]


def make_forecast_series(
    start: datetime = SERIES_START, days: int = 5, step_hours: int = 3
) -> dict:
    """Build a /forecast payload with one entry every 3 hours."""
    entries = []
    per_day = 24 // step_hours
    for i in range(days * per_day):
        when = start + timedelta(hours=i * step_hours)
        day = i // per_day
        if when.hour == 12 and day < len(MIDDAY_SAMPLES):
            temp, description, icon = MIDDAY_SAMPLES[day]
        else:
            temp, description, icon = 5.0, "broken clouds", "04n"
        entries.append({
            "dt": int(when.timestamp()),
            "dt_txt": when.strftime("%Y-%m-%d %H:%M:%S"),
            "main": {"temp": temp, "feels_like": temp - 1, "humidity": 80},
            "weather": [{"main": "x", "description": description, "icon": icon}],
        })
    return {"cod": "200", "cnt": len(entries), "list": entries}


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def current_payload(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "current_london.json") as f:
        return json.load(f)


@pytest.fixture
def forecast_payload() -> dict:
    return make_forecast_series()


@pytest.fixture
def app_config() -> AppConfig:
    """Config pointed at the mock provider, dates rendered in UTC."""
    return AppConfig(
        provider=ProviderConfig(base_url=TEST_BASE_URL, api_key="test-key"),
        display=DisplayConfig(timezone="UTC"),
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"base_url": TEST_BASE_URL, "api_key": "yaml-key"},
        "theme": {"night_start_hour": 21},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
