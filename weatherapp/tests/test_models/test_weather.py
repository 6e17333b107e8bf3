"""Tests for weather view models."""

from dataclasses import FrozenInstanceError

import pytest

from weatherapp.models.weather import (
    CurrentWeather,
    ForecastDay,
    QueryState,
    QueryStatus,
    Theme,
    WeatherReport,
    icon_url,
)


def _report() -> WeatherReport:
    current = CurrentWeather(
        name="London",
        temp_c=22,
        feels_like_c=21,
        description="light rain",
        icon_id="10d",
        humidity_pct=64,
        wind_speed_ms=4.12,
        pressure_hpa=1012,
    )
    day = ForecastDay(
        dt=1770638400, date="Mon, Feb 9", temp_c=10, icon_id="10d",
        description="light rain",
    )
    return WeatherReport(current=current, forecast=(day,))


class TestEnums:
    def test_theme_values(self):
        assert [t.value for t in Theme] == ["night", "rainy", "cloudy", "sunny"]

    def test_status_values(self):
        assert QueryStatus.LOADING == "loading"


class TestIconUrl:
    def test_default_base(self):
        assert icon_url("10d") == "https://openweathermap.org/img/wn/10d@2x.png"

    def test_trailing_slash(self):
        assert icon_url("01n", "https://icons.example.com/") == (
            "https://icons.example.com/01n@2x.png"
        )


class TestQueryState:
    def test_default_idle(self):
        state = QueryState()
        assert state.status == QueryStatus.IDLE
        assert state.loading is False
        assert state.current is None
        assert state.forecast == ()

    def test_success_carries_report(self):
        report = _report()
        state = QueryState.succeeded("London", report, 1)
        assert state.current.name == "London"
        assert state.forecast == report.forecast
        assert state.error is None

    def test_started_is_loading(self):
        state = QueryState.started("London", 1)
        assert state.loading is True
        assert state.report is None
        assert state.error is None

    def test_loading_with_error_impossible(self):
        with pytest.raises(ValueError):
            QueryState(status=QueryStatus.LOADING, error="nope")

    def test_failed_with_report_impossible(self):
        with pytest.raises(ValueError):
            QueryState(status=QueryStatus.FAILED, error="x", report=_report())

    def test_success_requires_report(self):
        with pytest.raises(ValueError):
            QueryState(status=QueryStatus.SUCCESS)

    def test_failed_requires_message(self):
        with pytest.raises(ValueError):
            QueryState.failed("London", "", 1)

    def test_generation_ignored_in_equality(self):
        report = _report()
        assert QueryState.succeeded("London", report, 1) == QueryState.succeeded(
            "London", report, 2
        )

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            QueryState().error = "x"
