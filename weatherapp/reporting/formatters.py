"""Output formatters for the lookup view state."""

import json

from weatherapp.models.weather import (
    DEFAULT_ICON_BASE_URL,
    CurrentWeather,
    ForecastDay,
    QueryState,
    Theme,
    icon_url,
)


def state_to_dict(
    state: QueryState,
    theme: Theme | None = None,
    icon_base_url: str = DEFAULT_ICON_BASE_URL,
) -> dict:
    """View model consumed by the web page and `lookup --json`."""
    current = state.current
    return {
        "city_input": state.city_input,
        "status": state.status.value,
        "loading": state.loading,
        "error": state.error,
        "current": _current_dict(current, icon_base_url) if current else None,
        "forecast": [_day_dict(d, icon_base_url) for d in state.forecast],
        "theme": theme.value if theme else None,
    }


def format_state_json(
    state: QueryState,
    theme: Theme | None = None,
    icon_base_url: str = DEFAULT_ICON_BASE_URL,
) -> str:
    return json.dumps(state_to_dict(state, theme, icon_base_url), indent=2)


def format_state_text(state: QueryState, theme: Theme | None = None) -> str:
    """Plain text rendering for the terminal."""
    if state.error:
        return f"Error: {state.error}"
    if state.loading:
        return "Loading..."
    current = state.current
    if current is None:
        return "Enter city name"

    lines = [
        f"=== {current.name} ===",
        f"{current.temp_c}°C  {current.description}",
        f"Feels like: {current.feels_like_c}°C | Humidity: {current.humidity_pct}%",
        f"Wind: {current.wind_speed_ms} m/s | Pressure: {current.pressure_hpa} hPa",
    ]
    if theme:
        lines.append(f"Theme: {theme.value}")
    if state.forecast:
        lines.append("Forecast:")
        for day in state.forecast:
            lines.append(f"  {day.date:<12} {day.temp_c:>4}°C  {day.description}")
    return "\n".join(lines)


def _current_dict(c: CurrentWeather, icon_base_url: str) -> dict:
    return {
        "name": c.name,
        "temp_c": c.temp_c,
        "feels_like_c": c.feels_like_c,
        "description": c.description,
        "icon_id": c.icon_id,
        "icon_url": icon_url(c.icon_id, icon_base_url),
        "humidity_pct": c.humidity_pct,
        "wind_speed_ms": c.wind_speed_ms,
        "pressure_hpa": c.pressure_hpa,
    }


def _day_dict(d: ForecastDay, icon_base_url: str) -> dict:
    return {
        "dt": d.dt,
        "date": d.date,
        "temp_c": d.temp_c,
        "icon_id": d.icon_id,
        "icon_url": icon_url(d.icon_id, icon_base_url),
        "description": d.description,
    }
