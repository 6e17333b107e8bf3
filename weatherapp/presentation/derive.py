"""Pure mappings from raw OpenWeatherMap payloads to display models."""

import logging
import math
from collections.abc import Iterable
from datetime import datetime, tzinfo

from weatherapp.errors import MalformedResponse
from weatherapp.models.weather import CurrentWeather, ForecastDay, WeatherReport

logger = logging.getLogger(__name__)

MIDDAY_MARKER = "12:00:00"
FORECAST_DAYS = 5


def round_temp(value: float) -> int:
    """Round to the nearest whole degree, halves up (21.5 -> 22, -0.5 -> 0)."""
    return int(math.floor(value + 0.5))


def derive_current_weather(raw: dict) -> CurrentWeather:
    """Map a /weather payload to CurrentWeather.

    Raises:
        MalformedResponse: if a required field is missing or not numeric.
    """
    try:
        main = raw["main"]
        condition = raw["weather"][0]
        return CurrentWeather(
            name=raw["name"],
            temp_c=round_temp(main["temp"]),
            feels_like_c=round_temp(main["feels_like"]),
            description=condition["description"],
            icon_id=condition["icon"],
            humidity_pct=int(main["humidity"]),
            wind_speed_ms=float(raw["wind"]["speed"]),
            pressure_hpa=int(main["pressure"]),
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise MalformedResponse(f"Malformed current weather response: {e!r}") from e


def derive_forecast(
    raw: dict,
    days: int = FORECAST_DAYS,
    marker: str = MIDDAY_MARKER,
    tz: tzinfo | None = None,
) -> tuple[ForecastDay, ...]:
    """Pick one sample per day from a 3-hour forecast series.

    Keeps entries whose dt_txt contains the midday marker, in series order,
    and returns at most `days` of them.
    """
    try:
        series = raw["list"]
    except (KeyError, TypeError) as e:
        raise MalformedResponse(f"Malformed forecast response: {e!r}") from e
    if not isinstance(series, list):
        raise MalformedResponse(
            f"Malformed forecast response: list is {type(series).__name__}"
        )

    selected: list[ForecastDay] = []
    for entry in _midday_entries(series, marker):
        if len(selected) >= days:
            break
        selected.append(_forecast_day(entry, tz))

    if len(selected) < days:
        logger.info(
            "Forecast series of %d entries yielded %d of %d days",
            len(series), len(selected), days,
        )
    return tuple(selected)


def derive_report(
    current_raw: dict,
    forecast_raw: dict,
    days: int = FORECAST_DAYS,
    marker: str = MIDDAY_MARKER,
    tz: tzinfo | None = None,
) -> WeatherReport:
    return WeatherReport(
        current=derive_current_weather(current_raw),
        forecast=derive_forecast(forecast_raw, days=days, marker=marker, tz=tz),
    )


def format_forecast_date(dt: int, tz: tzinfo | None = None) -> str:
    """Short weekday, month and day, e.g. 'Mon, Feb 9'.

    tz=None renders in the system local zone.
    """
    if tz is None:
        when = datetime.fromtimestamp(dt).astimezone()
    else:
        when = datetime.fromtimestamp(dt, tz)
    return f"{when:%a}, {when:%b} {when.day}"


def _midday_entries(series: Iterable[dict], marker: str) -> Iterable[dict]:
    for entry in series:
        try:
            dt_txt = str(entry.get("dt_txt", ""))
        except AttributeError as e:
            raise MalformedResponse(f"Malformed forecast entry: {e!r}") from e
        if marker in dt_txt:
            yield entry


def _forecast_day(entry: dict, tz: tzinfo | None) -> ForecastDay:
    try:
        condition = entry["weather"][0]
        dt = int(entry["dt"])
        return ForecastDay(
            dt=dt,
            date=format_forecast_date(dt, tz),
            temp_c=round_temp(entry["main"]["temp"]),
            icon_id=condition["icon"],
            description=condition["description"],
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise MalformedResponse(f"Malformed forecast entry: {e!r}") from e
