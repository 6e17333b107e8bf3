"""Weather view models: current conditions, daily forecast, theme, query state."""

from dataclasses import dataclass, field
from enum import StrEnum

DEFAULT_ICON_BASE_URL = "https://openweathermap.org/img/wn"


class Theme(StrEnum):
    NIGHT = "night"
    RAINY = "rainy"
    CLOUDY = "cloudy"
    SUNNY = "sunny"


class QueryStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


def icon_url(icon_id: str, base_url: str = DEFAULT_ICON_BASE_URL) -> str:
    """Build the provider's 2x icon URL for an icon code."""
    return f"{base_url.rstrip('/')}/{icon_id}@2x.png"


@dataclass(frozen=True)
class CurrentWeather:
    name: str
    temp_c: int
    feels_like_c: int
    description: str
    icon_id: str
    humidity_pct: int
    wind_speed_ms: float
    pressure_hpa: int


@dataclass(frozen=True)
class ForecastDay:
    dt: int  # unix seconds of the sampled entry
    date: str  # e.g. "Mon, Feb 9"
    temp_c: int
    icon_id: str
    description: str


@dataclass(frozen=True)
class WeatherReport:
    """Current conditions and forecast, always replaced together."""

    current: CurrentWeather
    forecast: tuple[ForecastDay, ...] = ()


@dataclass(frozen=True)
class QueryState:
    city_input: str = ""
    status: QueryStatus = QueryStatus.IDLE
    report: WeatherReport | None = None
    error: str | None = None
    generation: int = field(default=0, compare=False)

    def __post_init__(self):
        if self.status == QueryStatus.SUCCESS and self.report is None:
            raise ValueError("success state requires a report")
        if self.status == QueryStatus.FAILED and not self.error:
            raise ValueError("failed state requires an error message")
        if self.status != QueryStatus.SUCCESS and self.report is not None:
            raise ValueError(f"{self.status} state cannot carry a report")
        if self.status != QueryStatus.FAILED and self.error is not None:
            raise ValueError(f"{self.status} state cannot carry an error")

    @property
    def loading(self) -> bool:
        return self.status == QueryStatus.LOADING

    @property
    def current(self) -> CurrentWeather | None:
        return self.report.current if self.report else None

    @property
    def forecast(self) -> tuple[ForecastDay, ...]:
        return self.report.forecast if self.report else ()

    @classmethod
    def idle(cls, city_input: str = "", generation: int = 0) -> "QueryState":
        return cls(city_input=city_input, generation=generation)

    @classmethod
    def started(cls, city_input: str, generation: int) -> "QueryState":
        return cls(
            city_input=city_input, status=QueryStatus.LOADING, generation=generation
        )

    @classmethod
    def succeeded(
        cls, city_input: str, report: WeatherReport, generation: int
    ) -> "QueryState":
        return cls(
            city_input=city_input,
            status=QueryStatus.SUCCESS,
            report=report,
            generation=generation,
        )

    @classmethod
    def failed(cls, city_input: str, error: str, generation: int) -> "QueryState":
        return cls(
            city_input=city_input,
            status=QueryStatus.FAILED,
            error=error,
            generation=generation,
        )
