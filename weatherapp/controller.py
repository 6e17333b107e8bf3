"""Query controller: runs the current + forecast lookup and owns the view state."""

import logging
from collections.abc import Callable
from datetime import datetime, tzinfo

from weatherapp.config.schema import AppConfig
from weatherapp.errors import WeatherAppError
from weatherapp.ingest.openweather_client import OpenWeatherClient
from weatherapp.models.common import local_now, resolve_timezone
from weatherapp.models.weather import QueryState, Theme
from weatherapp.presentation.derive import derive_report
from weatherapp.presentation.theme import derive_theme

logger = logging.getLogger(__name__)


class QueryController:
    """Single-screen lookup state machine: idle -> loading -> success | failed.

    Each accepted submission takes a new generation number. Only the latest
    generation may write its outcome, so a slow earlier lookup that finishes
    after a newer one started is dropped instead of overwriting it.
    """

    def __init__(
        self,
        client: OpenWeatherClient,
        config: AppConfig | None = None,
        clock: Callable[[tzinfo | None], datetime] = local_now,
    ):
        self.client = client
        self.config = config or AppConfig()
        self.clock = clock
        self.tz = resolve_timezone(self.config.display.timezone)
        self._state = QueryState()
        self._generation = 0

    @classmethod
    def from_config(cls, config: AppConfig, api_key: str) -> "QueryController":
        client = OpenWeatherClient(
            api_key=api_key,
            base_url=config.provider.base_url,
            units=config.provider.units,
            timeout=config.provider.timeout_seconds,
        )
        return cls(client, config)

    @property
    def state(self) -> QueryState:
        return self._state

    async def submit_query(self, city_name: str) -> QueryState:
        """Look up current weather then forecast for a city.

        Blank input is ignored. Any failure along the way leaves the state
        failed with the error's message and no report.
        """
        city = city_name.strip()
        if not city:
            return self._state

        self._generation += 1
        generation = self._generation
        self._state = QueryState.started(city_name, generation)

        outcome = self._state
        try:
            current_raw = await self.client.get_current(city)
            forecast_raw = await self.client.get_forecast(city)
            display = self.config.display
            report = derive_report(
                current_raw,
                forecast_raw,
                days=display.forecast_days,
                marker=display.midday_marker,
                tz=self.tz,
            )
            outcome = QueryState.succeeded(city_name, report, generation)
            logger.info(
                "Lookup %d for %r: %s, %d forecast days",
                generation, city, report.current.name, len(report.forecast),
            )
        except WeatherAppError as e:
            logger.info("Lookup %d for %r failed: %s", generation, city, e.message)
            outcome = QueryState.failed(city_name, e.message, generation)
        except Exception as e:
            logger.exception("Unexpected error during lookup %d for %r", generation, city)
            outcome = QueryState.failed(city_name, str(e) or type(e).__name__, generation)
        finally:
            if generation == self._generation:
                if outcome.loading:
                    # cancelled mid-flight; never leave the widget stuck loading
                    outcome = QueryState.idle(city_name, generation)
                self._state = outcome
            else:
                logger.debug(
                    "Discarding lookup %d for %r, superseded by %d",
                    generation, city, self._generation,
                )
        return self._state

    def reset(self) -> QueryState:
        """Back to idle, clearing results. In-flight lookups become stale."""
        self._generation += 1
        self._state = QueryState.idle(self._state.city_input, self._generation)
        return self._state

    def theme(self, now: datetime | None = None) -> Theme | None:
        """Theme for the current state at the given (or current) wall-clock time."""
        if now is None:
            now = self.clock(self.tz)
        return derive_theme(
            self._state.current,
            now.hour,
            night_start_hour=self.config.theme.night_start_hour,
            night_end_hour=self.config.theme.night_end_hour,
        )
