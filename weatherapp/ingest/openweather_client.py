"""OpenWeatherMap client for current conditions and the 5-day/3-hour forecast."""

import logging

import httpx

from weatherapp.config.schema import OPENWEATHER_BASE_URL
from weatherapp.errors import CityNotFound, ForecastUnavailable, NetworkOrParseFailure

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    """Two GET endpoints, both keyed by city name. No retries, no caching."""

    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        units: str = "metric",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.timeout = timeout
        self._transport = transport

    def _params(self, city: str) -> dict[str, str]:
        return {"q": city, "appid": self.api_key, "units": self.units}

    async def get_current(self, city: str) -> dict:
        """Fetch current conditions. Non-success status raises CityNotFound."""
        resp = await self._get("/weather", city)
        if not resp.is_success:
            logger.warning(
                "Current weather for %r returned %d", city, resp.status_code
            )
            raise CityNotFound(status_code=resp.status_code)
        return _decode(resp)

    async def get_forecast(self, city: str) -> dict:
        """Fetch the 3-hour forecast series. Non-success raises ForecastUnavailable."""
        resp = await self._get("/forecast", city)
        if not resp.is_success:
            logger.warning("Forecast for %r returned %d", city, resp.status_code)
            raise ForecastUnavailable(status_code=resp.status_code)
        return _decode(resp)

    async def _get(self, endpoint: str, city: str) -> httpx.Response:
        url = f"{self.base_url}{endpoint}"
        logger.info("GET %s q=%s", url, city)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                return await client.get(url, params=self._params(city))
        except httpx.RequestError as e:
            logger.warning("OpenWeather request failed for %r: %s", city, e)
            raise NetworkOrParseFailure(str(e) or type(e).__name__) from e


def _decode(resp: httpx.Response) -> dict:
    try:
        data = resp.json()
    except ValueError as e:
        logger.warning("Undecodable OpenWeather response from %s: %s", resp.url, e)
        raise NetworkOrParseFailure(str(e)) from e
    if not isinstance(data, dict):
        raise NetworkOrParseFailure(f"Unexpected response type: {type(data).__name__}")
    return data
