"""Error taxonomy for weather lookups."""


class WeatherAppError(Exception):
    """Base error. The message is what the widget shows to the user."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CityNotFound(WeatherAppError):
    """Current-weather request returned a non-success status."""

    def __init__(self, message: str = "City not found", status_code: int | None = None):
        super().__init__(message, status_code)


class ForecastUnavailable(WeatherAppError):
    """Forecast request returned a non-success status."""

    def __init__(
        self, message: str = "Forecast unavailable", status_code: int | None = None
    ):
        super().__init__(message, status_code)


class NetworkOrParseFailure(WeatherAppError):
    """Transport error or undecodable response body."""


class MalformedResponse(NetworkOrParseFailure):
    """Response decoded but is missing fields the widget needs."""


class ApiKeyMissing(WeatherAppError):
    """No provider credential configured."""

    def __init__(
        self,
        message: str = "OPENWEATHER_API_KEY not set",
        status_code: int | None = None,
    ):
        super().__init__(message, status_code)
