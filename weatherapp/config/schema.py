"""Pydantic v2 configuration schema with strict validation."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from weatherapp.models.weather import DEFAULT_ICON_BASE_URL

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPENWEATHER_BASE_URL
    api_key: str = ""
    units: Literal["metric"] = "metric"
    timeout_seconds: float | None = Field(default=None, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast_days: int = Field(default=5, ge=1, le=5)
    midday_marker: str = Field(default="12:00:00", min_length=1)
    icon_base_url: str = DEFAULT_ICON_BASE_URL
    timezone: str | None = None  # IANA name; None = system local


class ThemeConfig(BaseModel):
    model_config = {"extra": "forbid"}

    night_start_hour: int = Field(default=20, ge=0, le=23)
    night_end_hour: int = Field(default=6, ge=0, le=23)

    @model_validator(mode="after")
    def _check_window(self) -> "ThemeConfig":
        if self.night_end_hour > self.night_start_hour:
            raise ValueError("night_end_hour must not be after night_start_hour")
        return self


class WebConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    display: DisplayConfig = DisplayConfig()
    theme: ThemeConfig = ThemeConfig()
    web: WebConfig = WebConfig()
