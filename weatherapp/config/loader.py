"""YAML config loader with environment credential and dotted-key lookup."""

import os
from pathlib import Path
from typing import Any

import yaml

from weatherapp.config.schema import AppConfig
from weatherapp.errors import ApiKeyMissing

API_KEY_ENV = "OPENWEATHER_API_KEY"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from an optional YAML file.

    A missing path yields defaults. If the YAML leaves provider.api_key empty,
    the key is taken from the OPENWEATHER_API_KEY environment variable.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ValueError(
                f"Config {path} must be a YAML mapping, got {type(raw).__name__}"
            )

    provider = raw.get("provider") or {}
    raw["provider"] = provider
    # non-mapping sections are left for pydantic to reject
    if isinstance(provider, dict) and not provider.get("api_key"):
        env_key = os.environ.get(API_KEY_ENV, "")
        if env_key:
            provider["api_key"] = env_key

    return AppConfig(**raw)


def require_api_key(config: AppConfig) -> str:
    """Return the configured API key or raise ApiKeyMissing."""
    key = config.provider.api_key.strip()
    if not key:
        raise ApiKeyMissing(
            f"{API_KEY_ENV} not set and provider.api_key missing from config"
        )
    return key


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'theme.night_start_hour'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict) and part in obj:
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted_dump(config: AppConfig) -> str:
    """JSON dump with the API key masked, for `config show`."""
    data = config.model_dump(mode="json")
    if data["provider"]["api_key"]:
        data["provider"]["api_key"] = "***"
    return AppConfig(**data).model_dump_json(indent=2)
