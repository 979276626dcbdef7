"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

ENV_PREFIX = "WIDGET_DASH_"
_TRUTHY = ("1", "true", "yes", "on")


def _env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True, slots=True)
class Settings:
    yahoo_api_key: str | None = None
    yahoo_base_url: str = "https://query1.finance.yahoo.com"
    tmdb_api_key: str | None = None
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_image_base_url: str = "https://image.tmdb.org/t/p/w500"
    geocoder_url: str = "https://nominatim.openstreetmap.org/search"
    forecast_url: str = "https://api.open-meteo.com/v1/forecast"
    user_agent: str = "widget-dash/0.1"
    request_timeout: float = 10.0
    strict_shape: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``WIDGET_DASH_*`` variables, falling back to defaults."""
        defaults = cls()
        raw_timeout = _env("REQUEST_TIMEOUT")
        if raw_timeout is None:
            timeout = defaults.request_timeout
        else:
            try:
                timeout = float(raw_timeout)
            except ValueError as err:
                raise ValueError(f"{ENV_PREFIX}REQUEST_TIMEOUT must be a number, got {raw_timeout!r}") from err
            if timeout <= 0:
                raise ValueError(f"{ENV_PREFIX}REQUEST_TIMEOUT must be positive, got {timeout}")

        return cls(
            yahoo_api_key=_env("YAHOO_API_KEY"),
            yahoo_base_url=_env("YAHOO_BASE_URL", defaults.yahoo_base_url).rstrip("/"),
            tmdb_api_key=_env("TMDB_API_KEY"),
            tmdb_base_url=_env("TMDB_BASE_URL", defaults.tmdb_base_url).rstrip("/"),
            tmdb_image_base_url=_env("TMDB_IMAGE_BASE_URL", defaults.tmdb_image_base_url).rstrip("/"),
            geocoder_url=_env("GEOCODER_URL", defaults.geocoder_url),
            forecast_url=_env("FORECAST_URL", defaults.forecast_url),
            user_agent=_env("USER_AGENT", defaults.user_agent),
            request_timeout=timeout,
            strict_shape=(_env("STRICT_SHAPE", "0").lower() in _TRUTHY),
        )
