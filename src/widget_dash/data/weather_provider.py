"""Nominatim geocoder and Open-Meteo forecast adapter."""

from __future__ import annotations

from typing import Any

import requests

from ..config import Settings
from .http import build_session, get_json
from .providers import WeatherProvider


class OpenMeteoWeatherProvider(WeatherProvider):
    HOURLY_FIELDS = "temperature_2m,wind_speed_10m"

    def __init__(
        self,
        geocoder_url: str = "https://nominatim.openstreetmap.org/search",
        forecast_url: str = "https://api.open-meteo.com/v1/forecast",
        user_agent: str = "widget-dash/0.1",
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.geocoder_url = geocoder_url
        self.forecast_url = forecast_url
        self.timeout = timeout
        # Nominatim rejects requests without an identifying User-Agent.
        self._session = session or build_session({"User-Agent": user_agent})

    @classmethod
    def from_settings(cls, settings: Settings) -> "OpenMeteoWeatherProvider":
        return cls(
            geocoder_url=settings.geocoder_url,
            forecast_url=settings.forecast_url,
            user_agent=settings.user_agent,
            timeout=settings.request_timeout,
        )

    def search_location(self, query: str) -> list[dict[str, Any]]:
        return get_json(
            self._session,
            self.geocoder_url,
            params={"q": query, "format": "json", "limit": 1},
            timeout=self.timeout,
            source="geocoder",
        )

    def fetch_forecast_payload(self, latitude: float, longitude: float) -> dict[str, Any]:
        return get_json(
            self._session,
            self.forecast_url,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "current_weather": "true",
                "hourly": self.HOURLY_FIELDS,
            },
            timeout=self.timeout,
            source="forecast",
        )
