"""Weather widget service: place name -> current conditions + hourly forecast."""

from __future__ import annotations

import logging

from ..data.normalization import normalize_forecast_payload, normalize_geocode_payload
from ..data.providers import WeatherProvider
from ..domain import Location, WeatherReport

logger = logging.getLogger(__name__)


def geocode(provider: WeatherProvider, place: str) -> Location:
    if not place or not place.strip():
        raise ValueError("place must be a non-empty string")
    place = place.strip()
    return normalize_geocode_payload(provider.search_location(place), place)


def get_forecast(provider: WeatherProvider, location: Location) -> WeatherReport:
    payload = provider.fetch_forecast_payload(location.latitude, location.longitude)
    return normalize_forecast_payload(payload, location)


def fetch_weather(provider: WeatherProvider, place: str) -> WeatherReport:
    """Geocode ``place`` and fetch its forecast; any failure aborts both steps."""
    location = geocode(provider, place)
    logger.info("Fetching forecast for %s (%.4f, %.4f)", location.name, location.latitude, location.longitude)
    return get_forecast(provider, location)
