"""Provider protocols for the upstream data sources."""

from __future__ import annotations

from typing import Any, Protocol


class QuoteProvider(Protocol):
    """Source of raw Yahoo-style quote and chart payloads."""

    def fetch_quote_payload(self, symbol: str) -> dict[str, Any]:
        """Fetch the ``quoteResponse`` envelope for one symbol."""
        raise NotImplementedError

    def fetch_chart_payload(self, symbol: str, range_: str = "1y", interval: str = "1d") -> dict[str, Any]:
        """Fetch the ``chart`` envelope with parallel timestamp/close arrays."""
        raise NotImplementedError


class WeatherProvider(Protocol):
    def search_location(self, query: str) -> list[dict[str, Any]]:
        raise NotImplementedError

    def fetch_forecast_payload(self, latitude: float, longitude: float) -> dict[str, Any]:
        raise NotImplementedError


class MovieProvider(Protocol):
    image_base_url: str

    def fetch_trending_payload(self) -> dict[str, Any]:
        raise NotImplementedError

    def fetch_search_payload(self, query: str) -> dict[str, Any]:
        raise NotImplementedError
