"""Yahoo Finance REST adapter for quotes and daily history."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote as url_quote

import requests

from ..config import Settings
from .http import build_session, get_json
from .providers import QuoteProvider

logger = logging.getLogger(__name__)


class YahooQuoteProvider(QuoteProvider):
    """Fetches raw ``v7/finance/quote`` and ``v8/finance/chart`` payloads.

    The bearer credential is supplied by the caller; it is never read here.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = "https://query1.finance.yahoo.com",
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or build_session()
        if api_key:
            self._session.headers["Authorization"] = f"Bearer {api_key}"

    @classmethod
    def from_settings(cls, settings: Settings) -> "YahooQuoteProvider":
        return cls(api_key=settings.yahoo_api_key, base_url=settings.yahoo_base_url, timeout=settings.request_timeout)

    def fetch_quote_payload(self, symbol: str) -> dict[str, Any]:
        logger.debug("Requesting quote for %s", symbol)
        return get_json(
            self._session,
            f"{self.base_url}/v7/finance/quote",
            params={"symbols": symbol},
            timeout=self.timeout,
            source="quote",
        )

    def fetch_chart_payload(self, symbol: str, range_: str = "1y", interval: str = "1d") -> dict[str, Any]:
        logger.debug("Requesting %s/%s chart for %s", range_, interval, symbol)
        return get_json(
            self._session,
            f"{self.base_url}/v8/finance/chart/{url_quote(symbol, safe='')}",
            params={"range": range_, "interval": interval},
            timeout=self.timeout,
            source="chart",
        )
