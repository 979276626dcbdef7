from __future__ import annotations

import threading

import pytest
import requests

from widget_dash.utils import FetchError

DAY = 86400
BASE_TS = 1700000000  # 2023-11-14 22:13:20 UTC


def make_quote_payload(symbol="AAPL", **overrides):
    row = {
        "symbol": symbol,
        "regularMarketPrice": 189.5,
        "regularMarketChange": 1.25,
        "regularMarketChangePercent": 0.66,
        "regularMarketDayHigh": 190.1,
        "regularMarketDayLow": 187.3,
        "regularMarketOpen": 188.0,
        "regularMarketPreviousClose": 188.25,
        "regularMarketVolume": 51234567,
    }
    row.update(overrides)
    return {"quoteResponse": {"result": [row], "error": None}}


def make_chart_payload(timestamps=None, closes=None):
    if timestamps is None:
        timestamps = [BASE_TS, BASE_TS + DAY]
    if closes is None:
        closes = [100.5, 101.25]
    return {
        "chart": {
            "result": [{"meta": {"symbol": "AAPL"}, "timestamp": timestamps, "indicators": {"quote": [{"close": closes}]}}],
            "error": None,
        }
    }


class FakeQuoteProvider:
    """Serves canned payloads, or raises when handed an exception."""

    def __init__(self, quote=None, chart=None):
        self.quote = make_quote_payload() if quote is None else quote
        self.chart = make_chart_payload() if chart is None else chart
        self.calls = []

    def _serve(self, value):
        if isinstance(value, BaseException):
            raise value
        return value

    def fetch_quote_payload(self, symbol):
        self.calls.append(("quote", symbol))
        return self._serve(self.quote)

    def fetch_chart_payload(self, symbol, range_="1y", interval="1d"):
        self.calls.append(("chart", symbol, range_, interval))
        return self._serve(self.chart)


class BlockingQuoteProvider(FakeQuoteProvider):
    """Holds both requests until ``release`` is set."""

    def __init__(self):
        super().__init__()
        self.release = threading.Event()

    def fetch_quote_payload(self, symbol):
        self.release.wait(5)
        return super().fetch_quote_payload(symbol)

    def fetch_chart_payload(self, symbol, range_="1y", interval="1d"):
        self.release.wait(5)
        return super().fetch_chart_payload(symbol, range_, interval)


class FakeResponse:
    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """Records GET calls and replays queued responses (or exceptions)."""

    def __init__(self, *responses):
        self.headers = {}
        self.responses = list(responses)
        self.requests = []

    def get(self, url, params=None, timeout=None):
        self.requests.append({"url": url, "params": params, "timeout": timeout, "headers": dict(self.headers)})
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response


@pytest.fixture
def quote_provider():
    return FakeQuoteProvider()


@pytest.fixture
def transport_error():
    return FetchError("transport", "HTTP 503", source="chart")
