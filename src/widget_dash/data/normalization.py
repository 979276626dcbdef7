"""Normalize upstream JSON payloads into the dashboard's view models."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from datetime import date, datetime, timezone
from typing import Any

import pandas as pd

from ..domain import HistoricalPoint, HourlyPoint, Location, Movie, QuoteSnapshot, WeatherReport
from ..utils import FetchError

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = ["date", "price"]

# Snapshot attribute -> Yahoo quote field
QUOTE_FIELD_MAP = {
    "price": "regularMarketPrice",
    "change": "regularMarketChange",
    "change_percent": "regularMarketChangePercent",
    "high": "regularMarketDayHigh",
    "low": "regularMarketDayLow",
    "open": "regularMarketOpen",
    "previous_close": "regularMarketPreviousClose",
}


def _unwrap(value: Any) -> Any:
    # Yahoo sends {"raw": 1.0, "fmt": "1.00"} when formatted output is on.
    if isinstance(value, Mapping):
        return value.get("raw")
    return value


def _as_float(value: Any) -> float | None:
    value = _unwrap(value)
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _as_volume(value: Any) -> int | None:
    number = _as_float(value)
    if number is None or number < 0:
        return None
    return int(number)


def _first_result(payload: Any, envelope: str, source: str) -> Mapping[str, Any]:
    body = payload.get(envelope) if isinstance(payload, Mapping) else None
    results = body.get("result") if isinstance(body, Mapping) else None
    if not results or not isinstance(results[0], Mapping):
        raise FetchError("empty-result", f"no {envelope} result row", source=source)
    return results[0]


def epoch_to_date(timestamp: float) -> date:
    """Truncate epoch seconds to a UTC calendar date."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).date()


def _as_date(value: Any) -> date | None:
    seconds = _as_float(value)
    if seconds is None:
        return None
    try:
        return epoch_to_date(seconds)
    except (OverflowError, OSError, ValueError):
        return None


def pair_series(
    left: Sequence[Any], right: Sequence[Any], *, label: str, strict: bool = False, source: str | None = None
) -> list[tuple[Any, Any]]:
    """Zip two parallel upstream arrays by position.

    Mismatched lengths are bounded by the shorter array and logged, or raise a
    ``shape-mismatch`` error when ``strict`` is set.
    """
    if len(left) != len(right):
        if strict:
            raise FetchError("shape-mismatch", f"{label}: {len(left)} vs {len(right)} entries", source=source)
        logger.warning("%s arrays differ in length (%d vs %d); truncating to %d", label, len(left), len(right), min(len(left), len(right)))
    return list(zip(left, right))


def normalize_quote_payload(payload: Any, requested_symbol: str) -> QuoteSnapshot:
    """Read the flat snapshot fields from ``quoteResponse.result[0]``."""
    row = _first_result(payload, "quoteResponse", source="quote")

    symbol = row.get("symbol")
    if not symbol:
        logger.warning("Quote payload for %s has no symbol; using the requested one", requested_symbol)
        symbol = requested_symbol

    fields = {attr: _as_float(row.get(key)) for attr, key in QUOTE_FIELD_MAP.items()}
    return QuoteSnapshot(symbol=str(symbol), volume=_as_volume(row.get("regularMarketVolume")), **fields)


def normalize_chart_payload(payload: Any, *, strict: bool = False) -> tuple[HistoricalPoint, ...]:
    """Rebuild (date, close) points from ``chart.result[0]``'s parallel arrays."""
    row = _first_result(payload, "chart", source="chart")

    timestamps = row.get("timestamp")
    if not isinstance(timestamps, list):
        raise FetchError("empty-result", "chart result has no timestamp array", source="chart")

    try:
        closes = row["indicators"]["quote"][0].get("close") or []
    except (KeyError, IndexError, TypeError, AttributeError):
        closes = []
    if not isinstance(closes, list):
        closes = []

    pairs = pair_series(timestamps, closes, label="chart timestamp/close", strict=strict, source="chart")
    points = []
    for ts, close in pairs:
        day = _as_date(ts)
        if day is None:
            logger.debug("Skipping chart entry with unusable timestamp: %r", ts)
            continue
        points.append(HistoricalPoint(date=day, price=_as_float(close)))
    return tuple(points)


def normalize_geocode_payload(payload: Any, query: str) -> Location:
    """Take the best Nominatim match."""
    if not isinstance(payload, list) or not payload:
        raise FetchError("empty-result", f"no location matches {query!r}", source="geocoder")

    match = payload[0]
    latitude = _as_float(match.get("lat"))
    longitude = _as_float(match.get("lon"))
    if latitude is None or longitude is None:
        raise FetchError("empty-result", f"location for {query!r} has no coordinates", source="geocoder")

    return Location(name=match.get("display_name") or query, latitude=latitude, longitude=longitude)


def normalize_forecast_payload(payload: Any, location: Location) -> WeatherReport:
    current = payload.get("current_weather") if isinstance(payload, Mapping) else None
    if not isinstance(current, Mapping):
        raise FetchError("empty-result", "forecast has no current weather", source="forecast")

    hourly = payload.get("hourly") or {}
    times = hourly.get("time") or []
    temperatures = hourly.get("temperature_2m") or []
    winds = hourly.get("wind_speed_10m") or []

    pairs = pair_series(times, temperatures, label="hourly time/temperature", source="forecast")
    winds = list(winds[: len(pairs)]) + [None] * (len(pairs) - len(winds))
    points = tuple(
        HourlyPoint(time=datetime.fromisoformat(stamp), temperature=_as_float(temperature), wind_speed=_as_float(wind))
        for (stamp, temperature), wind in zip(pairs, winds)
    )

    return WeatherReport(
        location=location,
        temperature=_as_float(current.get("temperature")),
        wind_speed=_as_float(current.get("windspeed")),
        hourly=points,
    )


def _parse_release_date(raw: Any) -> date | None:
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except (TypeError, ValueError):
        return None


def normalize_movie_results(payload: Any, image_base_url: str) -> tuple[Movie, ...]:
    """Map TMDB ``results`` entries to movies, skipping unusable rows."""
    results = payload.get("results") if isinstance(payload, Mapping) else None
    if results is None:
        raise FetchError("empty-result", "movie payload has no results", source="tmdb")

    movies = []
    for raw in results:
        movie_id = raw.get("id")
        title = raw.get("title")
        if movie_id is None or not title:
            logger.debug("Skipping movie entry without id/title: %s", raw)
            continue
        poster_path = raw.get("poster_path")
        movies.append(
            Movie(
                id=int(movie_id),
                title=title,
                overview=raw.get("overview") or "",
                vote_average=_as_float(raw.get("vote_average")),
                release_date=_parse_release_date(raw.get("release_date")),
                poster_url=f"{image_base_url.rstrip('/')}{poster_path}" if poster_path else None,
            )
        )
    return tuple(movies)


def empty_history_frame() -> pd.DataFrame:
    """Return an empty canonical history frame."""
    return pd.DataFrame(columns=HISTORY_COLUMNS)


def history_frame(points: Iterable[HistoricalPoint]) -> pd.DataFrame:
    """Convert points to a ``date``/``price`` frame, dropping null closes."""
    rows = [(point.date, point.price) for point in points if point.price is not None]
    if not rows:
        return empty_history_frame()
    frame = pd.DataFrame(rows, columns=HISTORY_COLUMNS)
    frame["date"] = pd.to_datetime(frame["date"])
    frame["price"] = frame["price"].astype(float)
    return frame.reset_index(drop=True)
