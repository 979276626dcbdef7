from __future__ import annotations

"""Domain models for the dashboard widgets."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Literal, get_args

TimeRange = Literal["1W", "1M", "3M", "6M", "1Y", "ALL"]
TIME_RANGES: tuple[str, ...] = get_args(TimeRange)
DEFAULT_TIME_RANGE: TimeRange = "1M"

WidgetKind = Literal["finance", "weather", "movies"]


@dataclass(frozen=True, slots=True)
class QuoteSnapshot:
    symbol: str
    price: float | None = None
    change: float | None = None
    change_percent: float | None = None
    high: float | None = None
    low: float | None = None
    open: float | None = None
    previous_close: float | None = None
    volume: int | None = None


@dataclass(frozen=True, slots=True)
class HistoricalPoint:
    date: date
    price: float | None

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date.isoformat(), "price": self.price}


@dataclass(frozen=True, slots=True)
class StockQuote:
    """A snapshot together with its one-year daily history."""

    snapshot: QuoteSnapshot
    history: tuple[HistoricalPoint, ...] = ()

    @property
    def symbol(self) -> str:
        return self.snapshot.symbol


@dataclass(frozen=True, slots=True)
class Location:
    name: str
    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class HourlyPoint:
    time: datetime
    temperature: float | None
    wind_speed: float | None


@dataclass(frozen=True, slots=True)
class WeatherReport:
    location: Location
    temperature: float | None
    wind_speed: float | None
    hourly: tuple[HourlyPoint, ...] = ()


@dataclass(frozen=True, slots=True)
class Movie:
    id: int
    title: str
    overview: str = ""
    vote_average: float | None = None
    release_date: date | None = None
    poster_url: str | None = None
