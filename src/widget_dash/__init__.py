"""widget_dash package with UI-agnostic logic for the dashboard widgets."""

from .config import Settings
from .domain import (
    DEFAULT_TIME_RANGE,
    TIME_RANGES,
    HistoricalPoint,
    HourlyPoint,
    Location,
    Movie,
    QuoteSnapshot,
    StockQuote,
    TimeRange,
    WeatherReport,
)

__all__ = [
    "DEFAULT_TIME_RANGE",
    "TIME_RANGES",
    "HistoricalPoint",
    "HourlyPoint",
    "Location",
    "Movie",
    "QuoteSnapshot",
    "Settings",
    "StockQuote",
    "TimeRange",
    "WeatherReport",
]
