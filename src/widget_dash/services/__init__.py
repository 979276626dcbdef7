"""Service layer entry points."""

from .movies_service import search_movies, trending_movies
from .quote_service import fetch_quote
from .range_filter import filter_by_range, range_start
from .weather_service import fetch_weather, geocode, get_forecast
from .widget_state import QuoteWidgetState

__all__ = [
    "QuoteWidgetState",
    "fetch_quote",
    "fetch_weather",
    "filter_by_range",
    "geocode",
    "get_forecast",
    "range_start",
    "search_movies",
    "trending_movies",
]
