"""Data access layer."""

from .providers import MovieProvider, QuoteProvider, WeatherProvider
from .tmdb_provider import TMDBMovieProvider
from .weather_provider import OpenMeteoWeatherProvider
from .yahoo_provider import YahooQuoteProvider

__all__ = [
    "MovieProvider",
    "OpenMeteoWeatherProvider",
    "QuoteProvider",
    "TMDBMovieProvider",
    "WeatherProvider",
    "YahooQuoteProvider",
]
