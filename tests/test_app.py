from typing import get_args

import main
from widget_dash.config import Settings
from widget_dash.data import OpenMeteoWeatherProvider, TMDBMovieProvider, YahooQuoteProvider
from widget_dash.domain import WidgetKind


def test_widget_choices_cover_every_widget_kind():
    assert sorted(main.WIDGETS.values()) == sorted(get_args(WidgetKind))


def test_providers_are_reused_across_reruns():
    settings = Settings(yahoo_api_key="token", tmdb_api_key="key")
    main.load_quote_provider.clear()
    main.load_weather_provider.clear()
    main.load_movie_provider.clear()

    quote = main.load_quote_provider(settings)
    assert isinstance(quote, YahooQuoteProvider)
    assert main.load_quote_provider(settings) is quote
    assert main.load_weather_provider(settings) is main.load_weather_provider(settings)
    assert isinstance(main.load_weather_provider(settings), OpenMeteoWeatherProvider)
    assert isinstance(main.load_movie_provider(settings), TMDBMovieProvider)
    assert main.load_movie_provider(settings) is main.load_movie_provider(settings)


def test_changed_settings_build_a_new_provider():
    main.load_quote_provider.clear()
    first = main.load_quote_provider(Settings(request_timeout=5.0))
    second = main.load_quote_provider(Settings(request_timeout=7.5))
    assert first is not second
