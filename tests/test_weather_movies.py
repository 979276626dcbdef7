from datetime import date, datetime

import pytest

from widget_dash.data.normalization import normalize_movie_results
from widget_dash.domain import Location
from widget_dash.services import fetch_weather, geocode, get_forecast, search_movies, trending_movies
from widget_dash.utils import FetchError

FORECAST = {
    "current_weather": {"temperature": 18.4, "windspeed": 12.1, "weathercode": 3},
    "hourly": {
        "time": ["2024-05-01T00:00", "2024-05-01T01:00", "2024-05-01T02:00"],
        "temperature_2m": [15.0, 14.6, None],
        "wind_speed_10m": [10.0, 11.5],
    },
}


class FakeWeatherProvider:
    def __init__(self, places=None, forecast=None):
        self.places = [{"display_name": "Lisboa, Portugal", "lat": "38.7077", "lon": "-9.1365"}] if places is None else places
        self.forecast = FORECAST if forecast is None else forecast
        self.forecast_calls = []

    def search_location(self, query):
        return self.places

    def fetch_forecast_payload(self, latitude, longitude):
        self.forecast_calls.append((latitude, longitude))
        if isinstance(self.forecast, BaseException):
            raise self.forecast
        return self.forecast


class FakeMovieProvider:
    image_base_url = "https://img.test/w500"

    def __init__(self, payload=None):
        self.payload = payload if payload is not None else {"results": [{"id": 1, "title": "Dune", "poster_path": "/dune.jpg"}]}
        self.searches = []

    def fetch_trending_payload(self):
        return self.payload

    def fetch_search_payload(self, query):
        self.searches.append(query)
        return self.payload


def test_geocode_takes_first_match():
    location = geocode(FakeWeatherProvider(), " Lisbon ")
    assert location == Location(name="Lisboa, Portugal", latitude=38.7077, longitude=-9.1365)


def test_unknown_place_is_empty_result():
    with pytest.raises(FetchError) as exc:
        geocode(FakeWeatherProvider(places=[]), "Atlantis")
    assert exc.value.kind == "empty-result"


def test_blank_place_is_rejected():
    with pytest.raises(ValueError):
        fetch_weather(FakeWeatherProvider(), "  ")


def test_fetch_weather_builds_report():
    provider = FakeWeatherProvider()

    report = fetch_weather(provider, "Lisbon")

    assert provider.forecast_calls == [(38.7077, -9.1365)]
    assert report.temperature == 18.4
    assert report.wind_speed == 12.1
    assert [p.time for p in report.hourly] == [datetime(2024, 5, 1, h) for h in range(3)]
    assert report.hourly[2].temperature is None
    # Wind array is one short; the trailing point has no wind value.
    assert report.hourly[2].wind_speed is None
    assert report.hourly[1].wind_speed == 11.5


def test_forecast_without_current_weather_fails():
    with pytest.raises(FetchError) as exc:
        get_forecast(FakeWeatherProvider(forecast={"hourly": {}}), Location("X", 0.0, 0.0))
    assert exc.value.kind == "empty-result"


def test_forecast_transport_error_propagates():
    provider = FakeWeatherProvider(forecast=FetchError("transport", "HTTP 502", source="forecast"))
    with pytest.raises(FetchError) as exc:
        fetch_weather(provider, "Lisbon")
    assert exc.value.kind == "transport"


def test_trending_movies_are_normalized():
    movies = trending_movies(FakeMovieProvider())
    assert movies[0].title == "Dune"
    assert movies[0].poster_url == "https://img.test/w500/dune.jpg"


def test_blank_search_skips_the_network():
    provider = FakeMovieProvider()
    assert search_movies(provider, "   ") == ()
    assert provider.searches == []


def test_search_strips_query():
    provider = FakeMovieProvider()
    search_movies(provider, " Dune ")
    assert provider.searches == ["Dune"]


def test_movie_rows_without_id_or_title_are_skipped():
    payload = {
        "results": [
            {"id": 7, "title": "Arrival", "vote_average": 7.9, "release_date": "2016-11-11", "overview": "Linguist."},
            {"title": "No id"},
            {"id": 9, "title": ""},
            {"id": 10, "title": "Unreleased", "release_date": "", "poster_path": None},
        ]
    }

    movies = normalize_movie_results(payload, "https://img.test/")

    assert [m.id for m in movies] == [7, 10]
    assert movies[0].release_date == date(2016, 11, 11)
    assert movies[0].vote_average == 7.9
    assert movies[1].release_date is None
    assert movies[1].poster_url is None


def test_movie_payload_without_results_fails():
    with pytest.raises(FetchError) as exc:
        trending_movies(FakeMovieProvider(payload={"status_message": "Invalid API key"}))
    assert exc.value.kind == "empty-result"
