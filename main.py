"""Streamlit entrypoint for the widget dashboard."""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# --- Ensure src is on path for local imports ---
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from widget_dash import TIME_RANGES, Settings  # noqa: E402
from widget_dash.analytics import build_range_summary  # noqa: E402
from widget_dash.data import OpenMeteoWeatherProvider, TMDBMovieProvider, YahooQuoteProvider  # noqa: E402
from widget_dash.domain import WidgetKind  # noqa: E402
from widget_dash.services import QuoteWidgetState, fetch_weather, search_movies, trending_movies  # noqa: E402
from widget_dash.utils import USER_MESSAGE, FetchError, get_logger  # noqa: E402
from widget_dash.viz import (  # noqa: E402
    format_change,
    format_money,
    format_percent,
    format_volume,
    make_price_chart,
    make_temperature_chart,
)

logger = get_logger("widget_dash.app")

WIDGETS: dict[str, WidgetKind] = {"Finance": "finance", "Weather": "weather", "Movies": "movies"}


@st.cache_resource
def load_settings() -> Settings:
    return Settings.from_env()


@st.cache_resource
def load_quote_provider(settings: Settings) -> YahooQuoteProvider:
    return YahooQuoteProvider.from_settings(settings)


@st.cache_resource
def load_weather_provider(settings: Settings) -> OpenMeteoWeatherProvider:
    return OpenMeteoWeatherProvider.from_settings(settings)


@st.cache_resource
def load_movie_provider(settings: Settings) -> TMDBMovieProvider:
    return TMDBMovieProvider.from_settings(settings)


def render_finance(settings: Settings) -> None:
    st.header("Stock Tracker")
    if "quote_state" not in st.session_state:
        st.session_state.quote_state = QuoteWidgetState()
    state: QuoteWidgetState = st.session_state.quote_state

    with st.form("symbol_form"):
        symbol = st.text_input("Symbol", placeholder="e.g. AAPL")
        submitted = st.form_submit_button("Get quote")

    if submitted and symbol.strip():
        with st.spinner(f"Fetching {symbol.strip().upper()}..."):
            state.refresh(load_quote_provider(settings), symbol, strict_shape=settings.strict_shape)

    if state.error_message:
        st.error(state.error_message)

    quote = state.last_good
    if quote is None:
        st.info("Enter a ticker symbol to begin.")
        return

    snapshot = quote.snapshot
    st.subheader(snapshot.symbol)
    st.metric(
        "Price",
        format_money(snapshot.price),
        delta=f"{format_change(snapshot.change)} ({format_percent(snapshot.change_percent)})",
        delta_color="off" if snapshot.change is None else "normal",
    )

    col1, col2 = st.columns(2)
    col1.write(f"Open: {format_money(snapshot.open)}")
    col2.write(f"Previous Close: {format_money(snapshot.previous_close)}")
    col1.write(f"High: {format_money(snapshot.high)}")
    col2.write(f"Low: {format_money(snapshot.low)}")
    col1.write(f"Volume: {format_volume(snapshot.volume)}")

    selected = st.radio("Range", options=list(TIME_RANGES), index=TIME_RANGES.index(state.time_range), horizontal=True)
    state.select_range(selected)

    visible = state.visible_series()
    chart = make_price_chart(visible, title=f"{snapshot.symbol} ({state.time_range})", previous_close=snapshot.previous_close)
    st.plotly_chart(chart, use_container_width=True)

    summary = build_range_summary(visible)
    if summary["last_price"] is not None:
        c1, c2, c3 = st.columns(3)
        c1.metric("Range change", format_percent(summary["change_pct"]))
        c2.metric("Range high / low", f"{format_money(summary['high'])} / {format_money(summary['low'])}")
        volatility = summary["volatility"]
        c3.metric("Volatility (ann.)", "N/A" if volatility is None else f"{volatility * 100:.1f}%")


def render_weather(settings: Settings) -> None:
    st.header("Weather Insights")
    with st.form("weather_form"):
        place = st.text_input("City", placeholder="e.g. Lisbon")
        submitted = st.form_submit_button("Get weather")

    if submitted and place.strip():
        try:
            with st.spinner("Fetching weather..."):
                st.session_state.weather = fetch_weather(load_weather_provider(settings), place)
        except FetchError as err:
            logger.error("Weather fetch failed (%s): %s", err.kind, err)
            st.error(USER_MESSAGE)

    report = st.session_state.get("weather")
    if report is None:
        return

    st.subheader(report.location.name)
    c1, c2 = st.columns(2)
    c1.metric("Temperature", "N/A" if report.temperature is None else f"{report.temperature:.1f} °C")
    c2.metric("Wind", "N/A" if report.wind_speed is None else f"{report.wind_speed:.1f} km/h")
    st.plotly_chart(make_temperature_chart(report.hourly, title="Hourly temperature"), use_container_width=True)


def _render_movie_list(movies, title: str) -> None:
    st.subheader(title)
    if not movies:
        st.info("No movies found.")
        return
    cols = st.columns(4)
    for index, movie in enumerate(movies):
        with cols[index % 4]:
            if movie.poster_url:
                st.image(movie.poster_url)
            st.markdown(f"**{movie.title}**")
            rating = "N/A" if movie.vote_average is None else f"{movie.vote_average:.1f} / 10"
            released = movie.release_date.isoformat() if movie.release_date else "N/A"
            st.caption(f"{rating} · {released}")
            with st.expander("Overview"):
                st.write(movie.overview or "No overview available.")


def render_movies(settings: Settings) -> None:
    st.header("Movie Explorer")
    provider = load_movie_provider(settings)

    with st.form("movie_form"):
        query = st.text_input("Search movies")
        submitted = st.form_submit_button("Search")

    try:
        if submitted and query.strip():
            _render_movie_list(search_movies(provider, query), f"Results for “{query.strip()}”")
        else:
            refresh = st.button("Refresh trending")
            if refresh or st.session_state.get("trending") is None:
                st.session_state.trending = trending_movies(provider)
            _render_movie_list(st.session_state.trending, "Trending Movies")
    except FetchError as err:
        logger.error("Movie fetch failed (%s): %s", err.kind, err)
        st.error(USER_MESSAGE)


def main() -> None:
    st.set_page_config(page_title="Widget Dashboard", layout="wide")
    st.title("Widget Dashboard")
    st.caption("Streamlit + requests + Plotly")

    settings = load_settings()
    choice = st.sidebar.radio("Widget", options=list(WIDGETS.keys()))
    widget = WIDGETS[choice]

    if widget == "finance":
        render_finance(settings)
    elif widget == "weather":
        render_weather(settings)
    else:
        render_movies(settings)


if __name__ == "__main__":
    main()
