from datetime import date, datetime, timezone

import pytest

from conftest import FakeQuoteProvider, make_chart_payload, make_quote_payload
from widget_dash.services import QuoteWidgetState
from widget_dash.utils import USER_MESSAGE, FetchError


def test_successful_refresh_records_quote(quote_provider):
    state = QuoteWidgetState()

    assert state.refresh(quote_provider, "AAPL") is True
    assert state.last_good.symbol == "AAPL"
    assert state.last_error is None
    assert state.error_message is None


def test_failed_refresh_keeps_previous_quote(quote_provider, transport_error):
    state = QuoteWidgetState()
    state.refresh(quote_provider, "AAPL")
    previous = state.last_good

    assert state.refresh(FakeQuoteProvider(quote=transport_error), "MSFT") is False

    assert state.last_good is previous
    assert state.last_error.kind == "transport"
    assert state.error_message == USER_MESSAGE


def test_success_clears_previous_error(quote_provider):
    state = QuoteWidgetState()
    state.refresh(FakeQuoteProvider(quote={"quoteResponse": {"result": []}}), "NOPE")
    assert state.last_error is not None

    state.refresh(FakeQuoteProvider(quote=make_quote_payload(symbol="MSFT")), "MSFT")

    assert state.last_error is None
    assert state.last_good.symbol == "MSFT"


def test_new_request_cancels_the_previous_token():
    state = QuoteWidgetState()
    first = state.begin_request()
    second = state.begin_request()

    assert first.cancelled
    assert not second.cancelled


def test_cancelled_result_does_not_touch_state(quote_provider):
    state = QuoteWidgetState()
    state.refresh(quote_provider, "AAPL")
    previous = state.last_good

    class SupersededProvider(FakeQuoteProvider):
        def fetch_chart_payload(self, symbol, range_="1y", interval="1d"):
            state.begin_request()  # a newer submission arrives mid-flight
            raise FetchError("transport", "HTTP 500")

    assert state.refresh(SupersededProvider(), "MSFT") is False
    assert state.last_good is previous
    assert state.last_error is None


def test_visible_series_applies_selected_range():
    chart = make_chart_payload([1709251200, 1710374400], [10.0, 11.0])  # 2024-03-01, 2024-03-14
    state = QuoteWidgetState()
    state.refresh(FakeQuoteProvider(chart=chart), "AAPL")
    now = datetime(2024, 3, 15, tzinfo=timezone.utc)

    state.select_range("1W")
    assert [p.date for p in state.visible_series(now)] == [date(2024, 3, 14)]

    state.select_range("ALL")
    assert len(state.visible_series(now)) == 2


def test_visible_series_is_empty_before_first_fetch():
    assert QuoteWidgetState().visible_series() == ()


def test_default_range_and_validation():
    state = QuoteWidgetState()
    assert state.time_range == "1M"
    with pytest.raises(ValueError):
        state.select_range("2W")
