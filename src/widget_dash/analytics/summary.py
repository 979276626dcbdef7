"""Summary figures for the visible slice of a history series."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..data.normalization import history_frame
from ..domain import HistoricalPoint
from .returns import annualized_volatility, compute_daily_returns

SUMMARY_KEYS = (
    "start_date",
    "end_date",
    "start_price",
    "last_price",
    "change",
    "change_pct",
    "high",
    "low",
    "volatility",
)


def build_range_summary(series: Iterable[HistoricalPoint]) -> dict[str, Any]:
    """Compute first/last price, change, extremes and volatility over ``series``."""
    frame = history_frame(series)
    if frame.empty:
        return dict.fromkeys(SUMMARY_KEYS)

    prices = frame["price"]
    start_price = float(prices.iloc[0])
    last_price = float(prices.iloc[-1])
    change = last_price - start_price

    return {
        "start_date": frame["date"].iloc[0].date(),
        "end_date": frame["date"].iloc[-1].date(),
        "start_price": start_price,
        "last_price": last_price,
        "change": change,
        "change_pct": (change / start_price * 100) if start_price else None,
        "high": float(prices.max()),
        "low": float(prices.min()),
        "volatility": annualized_volatility(compute_daily_returns(prices)),
    }
