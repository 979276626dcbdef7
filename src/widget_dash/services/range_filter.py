"""Trailing-window filter over a historical series."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timezone

import pandas as pd

from ..domain import TIME_RANGES, HistoricalPoint, TimeRange

RANGE_OFFSETS: dict[str, pd.DateOffset | None] = {
    "1W": pd.DateOffset(days=7),
    "1M": pd.DateOffset(months=1),
    "3M": pd.DateOffset(months=3),
    "6M": pd.DateOffset(months=6),
    "1Y": pd.DateOffset(years=1),
    "ALL": None,
}


def range_start(time_range: TimeRange, now: datetime | date | None = None) -> date | None:
    """Return the first calendar date kept by ``time_range``, or None for ALL.

    A timezone-aware ``now`` is converted to UTC before the offset is applied.
    """
    if time_range not in RANGE_OFFSETS:
        raise ValueError(f"Unknown time range {time_range!r}; expected one of {', '.join(TIME_RANGES)}")

    offset = RANGE_OFFSETS[time_range]
    if offset is None:
        return None

    stamp = pd.Timestamp(now if now is not None else datetime.now(timezone.utc))
    if stamp.tzinfo is not None:
        stamp = stamp.tz_convert("UTC")
    return (stamp - offset).date()


def filter_by_range(
    series: Iterable[HistoricalPoint], time_range: TimeRange, now: datetime | date | None = None
) -> tuple[HistoricalPoint, ...]:
    """Keep points dated on or after the range cutoff, preserving order."""
    points = tuple(series)
    cutoff = range_start(time_range, now)
    if cutoff is None:
        return points
    return tuple(point for point in points if point.date >= cutoff)
