"""Analytics over normalized series."""

from .returns import annualized_volatility, compute_daily_returns
from .summary import build_range_summary

__all__ = ["annualized_volatility", "build_range_summary", "compute_daily_returns"]
