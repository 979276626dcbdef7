"""Return calculations on a price series."""

from __future__ import annotations

import numpy as np
import pandas as pd

TRADING_DAYS_PER_YEAR = 252


def compute_daily_returns(prices: pd.Series) -> pd.Series:
    """Calculate daily percentage change."""
    if prices.empty:
        return prices.copy()
    return prices.pct_change().dropna()


def annualized_volatility(daily_returns: pd.Series) -> float | None:
    """Annualize the standard deviation of daily returns; None with fewer than two returns."""
    if len(daily_returns) < 2:
        return None
    return float(daily_returns.std() * np.sqrt(TRADING_DAYS_PER_YEAR))
