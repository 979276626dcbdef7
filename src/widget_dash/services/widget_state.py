"""UI-independent state for the finance widget."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime

from ..data.providers import QuoteProvider
from ..domain import DEFAULT_TIME_RANGE, TIME_RANGES, HistoricalPoint, StockQuote, TimeRange
from ..utils import USER_MESSAGE, CancelToken, FetchError
from .quote_service import fetch_quote
from .range_filter import filter_by_range

logger = logging.getLogger(__name__)


@dataclass
class QuoteWidgetState:
    """Latest successful quote and latest error, tracked separately.

    A failed refresh records the error but leaves the previously rendered
    quote in place.
    """

    last_good: StockQuote | None = None
    last_error: FetchError | None = None
    time_range: TimeRange = DEFAULT_TIME_RANGE
    _token: CancelToken | None = field(default=None, repr=False)

    def begin_request(self) -> CancelToken:
        """Cancel any in-flight request and hand out a token for a new one."""
        if self._token is not None:
            self._token.cancel()
        self._token = CancelToken()
        return self._token

    def refresh(self, provider: QuoteProvider, symbol: str, *, strict_shape: bool = False) -> bool:
        token = self.begin_request()
        try:
            quote = fetch_quote(provider, symbol, strict_shape=strict_shape, cancel_token=token)
        except FetchError as err:
            if err.kind == "cancelled" or token.cancelled:
                return False
            self.last_error = err
            return False

        if token.cancelled:
            logger.debug("Dropping stale result for %s", quote.symbol)
            return False
        self.last_good = quote
        self.last_error = None
        return True

    def select_range(self, time_range: str) -> None:
        if time_range not in TIME_RANGES:
            raise ValueError(f"Unknown time range {time_range!r}")
        self.time_range = time_range  # type: ignore[assignment]

    def visible_series(self, now: datetime | date | None = None) -> tuple[HistoricalPoint, ...]:
        if self.last_good is None:
            return ()
        return filter_by_range(self.last_good.history, self.time_range, now)

    @property
    def error_message(self) -> str | None:
        return USER_MESSAGE if self.last_error is not None else None
