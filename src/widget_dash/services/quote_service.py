"""Quote + history fetch: two upstream calls joined into one view model."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait

from ..data.normalization import normalize_chart_payload, normalize_quote_payload
from ..data.providers import QuoteProvider
from ..domain import StockQuote
from ..utils import CancelToken, FetchError

logger = logging.getLogger(__name__)

HISTORY_RANGE = "1y"
HISTORY_INTERVAL = "1d"
CANCEL_POLL_SECONDS = 0.05


def _join(futures: tuple[Future, ...], symbol: str, cancel_token: CancelToken | None, poll_interval: float) -> None:
    if cancel_token is None:
        wait(futures)
        return

    pending = set(futures)
    while pending:
        if cancel_token.cancelled:
            break
        _, pending = wait(pending, timeout=poll_interval)

    if cancel_token.cancelled:
        logger.info("Abandoning fetch for %s: superseded by a newer request", symbol)
        raise FetchError("cancelled", f"fetch for {symbol} was cancelled")


def _payloads(futures: tuple[Future, ...]) -> list:
    """Return every result, or raise the most severe failure among them.

    Transport failures take precedence over anything else so that the caller
    sees one error even when both requests failed.
    """
    errors: list[FetchError] = []
    results = []
    for future in futures:
        err = future.exception()
        if err is None:
            results.append(future.result())
        elif isinstance(err, FetchError):
            errors.append(err)
        else:
            wrapped = FetchError("transport", str(err) or type(err).__name__)
            wrapped.__cause__ = err
            errors.append(wrapped)

    if errors:
        errors.sort(key=lambda e: e.kind != "transport")
        raise errors[0]
    return results


def fetch_quote(
    provider: QuoteProvider,
    symbol: str,
    *,
    strict_shape: bool = False,
    cancel_token: CancelToken | None = None,
    poll_interval: float = CANCEL_POLL_SECONDS,
) -> StockQuote:
    """Fetch the current snapshot and one year of daily closes for ``symbol``.

    Both upstream requests run concurrently and must settle before either
    payload is read. Any failure aborts the whole operation; no partial
    snapshot is returned.

    Raises:
        ValueError: if ``symbol`` is blank.
        FetchError: ``transport``, ``empty-result``, ``shape-mismatch`` (only
            with ``strict_shape``) or ``cancelled``.
    """
    if not symbol or not symbol.strip():
        raise ValueError("symbol must be a non-empty string")
    symbol = symbol.strip().upper()

    logger.info("Fetching quote and %s history for %s", HISTORY_RANGE, symbol)
    executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="quote-fetch")
    try:
        futures = (
            executor.submit(provider.fetch_quote_payload, symbol),
            executor.submit(provider.fetch_chart_payload, symbol, HISTORY_RANGE, HISTORY_INTERVAL),
        )
        _join(futures, symbol, cancel_token, poll_interval)
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    try:
        quote_payload, chart_payload = _payloads(futures)
        snapshot = normalize_quote_payload(quote_payload, symbol)
        history = normalize_chart_payload(chart_payload, strict=strict_shape)
    except FetchError as err:
        logger.error("Quote fetch for %s failed (%s): %s", symbol, err.kind, err)
        raise

    logger.info("Fetched %s: %d history points", snapshot.symbol, len(history))
    return StockQuote(snapshot=snapshot, history=history)
