"""Cancellation token for abandoning stale fetches."""

from __future__ import annotations

import threading


class CancelToken:
    """Thread-safe flag a caller sets to abandon an in-flight fetch."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()
