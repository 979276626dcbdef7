"""Custom exceptions."""

from __future__ import annotations

from typing import Literal

FetchErrorKind = Literal["transport", "empty-result", "shape-mismatch", "cancelled"]

USER_MESSAGE = "Failed to fetch data"


class DataRetrievalError(Exception):
    """Raised when a provider fails to return usable data."""


class FetchError(DataRetrievalError):
    """A single failed fetch attempt against an upstream API.

    ``kind`` is kept for diagnostics only; every kind surfaces to the user as
    the same ``user_message``.
    """

    user_message = USER_MESSAGE

    def __init__(self, kind: FetchErrorKind, detail: str = "", source: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        self.source = source
        message = f"{kind}: {detail}" if detail else kind
        if source:
            message = f"[{source}] {message}"
        super().__init__(message)
