"""Utility helpers."""

from .cancellation import CancelToken
from .errors import USER_MESSAGE, DataRetrievalError, FetchError
from .logging import get_logger

__all__ = ["USER_MESSAGE", "CancelToken", "DataRetrievalError", "FetchError", "get_logger"]
