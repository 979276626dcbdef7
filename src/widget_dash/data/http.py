"""Shared JSON-over-HTTP helper for the upstream adapters."""

from __future__ import annotations

import logging
from typing import Any

import requests

from ..utils import FetchError

logger = logging.getLogger(__name__)


def build_session(headers: dict[str, str] | None = None) -> requests.Session:
    session = requests.Session()
    if headers:
        session.headers.update(headers)
    return session


def get_json(
    session: requests.Session,
    url: str,
    *,
    params: dict[str, Any] | None = None,
    timeout: float,
    source: str,
) -> Any:
    """GET ``url`` once and decode its JSON body.

    Any non-2xx status, connection problem, timeout or undecodable body is
    reported as a ``transport`` failure. There is no retry.
    """
    try:
        response = session.get(url, params=params, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.HTTPError as err:
        status = err.response.status_code if err.response is not None else "?"
        logger.error("%s request failed with HTTP %s", source, status)
        raise FetchError("transport", f"HTTP {status}", source=source) from err
    except requests.exceptions.RequestException as err:
        logger.error("%s request failed: %s", source, err)
        raise FetchError("transport", str(err), source=source) from err
    except ValueError as err:
        logger.error("%s returned a body that is not JSON", source)
        raise FetchError("transport", "invalid JSON body", source=source) from err
