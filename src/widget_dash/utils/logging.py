"""Logger helper shared by the entrypoint and scripts."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Return a named logger, configuring the root handler on first use.

    The level comes from ``level`` or ``WIDGET_DASH_LOG_LEVEL`` (default INFO).
    """
    resolved = (level or os.getenv("WIDGET_DASH_LOG_LEVEL", "INFO")).upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=getattr(logging, resolved, logging.INFO), format=LOG_FORMAT)
    return logging.getLogger(name)
