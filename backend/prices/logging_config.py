"""Console logging for the ``prices`` package.

Every module logs through ``logging.getLogger(__name__)``, so all records end
up under the ``prices`` logger configured here.
"""
from __future__ import annotations

import logging
import sys

from prices.settings import get_settings


_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None) -> logging.Logger:
    root_logger = logging.getLogger("prices")
    root_logger.setLevel(level or get_settings().log_level)

    # Prevent duplicate handlers on repeated calls (e.g. tests)
    if root_logger.handlers:
        return root_logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    root_logger.addHandler(handler)
    return root_logger
