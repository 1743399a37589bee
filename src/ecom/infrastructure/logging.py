"""Logging setup for the command-line entry point.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed once, here.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stream handler to the ``ecom`` logger tree.

    Calling it again only adjusts the level.
    """
    logger = logging.getLogger("ecom")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
