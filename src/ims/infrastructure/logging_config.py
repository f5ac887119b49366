"""Logging setup for the command line.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers and levels are configured here, once per CLI invocation.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(verbose: bool = False) -> None:
    """Send ``ims`` logs to stderr: DEBUG when verbose, WARNING otherwise."""
    global _handler
    reset_logging()
    logger = logging.getLogger("ims")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.propagate = False


def reset_logging() -> None:
    """Drop the CLI handler again (the stream it wrote to may be gone)."""
    global _handler
    logger = logging.getLogger("ims")
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
