"""Logging utilities for commentfold runs."""

from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "commentfold"
_FORMAT = "[commentfold] %(levelname)s %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the commentfold hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Send per-file diagnostics to stderr, at DEBUG when ``verbose`` is set."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    # stdout carries rewritten sources and diffs; keep diagnostics off it.
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
