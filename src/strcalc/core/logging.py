"""Stdlib logging bootstrap."""

from __future__ import annotations

import logging

LOGGER_NAME = "strcalc"
_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stream handler to the package logger at ``level``.

    Safe to call repeatedly; the handler is installed only once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if not any(getattr(h, "_strcalc", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._strcalc = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
