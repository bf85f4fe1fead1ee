"""Logging for ``splitwise_csv``.

The reader modules log through child loggers of ``"splitwise_csv"`` obtained
from :func:`get_logger`; they never add handlers. Until the CLI calls
:func:`configure_logging`, the package logger only carries a ``NullHandler``,
so importing the package as a library stays silent. The level comes from the
``SPLITWISE_CSV_LOG_LEVEL`` environment variable unless the caller passes one.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "splitwise_csv"
_LEVEL_ENV_VAR = "SPLITWISE_CSV_LOG_LEVEL"
_DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        return logging.INFO
    env_val = os.getenv(_LEVEL_ENV_VAR)
    if env_val:
        return _parse_level(env_val)
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Send package log records to ``stream``; later calls are no-ops.

    ``level`` accepts an ``int``, a level name or a numeric string and falls
    back to ``SPLITWISE_CSV_LOG_LEVEL``, then ``INFO``. ``fmt`` overrides the
    default ``"%(asctime)s %(name)s %(levelname)s %(message)s"`` layout.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for null_handler in [h for h in logger.handlers if isinstance(h, logging.NullHandler)]:
        logger.removeHandler(null_handler)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or _DEFAULT_FORMAT))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)``, silencing the package until configured."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
