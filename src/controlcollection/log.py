# SPDX-FileCopyrightText: 2026 The controlcollection authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Package logger.

Importing the package never configures global logging: the ``controlcollection``
logger carries a NullHandler, and records only surface once the host
application configures logging or opts in with :func:`set_log_level`.
"""

from __future__ import annotations

import logging
import os

PACKAGE_LOGGER = "controlcollection"
LOG_LEVEL_ENV = "CONTROLCOLLECTION_LOG_LEVEL"

_package_logger = logging.getLogger(PACKAGE_LOGGER)
if not any(isinstance(handler, logging.NullHandler) for handler in _package_logger.handlers):
    _package_logger.addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a module logger beneath it."""
    if not name or name == PACKAGE_LOGGER:
        return _package_logger
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def set_log_level(level: str | int | None = None) -> logging.Logger:
    """
    Set the package logger level.

    ``level`` may be a level name or number; when omitted, the
    ``CONTROLCOLLECTION_LOG_LEVEL`` environment variable is read at call time.
    Unknown names fall back to WARNING.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        level = getattr(logging, level.strip().upper(), logging.WARNING)
        if not isinstance(level, int):
            level = logging.WARNING
    _package_logger.setLevel(level)
    return _package_logger


__all__ = ["PACKAGE_LOGGER", "get_logger", "set_log_level"]
