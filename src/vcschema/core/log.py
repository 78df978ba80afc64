#!/usr/bin/env python3
"""
Logging setup for vcschema.

Library modules only create loggers via `logging.getLogger(__name__)`; the CLI
calls `configure_logging()` once with the level from the merged config.
"""
from __future__ import annotations

import logging
from typing import Union

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_level(level: Union[str, int, None]) -> int:
    """
    Map a config/env level value to a `logging` level number.
    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    name = str(level or "INFO").strip().upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Union[str, int, None] = "INFO") -> logging.Logger:
    """Attach a stderr handler to the package logger and set its level."""
    logger = logging.getLogger("vcschema")
    logger.setLevel(resolve_level(level))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
