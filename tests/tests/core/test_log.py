#!/usr/bin/env python3
import logging

import pytest

from vcschema.core.log import configure_logging, resolve_level


@pytest.mark.parametrize("value,expected", [
    ("DEBUG", logging.DEBUG),
    (" warning ", logging.WARNING),
    ("error", logging.ERROR),
    (logging.CRITICAL, logging.CRITICAL),
    (None, logging.INFO),
    ("LOUD", logging.INFO),
])
def test_resolve_level(value, expected):
    assert resolve_level(value) == expected


def test_configure_logging_sets_level_and_adds_one_handler():
    logger = configure_logging("DEBUG")
    try:
        assert logger.name == "vcschema"
        assert logger.level == logging.DEBUG
        n = len(logger.handlers)
        configure_logging("WARNING")
        assert len(logger.handlers) == n
        assert logger.level == logging.WARNING
    finally:
        logger.setLevel(logging.NOTSET)
