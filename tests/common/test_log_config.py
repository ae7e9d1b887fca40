"""Tests for techcards/common/log_config.py"""

import logging
import sys

import pytest

from techcards.common.log_config import LOGGER_NAME, setup_logging


@pytest.fixture
def techcards_logger():
    logger = logging.getLogger(LOGGER_NAME)
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.WARNING)


class TestSetupLogging:
    @pytest.mark.parametrize("kwargs,level", [
        ({}, logging.INFO),
        ({"verbose": True}, logging.DEBUG),
        ({"quiet": True}, logging.WARNING),
        ({"verbose": True, "quiet": True}, logging.DEBUG),
    ])
    def test_levels(self, techcards_logger, kwargs, level):
        setup_logging(**kwargs)
        assert techcards_logger.level == level

    def test_writes_to_stderr(self, techcards_logger):
        setup_logging()
        [handler] = techcards_logger.handlers
        assert handler.stream is sys.stderr

    def test_repeated_setup_keeps_single_handler(self, techcards_logger):
        setup_logging()
        setup_logging(quiet=True)
        assert len(techcards_logger.handlers) == 1

    def test_module_loggers_propagate(self, techcards_logger):
        setup_logging(quiet=True)
        child = logging.getLogger("techcards.storage.sitemap_cache")
        assert child.getEffectiveLevel() == logging.WARNING

    def test_format_names_module(self, techcards_logger):
        setup_logging()
        record = logging.LogRecord(
            "techcards.discovery.product_locator", logging.WARNING, __file__, 1,
            "Reference %s not found", ("123456",), None,
        )
        line = techcards_logger.handlers[0].format(record)
        assert line == "WARNING  techcards.discovery.product_locator: Reference 123456 not found"
