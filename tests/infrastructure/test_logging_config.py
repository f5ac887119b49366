"""Tests for the CLI logging setup."""

import logging

import pytest

from ims.infrastructure.logging_config import configure_logging, reset_logging


@pytest.fixture
def ims_logger():
    logger = logging.getLogger("ims")
    before = list(logger.handlers)
    yield logger, before
    reset_logging()


class TestConfigureLogging:

    def test_repeated_configuration_installs_one_handler(self, ims_logger):
        logger, before = ims_logger

        configure_logging()
        configure_logging(verbose=True)

        added = [h for h in logger.handlers if h not in before]
        assert len(added) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_reset_removes_only_the_cli_handler(self, ims_logger):
        logger, before = ims_logger
        other = logging.NullHandler()
        logger.addHandler(other)
        try:
            configure_logging()
            reset_logging()

            assert [h for h in logger.handlers if h not in before] == [other]
            assert logger.level == logging.NOTSET
            assert logger.propagate is True
        finally:
            logger.removeHandler(other)
