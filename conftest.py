import logging

import pytest

from scara_ik.logging import ROOT_LOGGER_NAME


@pytest.fixture
def clean_logger():
    """Run with no handlers on the package logger, restoring them afterwards."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
