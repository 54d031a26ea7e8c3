"""
Shared fixtures for the lsgrid tests.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_lsgrid_logger():
    """Undo handlers installed by setup_logging so each test starts clean."""
    yield
    logger = logging.getLogger("lsgrid")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
