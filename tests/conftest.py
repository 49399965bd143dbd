import logging

import pytest

from adjuster.constants import ENV_EXPLAIN, ENV_INT_BITS, ENV_LOG_FILE, ENV_LOG_LEVEL


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep ADJUSTER_* variables and log handlers from leaking between tests."""
    for key in (ENV_LOG_LEVEL, ENV_LOG_FILE, ENV_INT_BITS, ENV_EXPLAIN):
        monkeypatch.delenv(key, raising=False)
    yield
    logger = logging.getLogger("adjuster")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
