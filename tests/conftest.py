import logging

import pytest

from backend.controller import DisplayController
from backend.logging_config import PACKAGES


@pytest.fixture
def controller():
    return DisplayController()


@pytest.fixture(autouse=True)
def reset_package_loggers():
    yield
    for name in PACKAGES:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
