from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_ecotrip_logger():
    yield
    logger = logging.getLogger("ecotrip")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
