"""Shared pytest fixtures."""

import logging

import pytest

from utils.constants import APP_LOGGER_NAME


@pytest.fixture
def app_caplog(caplog, monkeypatch):
    """caplog that also sees records of the application logger.

    setup_logging() turns propagation off, so re-enable it for the test.
    """
    monkeypatch.setattr(logging.getLogger(APP_LOGGER_NAME), "propagate", True)
    with caplog.at_level(logging.DEBUG, logger=APP_LOGGER_NAME):
        yield caplog
