"""
Pytest configuration and fixtures for chilean_run tests.
"""

import logging
from datetime import date

import pytest

from chilean_run.logging_config import LOGGER_NAME


class SequenceRandom:
    """Random source that replays a fixed sequence of integers."""

    def __init__(self, values):
        self._values = iter(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        value = next(self._values)
        assert a <= value <= b
        return value


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Detach handlers installed by CLI runs so they don't outlive capture."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def sequence_random():
    """Factory for replaying random sources."""
    return SequenceRandom


@pytest.fixture
def valid_runs():
    """Identifiers with correct check characters, in assorted formats."""
    return [
        "12.345.678-5",
        "12345678-5",
        "123456785",
        "11.111.111-1",
        "22222222-2",
        "7.412.903-K",
        "7412903k",
        "6-k",
        "28-0",
        "0-0",
    ]


@pytest.fixture
def reference_date():
    """A fixed 'today' for age estimation."""
    return date(2024, 1, 15)
