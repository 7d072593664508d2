"""Shared fixtures for the RideShare test suite."""

import os
from datetime import datetime

import pytest

from rideshare.services.trip_dispatcher import TripDispatcher

TEST_DATA_DIRECTORY = os.path.join(os.path.dirname(os.path.abspath(__file__)), "test_data")
FIXED_NOW = datetime(2019, 1, 1, 12, 0, 0)


@pytest.fixture
def test_data_directory():
    """Path to the small CSV fixture tables."""
    return TEST_DATA_DIRECTORY


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same moment."""
    return lambda: FIXED_NOW


@pytest.fixture
def dispatcher(fixed_clock):
    """Dispatcher loaded from the fixture tables with a fixed clock."""
    return TripDispatcher(directory=TEST_DATA_DIRECTORY, clock=fixed_clock)


@pytest.fixture
def fixed_now():
    """The moment returned by fixed_clock."""
    return FIXED_NOW
