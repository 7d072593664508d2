"""Tests for the Driver entity."""

import pytest
from datetime import datetime

from rideshare.models.driver import Driver, DriverStatus
from rideshare.models.trip import Trip
from rideshare.models.csv_record import MalformedRecordError


def _trip(trip_id, end, rating=4):
    return Trip(id=trip_id, passenger_id=1, driver_id=2, start_time=datetime(2018, 1, 1),
                end_time=end, cost=None if end is None else 10.0,
                rating=None if end is None else rating)


class TestDriver:
    """Test class for the Driver entity."""

    @pytest.mark.parametrize("status,expected", [
        ("AVAILABLE", DriverStatus.AVAILABLE),
        ("UNAVAILABLE", DriverStatus.UNAVAILABLE),
        ("available", DriverStatus.AVAILABLE),
    ])
    def test_from_record_parses_status(self, status, expected):
        """Test that the textual status is parsed case-insensitively."""
        driver = Driver.from_record({"id": "2", "name": "Emory Rosenbaum", "status": status})

        assert driver.id == 2
        assert driver.status == expected
        assert driver.trips == []

    def test_unknown_status_is_rejected(self):
        """Test that an unknown status raises MalformedRecordError."""
        with pytest.raises(MalformedRecordError):
            Driver.from_record({"id": "2", "name": "Emory Rosenbaum", "status": "ON_BREAK"})

    def test_last_trip_end_is_latest_completed_end(self):
        """Test that last_trip_end is the latest end time, not the last row."""
        driver = Driver(id=2, name="Emory Rosenbaum")
        driver.add_trip(_trip(1, datetime(2018, 8, 12)))
        driver.add_trip(_trip(2, datetime(2018, 6, 11)))

        assert driver.last_trip_end == datetime(2018, 8, 12)

    def test_last_trip_end_without_trips(self):
        """Test that a driver who never drove has no last trip end."""
        assert Driver(id=2, name="Emory Rosenbaum").last_trip_end is None

    def test_last_trip_end_with_mixed_offsets(self):
        """Test that trips loaded with and without offsets can be compared."""
        driver = Driver(id=2, name="Emory Rosenbaum")
        driver.add_trip(_trip(1, datetime(2018, 8, 12)))
        driver.add_trip(Trip(id=2, passenger_id=1, driver_id=2, start_time="2018-01-01T00:00:00+00:00",
                             end_time="2018-06-11T00:00:00+00:00", cost=10.0, rating=4))

        assert driver.last_trip_end == datetime(2018, 8, 12)

    def test_ongoing_trip(self):
        """Test that ongoing_trip finds the trip still in progress."""
        driver = Driver(id=2, name="Emory Rosenbaum")
        finished = _trip(1, datetime(2018, 8, 12))
        current = _trip(2, None)
        driver.add_trip(finished)
        driver.add_trip(current)

        assert driver.ongoing_trip is current

    def test_average_rating(self):
        """Test that the average covers completed trips only."""
        driver = Driver(id=2, name="Emory Rosenbaum")
        driver.add_trip(_trip(1, datetime(2018, 8, 12), rating=5))
        driver.add_trip(_trip(2, datetime(2018, 8, 13), rating=2))
        driver.add_trip(_trip(3, None))

        assert driver.average_rating() == 3.5

    def test_average_rating_without_trips(self):
        """Test that a driver with no trips has an average rating of 0."""
        assert Driver(id=2, name="Emory Rosenbaum").average_rating() == 0

    def test_update_availability(self):
        """Test that update_availability changes the status."""
        driver = Driver(id=2, name="Emory Rosenbaum")

        driver.update_availability(DriverStatus.UNAVAILABLE)

        assert driver.is_available is False
