"""Tests for the driver-selection policy."""

from datetime import datetime, timedelta

from rideshare.models.driver import Driver, DriverStatus
from rideshare.models.trip import Trip
from rideshare.services.driver_selection import filter_available_drivers, select_driver


def _driver(driver_id, *end_times, status=DriverStatus.AVAILABLE):
    """Build a driver with one completed 30 minute trip per end time."""
    driver = Driver(id=driver_id, name=f"Driver {driver_id}", status=status)
    for index, end in enumerate(end_times, start=1):
        driver.add_trip(Trip(id=driver_id * 100 + index, passenger_id=1, driver_id=driver_id,
                             start_time=end - timedelta(minutes=30), end_time=end,
                             cost=10.0, rating=4))
    return driver


class TestDriverSelection:
    """Test class for choosing a driver for a new trip."""

    def test_no_candidates(self):
        """Test that nobody is selected when every driver is unavailable."""
        drivers = [_driver(1, status=DriverStatus.UNAVAILABLE)]

        assert filter_available_drivers(drivers) == []
        assert select_driver(drivers) is None

    def test_never_driven_beats_any_history(self):
        """Test that a new driver wins even with a higher ID than an idle veteran."""
        veteran = _driver(1, datetime(2010, 1, 1))
        newcomer = _driver(9)

        assert select_driver([veteran, newcomer]) is newcomer

    def test_lowest_id_among_never_driven(self):
        """Test that the lowest ID wins among drivers with no trips."""
        drivers = [_driver(7), _driver(3), _driver(5)]

        assert select_driver(drivers).id == 3

    def test_longest_idle_driver_wins(self):
        """Test that the driver whose last trip ended earliest is chosen."""
        recent = _driver(1, datetime(2018, 12, 1))
        idle = _driver(2, datetime(2018, 3, 1))

        assert select_driver([recent, idle]) is idle

    def test_most_recent_trip_decides(self):
        """Test that only each driver's latest trip end counts, not their earliest."""
        old_then_recent = _driver(1, datetime(2017, 1, 1), datetime(2018, 12, 1))
        steady = _driver(2, datetime(2018, 6, 1))

        assert select_driver([old_then_recent, steady]) is steady

    def test_equal_idle_time_goes_to_lowest_id(self):
        """Test that ties on idle time go to the lowest ID."""
        same_end = datetime(2018, 6, 1)

        assert select_driver([_driver(4, same_end), _driver(2, same_end)]).id == 2

    def test_unavailable_drivers_are_skipped(self):
        """Test that a busy new driver is passed over for an available veteran."""
        busy_newcomer = _driver(1, status=DriverStatus.UNAVAILABLE)
        veteran = _driver(2, datetime(2018, 6, 1))

        assert select_driver([busy_newcomer, veteran]) is veteran

    def test_histories_with_mixed_offsets_are_comparable(self):
        """Test that drivers loaded with and without UTC offsets can be ranked."""
        with_offset = Driver(id=1, name="Offset")
        with_offset.add_trip(Trip(id=1, passenger_id=1, driver_id=1,
                                  start_time="2018-03-01T08:00:00+00:00",
                                  end_time="2018-03-01T08:30:00+00:00", cost=10.0, rating=4))
        naive = _driver(2, datetime(2018, 12, 1))

        assert select_driver([naive, with_offset]) is with_offset
