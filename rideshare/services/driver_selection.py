"""
Driver-selection policy for new trip requests.

Drivers who have never driven come first. Among drivers who have, the one
whose latest trip ended earliest (idle the longest) wins. Remaining ties go
to the lowest identifier.
"""

from typing import Iterable, List, Optional, Tuple

from rideshare.models.driver import Driver


def filter_available_drivers(drivers: Iterable[Driver]) -> List[Driver]:
    """Return only drivers whose status is AVAILABLE, in store order."""
    return [driver for driver in drivers if driver.is_available]


def driver_priority(driver: Driver) -> Tuple[bool, float, int]:
    """Sort key for candidates: lower sorts first."""
    if not driver.trips:
        return (False, 0.0, driver.id)

    last_end = driver.last_trip_end
    # No completed trip yet means no idle time to rank by
    idle_since = last_end.timestamp() if last_end is not None else float("inf")
    return (True, idle_since, driver.id)


def select_driver(drivers: Iterable[Driver]) -> Optional[Driver]:
    """Pick the best available driver, or None when nobody is available."""
    candidates = filter_available_drivers(drivers)
    if not candidates:
        return None
    return min(candidates, key=driver_priority)
