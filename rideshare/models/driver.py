"""Driver entity for the RideShare dispatcher."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Dict, List, Optional

from rideshare.models.csv_record import CsvRecord, MalformedRecordError, require_field


class DriverStatus(Enum):
    """Possible availability statuses for a driver."""
    AVAILABLE = auto()
    UNAVAILABLE = auto()

    @classmethod
    def parse(cls, value: str) -> "DriverStatus":
        """Parse a textual status such as 'AVAILABLE'."""
        try:
            return cls[value.strip().upper()]
        except (AttributeError, KeyError):
            raise MalformedRecordError(f"Unknown driver status: {value!r}")


@dataclass(eq=False)
class Driver(CsvRecord):
    """
    Represents a driver in the ride-share system.

    Attributes:
        id: Unique identifier for the driver
        name: Driver's name
        status: Whether the driver can take a new trip
        trips: Trips driven or in progress, in assignment order
    """
    name: str = ""
    status: DriverStatus = DriverStatus.AVAILABLE
    trips: List["Trip"] = field(default_factory=list, repr=False)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Driver":
        """Build a driver with an empty trip history from a raw row."""
        return cls(
            id=require_field(record, "id"),
            name=require_field(record, "name"),
            status=DriverStatus.parse(require_field(record, "status")),
        )

    @property
    def is_available(self) -> bool:
        return self.status == DriverStatus.AVAILABLE

    @property
    def ongoing_trip(self) -> Optional["Trip"]:
        """The trip the driver is currently driving, if any."""
        return next((trip for trip in self.trips if trip.is_ongoing), None)

    @property
    def last_trip_end(self) -> Optional[datetime]:
        """When the driver's most recent completed trip ended."""
        end_times = [trip.end_time for trip in self.trips if not trip.is_ongoing]
        return max(end_times) if end_times else None

    def add_trip(self, trip: "Trip") -> None:
        """Append a trip to the driver's history."""
        self.trips.append(trip)

    def update_availability(self, status: DriverStatus) -> None:
        """Update the driver's availability status."""
        self.status = status

    def average_rating(self) -> float:
        """Mean rating over completed trips, 0 when there are none."""
        ratings = [trip.rating for trip in self.trips if not trip.is_ongoing]
        if not ratings:
            return 0
        return sum(ratings) / len(ratings)
