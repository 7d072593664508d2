"""Passenger entity for the RideShare dispatcher."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from rideshare.models.csv_record import CsvRecord, require_field


@dataclass(eq=False)
class Passenger(CsvRecord):
    """
    Represents a passenger in the ride-share system.

    Attributes:
        id: Unique identifier for the passenger
        name: Passenger's name
        phone_number: Passenger's phone number
        trips: Trips taken or in progress, in request order
    """
    name: str = ""
    phone_number: str = ""
    trips: List["Trip"] = field(default_factory=list, repr=False)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Passenger":
        """Build a passenger with an empty trip history from a raw row."""
        return cls(
            id=require_field(record, "id"),
            name=require_field(record, "name"),
            phone_number=require_field(record, "phone_num"),
        )

    def add_trip(self, trip: "Trip") -> None:
        """Append a trip to the passenger's history."""
        self.trips.append(trip)

    def net_expenditures(self) -> float:
        """Total cost of the passenger's completed trips."""
        return sum(trip.cost for trip in self.trips if not trip.is_ongoing)

    def total_time_spent(self) -> float:
        """Total seconds spent in completed trips."""
        return sum(trip.duration() for trip in self.trips if not trip.is_ongoing)
