"""Trip entity for the RideShare dispatcher."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from rideshare.models.csv_record import (
    CsvRecord,
    MalformedRecordError,
    optional_field,
    parse_cost,
    parse_identifier,
    parse_rating,
    parse_timestamp,
    require_field,
)


@dataclass(eq=False)
class Trip(CsvRecord):
    """
    Represents one passenger-driver engagement, ongoing or completed.

    An ongoing trip has end_time, cost and rating all unset; a completed
    trip has all three set.

    Attributes:
        id: Unique identifier for the trip
        passenger_id: ID of the passenger who requested the trip
        driver_id: ID of the assigned driver
        start_time: When the trip started
        end_time: When the trip ended
        cost: What the trip cost the passenger
        rating: Rating given by the passenger (1-5)
        passenger: The linked passenger, set by the dispatcher
        driver: The linked driver, set by the dispatcher
    """
    passenger_id: int = None
    driver_id: int = None
    start_time: datetime = None
    end_time: Optional[datetime] = None
    cost: Optional[float] = None
    rating: Optional[int] = None
    passenger: Optional["Passenger"] = field(default=None, repr=False)
    driver: Optional["Driver"] = field(default=None, repr=False)

    def __post_init__(self):
        """Validate identifiers and the ongoing/completed invariant."""
        super().__post_init__()
        self.passenger_id = parse_identifier(self.passenger_id, "passenger_id")
        self.driver_id = parse_identifier(self.driver_id, "driver_id")
        if self.start_time is None:
            raise MalformedRecordError(f"Trip {self.id} has no start_time")
        self.start_time = parse_timestamp(self.start_time, "start_time")
        self.end_time = parse_timestamp(self.end_time, "end_time")

        completion = (self.end_time, self.cost, self.rating)
        if any(value is None for value in completion) and any(value is not None for value in completion):
            raise MalformedRecordError(
                f"Trip {self.id} is partially completed: end_time, cost and rating "
                "must be all set or all empty")
        if self.end_time is not None:
            _check_completion(self.id, self.start_time, self.end_time)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Trip":
        """Build an unlinked trip from a raw row."""
        return cls(
            id=require_field(record, "id"),
            passenger_id=require_field(record, "passenger_id"),
            driver_id=require_field(record, "driver_id"),
            start_time=parse_timestamp(require_field(record, "start_time"), "start_time"),
            end_time=parse_timestamp(optional_field(record, "end_time"), "end_time"),
            cost=parse_cost(optional_field(record, "cost")),
            rating=parse_rating(optional_field(record, "rating")),
        )

    @property
    def is_ongoing(self) -> bool:
        return self.end_time is None

    def duration(self) -> float:
        """Length of a completed trip in seconds."""
        if self.is_ongoing:
            raise ValueError(f"Trip {self.id} is still in progress")
        return (self.end_time - self.start_time).total_seconds()

    def complete(self, end_time: datetime, cost: float, rating: int) -> None:
        """Finish an ongoing trip, setting end time, cost and rating together."""
        if not self.is_ongoing:
            raise ValueError(f"Trip {self.id} is already completed")

        end_time = parse_timestamp(end_time, "end_time")
        cost = parse_cost(cost)
        rating = parse_rating(rating)
        if end_time is None or cost is None or rating is None:
            raise MalformedRecordError(f"Trip {self.id} needs end_time, cost and rating to complete")
        _check_completion(self.id, self.start_time, end_time)

        self.end_time = end_time
        self.cost = cost
        self.rating = rating


def _check_completion(trip_id: int, start_time: datetime, end_time: datetime) -> None:
    if end_time < start_time:
        raise MalformedRecordError(f"Trip {trip_id} ends before it starts")
