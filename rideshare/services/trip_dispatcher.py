"""Trip dispatcher: entity store, linking, lookup and driver matching."""

import logging
import threading
from datetime import datetime
from typing import Callable, Dict, List, Optional

from rideshare import config
from rideshare.models.csv_record import RecordLoadError
from rideshare.models.driver import Driver, DriverStatus
from rideshare.models.passenger import Passenger
from rideshare.models.trip import Trip
from rideshare.services.driver_selection import select_driver
from rideshare.services.record_loader import RecordSet, load_records

logger = logging.getLogger(__name__)


class TripDispatcherError(Exception):
    """Custom exception for trip dispatcher errors."""
    pass


class InvalidIdentifierError(TripDispatcherError, ValueError):
    """Raised when an identifier does not match any stored entity."""

    def __init__(self, entity_kind: str, identifier):
        self.entity_kind = entity_kind
        self.identifier = identifier
        super().__init__(f"No {entity_kind} with ID {identifier!r}")


class MalformedReferenceError(TripDispatcherError):
    """Raised at load time when a trip references a missing passenger or driver."""

    def __init__(self, trip_id: int, entity_kind: str, identifier):
        self.trip_id = trip_id
        self.entity_kind = entity_kind
        self.identifier = identifier
        super().__init__(f"Trip {trip_id} references unknown {entity_kind} {identifier!r}")


class NoDriversAvailableError(TripDispatcherError):
    """Raised when a trip is requested while every driver is busy."""
    pass


def _index_by_id(entities: List, entity_kind: str) -> Dict[int, object]:
    index = {}
    for entity in entities:
        if entity.id in index:
            raise RecordLoadError(f"Duplicate {entity_kind} ID {entity.id}")
        index[entity.id] = entity
    return index


def _lookup(index: Dict[int, object], entity_kind: str, identifier):
    # bool is an int subclass but never a valid identifier
    if isinstance(identifier, bool) or not isinstance(identifier, int):
        raise InvalidIdentifierError(entity_kind, identifier)
    entity = index.get(identifier)
    if entity is None:
        raise InvalidIdentifierError(entity_kind, identifier)
    return entity


class TripDispatcher:
    """
    Owns the passenger, driver and trip collections and matches passengers
    with drivers.

    The dispatcher is built once from the raw tables; afterwards only
    request_trip and complete_trip change its state.
    """

    def __init__(self, directory: Optional[str] = None, records: Optional[RecordSet] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        """
        Load and link the ride-share data.

        Args:
            directory: Folder holding the CSV tables (defaults to the configured data directory)
            records: Already-read rows; skips the file loader when given
            clock: Source of the current time for new trips

        Raises:
            RecordLoadError: If a table is missing or a row is malformed
            MalformedReferenceError: If a trip points at an unknown passenger or driver
        """
        if records is None:
            records = load_records(directory or config.get_data_directory())

        self._clock = clock or datetime.now
        self._lock = threading.Lock()

        self.passengers: List[Passenger] = [Passenger.from_record(row) for row in records.passengers]
        self.drivers: List[Driver] = [Driver.from_record(row) for row in records.drivers]
        self.trips: List[Trip] = [Trip.from_record(row) for row in records.trips]

        self._passengers_by_id = _index_by_id(self.passengers, "passenger")
        self._drivers_by_id = _index_by_id(self.drivers, "driver")
        self._trips_by_id = _index_by_id(self.trips, "trip")

        self._link_trips()
        self._reconcile_driver_status()

        logger.info(f"Loaded {len(self.passengers)} passengers, {len(self.drivers)} drivers "
                    f"and {len(self.trips)} trips")

    def _link_trips(self) -> None:
        """Resolve each trip's passenger and driver and record it in both histories."""
        for trip in self.trips:
            try:
                passenger = self.find_passenger(trip.passenger_id)
                driver = self.find_driver(trip.driver_id)
            except InvalidIdentifierError as e:
                raise MalformedReferenceError(trip.id, e.entity_kind, e.identifier) from e

            trip.passenger = passenger
            trip.driver = driver
            passenger.add_trip(trip)
            driver.add_trip(trip)

    def _reconcile_driver_status(self) -> None:
        """Mark drivers with an ongoing loaded trip as unavailable."""
        for driver in self.drivers:
            ongoing = [trip for trip in driver.trips if trip.is_ongoing]
            if len(ongoing) > 1:
                raise RecordLoadError(
                    f"Driver {driver.id} has {len(ongoing)} ongoing trips; at most one is allowed")
            if ongoing and driver.is_available:
                logger.warning(f"Driver {driver.id} is listed AVAILABLE but drives ongoing "
                               f"trip {ongoing[0].id}; marking UNAVAILABLE")
                driver.update_availability(DriverStatus.UNAVAILABLE)

    def find_passenger(self, passenger_id: int) -> Passenger:
        """
        Get a passenger by ID.

        Raises:
            InvalidIdentifierError: If no passenger has this ID
        """
        return _lookup(self._passengers_by_id, "passenger", passenger_id)

    def find_driver(self, driver_id: int) -> Driver:
        """
        Get a driver by ID.

        Raises:
            InvalidIdentifierError: If no driver has this ID
        """
        return _lookup(self._drivers_by_id, "driver", driver_id)

    def find_trip(self, trip_id: int) -> Trip:
        """Get a trip by ID, raising InvalidIdentifierError if unknown."""
        return _lookup(self._trips_by_id, "trip", trip_id)

    def _next_trip_id(self) -> int:
        return max(self._trips_by_id, default=0) + 1

    def request_trip(self, passenger_id: int) -> Trip:
        """
        Start a new trip for a passenger with the best available driver.

        Drivers who have never driven are preferred; otherwise the driver
        whose last trip ended earliest is chosen.

        Args:
            passenger_id: ID of the requesting passenger

        Returns:
            Trip: The new, ongoing trip

        Raises:
            InvalidIdentifierError: If the passenger does not exist
            NoDriversAvailableError: If every driver is unavailable
        """
        with self._lock:
            passenger = self.find_passenger(passenger_id)

            driver = select_driver(self.drivers)
            if driver is None:
                raise NoDriversAvailableError(
                    f"No drivers available for passenger {passenger_id}")

            trip = Trip(
                id=self._next_trip_id(),
                passenger_id=passenger.id,
                driver_id=driver.id,
                start_time=self._clock(),
                passenger=passenger,
                driver=driver,
            )

            passenger.add_trip(trip)
            driver.add_trip(trip)
            driver.update_availability(DriverStatus.UNAVAILABLE)
            self.trips.append(trip)
            self._trips_by_id[trip.id] = trip

        logger.info(f"Trip {trip.id}: passenger {passenger.id} assigned to driver {driver.id}")
        return trip

    def complete_trip(self, trip_id: int, cost: float, rating: int,
                      end_time: Optional[datetime] = None) -> Trip:
        """
        Finish an ongoing trip and free its driver.

        Args:
            trip_id: ID of the ongoing trip
            cost: Final cost of the trip
            rating: Passenger's rating (1-5)
            end_time: When the trip ended (defaults to now)

        Returns:
            Trip: The completed trip

        Raises:
            InvalidIdentifierError: If the trip does not exist
            TripDispatcherError: If the trip is already completed
            MalformedRecordError: If cost, rating or end time are invalid
        """
        with self._lock:
            trip = self.find_trip(trip_id)
            if not trip.is_ongoing:
                raise TripDispatcherError(f"Trip {trip_id} is already completed")

            trip.complete(end_time or self._clock(), cost, rating)
            trip.driver.update_availability(DriverStatus.AVAILABLE)

        logger.info(f"Trip {trip.id} completed; driver {trip.driver.id} is available")
        return trip
