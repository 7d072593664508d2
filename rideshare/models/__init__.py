"""Entity models for the RideShare dispatcher."""
from rideshare.models.csv_record import CsvRecord, MalformedRecordError
from rideshare.models.passenger import Passenger
from rideshare.models.driver import Driver, DriverStatus
from rideshare.models.trip import Trip


__all__ = [
    'CsvRecord',
    'MalformedRecordError',
    'Passenger',
    'Driver',
    'DriverStatus',
    'Trip',
]
