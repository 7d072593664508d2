"""Reads the passenger, driver and trip tables from a data directory."""

import csv
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List

from rideshare.models.csv_record import RecordLoadError

logger = logging.getLogger(__name__)

PASSENGERS_FILE = "passengers.csv"
DRIVERS_FILE = "drivers.csv"
TRIPS_FILE = "trips.csv"


@dataclass
class RecordSet:
    """
    Raw rows for each entity table.

    Attributes:
        passengers: Rows with id, name, phone_num
        drivers: Rows with id, name, status
        trips: Rows with id, passenger_id, driver_id, start_time, end_time, cost, rating
    """
    passengers: List[Dict[str, str]] = field(default_factory=list)
    drivers: List[Dict[str, str]] = field(default_factory=list)
    trips: List[Dict[str, str]] = field(default_factory=list)


def read_table(path: str) -> List[Dict[str, str]]:
    """
    Read one CSV table into a list of field maps.

    Raises:
        RecordLoadError: If the file is missing or unreadable
    """
    if not os.path.exists(path):
        raise RecordLoadError(f"Data file not found: {path}")

    try:
        with open(path, "r", newline="", encoding="utf-8") as f:
            return list(csv.DictReader(f))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise RecordLoadError(f"Failed to read {path}: {str(e)}")


def load_records(directory: str) -> RecordSet:
    """Read all three tables from a data directory."""
    logger.info(f"Loading ride-share data from {directory}")
    return RecordSet(
        passengers=read_table(os.path.join(directory, PASSENGERS_FILE)),
        drivers=read_table(os.path.join(directory, DRIVERS_FILE)),
        trips=read_table(os.path.join(directory, TRIPS_FILE)),
    )
