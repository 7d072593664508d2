"""Runtime configuration for the RideShare dispatcher."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

# Development data shipped inside the package
DEFAULT_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")

DATA_DIR_ENV = "RIDESHARE_DATA_DIR"
LOG_LEVEL_ENV = "RIDESHARE_LOG_LEVEL"


def get_data_directory() -> str:
    """Directory holding passengers.csv, drivers.csv and trips.csv."""
    return os.getenv(DATA_DIR_ENV, DEFAULT_DATA_DIR)


def configure_logging() -> None:
    """Set up root logging at the configured level."""
    level = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO))
