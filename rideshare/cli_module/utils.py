"""Utility functions for the CLI interface."""

from typing import Optional

import click

from rideshare.models.csv_record import RecordLoadError
from rideshare.services.trip_dispatcher import TripDispatcher, TripDispatcherError


def get_dispatcher(ctx: click.Context) -> Optional[TripDispatcher]:
    """
    Get the dispatcher for this invocation, loading the data on first use.

    Prints the load error and returns None if the data cannot be loaded.
    """
    obj = ctx.ensure_object(dict)
    if "dispatcher" not in obj:
        try:
            obj["dispatcher"] = TripDispatcher(directory=obj.get("data_dir"))
        except (RecordLoadError, TripDispatcherError) as e:
            click.echo(f"Error loading data: {str(e)}", err=True)
            return None
    return obj["dispatcher"]


def format_time(value) -> str:
    """Format a timestamp for display, or a dash when unset."""
    if value is None:
        return "-"
    return value.strftime("%Y-%m-%d %H:%M")


def format_cost(value) -> str:
    if value is None:
        return "-"
    return f"${value:.2f}"


def trip_row(trip) -> list:
    """Table row for a trip."""
    return [
        trip.id,
        trip.passenger.name,
        trip.driver.name,
        format_time(trip.start_time),
        format_time(trip.end_time),
        format_cost(trip.cost),
        trip.rating if trip.rating is not None else "-",
    ]


TRIP_HEADERS = ["Trip ID", "Passenger", "Driver", "Start", "End", "Cost", "Rating"]
