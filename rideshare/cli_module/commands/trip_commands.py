"""Trip commands for the RideShare CLI."""

import click
from tabulate import tabulate

from rideshare.services.trip_dispatcher import InvalidIdentifierError, NoDriversAvailableError
from rideshare.cli_module.utils import get_dispatcher, trip_row, format_time, TRIP_HEADERS


@click.group(name="trip")
def trip_group():
    """Trip listing and dispatch commands."""
    pass


@trip_group.command(name="list")
@click.option("--ongoing", is_flag=True, help="Only show trips still in progress")
@click.pass_context
def list_trips(ctx, ongoing):
    """List trips."""
    dispatcher = get_dispatcher(ctx)
    if dispatcher is None:
        return

    trips = [t for t in dispatcher.trips if t.is_ongoing or not ongoing]
    if not trips:
        click.echo("No trips found.")
        return

    click.echo(tabulate([trip_row(t) for t in trips], headers=TRIP_HEADERS, tablefmt="grid"))


@trip_group.command(name="request")
@click.argument("passenger_id", type=int)
@click.pass_context
def request_trip(ctx, passenger_id):
    """Match a passenger with the best available driver.

    The new trip lives only for this invocation; it is not written back to the data files.
    """
    dispatcher = get_dispatcher(ctx)
    if dispatcher is None:
        return

    try:
        trip = dispatcher.request_trip(passenger_id)
    except (InvalidIdentifierError, NoDriversAvailableError) as e:
        click.echo(f"Error: {str(e)}", err=True)
        return

    click.echo("\nTrip requested successfully!\n")
    click.echo(f"Trip ID: {trip.id}")
    click.echo(f"Passenger: {trip.passenger.name}")
    click.echo(f"Driver: {trip.driver.name} (ID {trip.driver.id})")
    click.echo(f"Started: {format_time(trip.start_time)}")
