"""Driver commands for the RideShare CLI."""

import click
from tabulate import tabulate

from rideshare.services.trip_dispatcher import InvalidIdentifierError
from rideshare.cli_module.utils import get_dispatcher, trip_row, format_time, TRIP_HEADERS


@click.group(name="driver")
def driver_group():
    """Driver lookup commands."""
    pass


@driver_group.command(name="list")
@click.option("--available", is_flag=True, help="Only show drivers who can take a trip")
@click.pass_context
def list_drivers(ctx, available):
    """List drivers and their availability."""
    dispatcher = get_dispatcher(ctx)
    if dispatcher is None:
        return

    drivers = [d for d in dispatcher.drivers if d.is_available or not available]
    if not drivers:
        click.echo("No drivers found.")
        return

    table_data = [
        [d.id, d.name, d.status.name, len(d.trips), format_time(d.last_trip_end)]
        for d in drivers
    ]
    click.echo(tabulate(
        table_data,
        headers=["ID", "Name", "Status", "Trips", "Last Trip Ended"],
        tablefmt="grid"
    ))


@driver_group.command(name="show")
@click.argument("driver_id", type=int)
@click.pass_context
def show_driver(ctx, driver_id):
    """Show a driver and the trips they have driven."""
    dispatcher = get_dispatcher(ctx)
    if dispatcher is None:
        return

    try:
        driver = dispatcher.find_driver(driver_id)
    except InvalidIdentifierError as e:
        click.echo(f"Error: {str(e)}", err=True)
        return

    click.echo(f"Driver {driver.id}: {driver.name}")
    click.echo(f"Status: {driver.status.name}")
    click.echo(f"Average rating: {driver.average_rating():.1f}")

    if driver.trips:
        click.echo("")
        click.echo(tabulate([trip_row(t) for t in driver.trips], headers=TRIP_HEADERS, tablefmt="grid"))
