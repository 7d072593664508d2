"""Passenger commands for the RideShare CLI."""

import click
from tabulate import tabulate

from rideshare.services.trip_dispatcher import InvalidIdentifierError
from rideshare.cli_module.utils import get_dispatcher, trip_row, format_cost, TRIP_HEADERS


@click.group(name="passenger")
def passenger_group():
    """Passenger lookup commands."""
    pass


@passenger_group.command(name="list")
@click.pass_context
def list_passengers(ctx):
    """List every passenger."""
    dispatcher = get_dispatcher(ctx)
    if dispatcher is None:
        return

    table_data = [
        [p.id, p.name, p.phone_number, len(p.trips), format_cost(p.net_expenditures())]
        for p in dispatcher.passengers
    ]
    click.echo(tabulate(
        table_data,
        headers=["ID", "Name", "Phone", "Trips", "Spent"],
        tablefmt="grid"
    ))


@passenger_group.command(name="show")
@click.argument("passenger_id", type=int)
@click.pass_context
def show_passenger(ctx, passenger_id):
    """Show a passenger and their trip history."""
    dispatcher = get_dispatcher(ctx)
    if dispatcher is None:
        return

    try:
        passenger = dispatcher.find_passenger(passenger_id)
    except InvalidIdentifierError as e:
        click.echo(f"Error: {str(e)}", err=True)
        return

    click.echo(f"Passenger {passenger.id}: {passenger.name}")
    click.echo(f"Phone: {passenger.phone_number}")
    click.echo(f"Total spent: {format_cost(passenger.net_expenditures())}")
    click.echo(f"Time in trips: {passenger.total_time_spent() / 60:.0f} minutes")

    if not passenger.trips:
        click.echo("\nNo trips yet.")
        return

    click.echo("")
    click.echo(tabulate([trip_row(t) for t in passenger.trips], headers=TRIP_HEADERS, tablefmt="grid"))
