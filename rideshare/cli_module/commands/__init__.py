"""Command modules for the RideShare CLI."""

from rideshare.cli_module.commands.passenger_commands import passenger_group
from rideshare.cli_module.commands.driver_commands import driver_group
from rideshare.cli_module.commands.trip_commands import trip_group

__all__ = [
    'passenger_group',
    'driver_group',
    'trip_group',
]
