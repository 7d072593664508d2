"""Main CLI entry point for the RideShare dispatcher."""

import click

from rideshare import config

# Set context settings to properly display help for all commands
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
    "show_default": True
}

from rideshare.cli_module.commands.passenger_commands import passenger_group
from rideshare.cli_module.commands.driver_commands import driver_group
from rideshare.cli_module.commands.trip_commands import trip_group


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--data-dir", envvar=config.DATA_DIR_ENV, type=click.Path(file_okay=False),
              help="Directory holding passengers.csv, drivers.csv and trips.csv")
@click.pass_context
def cli(ctx, data_dir):
    """RideShare CLI for browsing riders, drivers and dispatching trips."""
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


# Register all command groups
cli.add_command(passenger_group)
cli.add_command(driver_group)
cli.add_command(trip_group)


def main():
    """Entry point for the application."""
    config.configure_logging()
    cli()


if __name__ == '__main__':
    main()
