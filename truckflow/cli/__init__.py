"""TruckFlow CLI.

This module provides a command-line interface for converting exported load
files and summarizing backup files.
"""

import click

from truckflow.cli.commands.convert import convert_loads
from truckflow.cli.commands.summary import summary
from truckflow.config.logging_config import LoggingConfig, configure_logging

__version__ = "1.0.0"


@click.group(help="TruckFlow CLI - Convert load exports and summarize earnings")
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr")
def cli(verbose: bool):
    """TruckFlow CLI main entry point."""
    level = "INFO" if verbose else "WARNING"
    configure_logging(LoggingConfig.from_env(default_level=level))


# Register commands
cli.add_command(convert_loads)
cli.add_command(summary)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
