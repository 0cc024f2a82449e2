"""CLI commands."""

from truckflow.cli.commands.convert import convert_loads
from truckflow.cli.commands.summary import summary

__all__ = ["convert_loads", "summary"]
