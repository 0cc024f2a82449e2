"""Convert exported loads command."""

import json
import logging
from typing import Optional

import click
from pydantic import ValidationError

from truckflow.cli.error_handlers import (
    ConfigurationError,
    DataValidationError,
    InputFileError,
    ProcessingError,
    with_error_handling,
)
from truckflow.cli.utils.formatters import format_success, format_warning
from truckflow.config.logging_config import LoggingConfig, configure_logging
from truckflow.config.settings import get_config
from truckflow.converters import LoadConverter, read_json, write_document
from truckflow.validators import ValidationIssue

logger = logging.getLogger(__name__)


def describe_issue(issue: ValidationIssue) -> str:
    """Render an unresolved-state warning with the raw address text.

    Example:
        [3] pickup_state empty  (origin: Somewhereville)
    """
    context = issue.context or {}
    if issue.field == "pickup_state":
        return f"[{issue.index}] pickup_state empty  (origin: {context.get('origin')})"
    return (
        f"[{issue.index}] delivery_state empty "
        f"(destination: {context.get('destination')})"
    )


@click.command(name="convert-loads")
@click.argument("input_path", required=False, type=click.Path(dir_okay=False))
@click.argument("output_path", required=False, type=click.Path(dir_okay=False))
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def convert_loads(input_path: Optional[str], output_path: Optional[str], debug: bool):
    """Convert an exported loads file into a full-backup import file.

    INPUT_PATH defaults to the configured export file and OUTPUT_PATH to
    truckflow-import.json. Origins and destinations are split into city and
    state; every load is marked Delivered.

    Loads whose state could not be resolved are listed as warnings after the
    output has been written so they can be fixed by hand.

    Example:
        truckflow convert-loads loads.json truckflow-import.json
    """
    with with_error_handling(debug):
        if input_path is None or output_path is None:
            try:
                settings = get_config()
            except ValidationError as e:
                raise ConfigurationError(
                    str(e), recovery_hint="Check the values in your .env file"
                ) from e
            input_path = input_path or settings.default_input_file
            output_path = output_path or settings.default_output_file

        try:
            source = read_json(input_path)
        except FileNotFoundError as e:
            raise InputFileError(
                f"Input file not found: {input_path}",
                recovery_hint="Pass the export file path as the first argument",
            ) from e
        except json.JSONDecodeError as e:
            raise DataValidationError(f"Input file is not valid JSON: {e}") from e

        logger.debug(f"Read {input_path}, writing to {output_path}")
        converter = LoadConverter()
        result = converter.convert(source)

        try:
            write_document(result.document, output_path)
        except OSError as e:
            raise ProcessingError(f"Could not write {output_path}: {e}") from e

        message = f"Converted {result.load_count} loads → {output_path}"
        click.echo(format_success(message))

        for issue in result.report.get_warnings():
            click.echo(format_warning(describe_issue(issue)), err=True)


def main():
    """Entry point for the standalone truckflow-convert script."""
    configure_logging(LoggingConfig.from_env())
    convert_loads()
