"""Error handling for CLI commands.

Errors are reported on stderr with an optional recovery hint, and each error
type maps to its own exit code.
"""

import json
import sys
import traceback
from typing import Optional

import click

from truckflow.cli.utils.formatters import format_error, format_warning
from truckflow.converters import InputShapeError


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    exit_code = 1
    label = "Error"

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""

    exit_code = 1
    label = "Configuration Error"


class InputFileError(CLIError):
    """The input file is missing or unreadable."""

    exit_code = 2
    label = "Input File Error"


class DataValidationError(CLIError):
    """The input file does not have the expected shape."""

    exit_code = 3
    label = "Data Validation Error"


class ProcessingError(CLIError):
    """Error while converting data or writing output."""

    exit_code = 4
    label = "Processing Error"


def _echo_err(message: str) -> None:
    click.echo(message, err=True)


def handle_cli_error(error: BaseException, debug: bool = False) -> int:
    """
    Report an error on stderr and pick the exit code.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code
    """
    if isinstance(error, CLIError):
        _echo_err(format_error(f"{error.label}: {error.message}"))
        if error.recovery_hint:
            _echo_err(format_warning(f"Hint: {error.recovery_hint}"))
        return error.exit_code

    if isinstance(error, InputShapeError):
        _echo_err(format_error(f"ERROR: {error}"))
        return DataValidationError.exit_code

    if isinstance(error, json.JSONDecodeError):
        _echo_err(format_error(f"Invalid JSON: {error}"))
        return DataValidationError.exit_code

    if isinstance(error, click.Abort):
        _echo_err(format_warning("\nOperation cancelled by user"))
        return 130  # Standard exit code for SIGINT

    _echo_err(format_error(f"Unexpected Error: {type(error).__name__}"))
    _echo_err(str(error))

    if debug:
        _echo_err("\nFull stack trace:")
        _echo_err(
            "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
        )
    else:
        _echo_err(format_warning("\nRun with --debug flag for full stack trace"))

    return 255


def with_error_handling(debug: bool = False):
    """
    Context manager adding standardized error handling to CLI commands.

    Args:
        debug: Whether to show full stack traces

    Example:
        @click.command()
        @click.option('--debug', is_flag=True)
        def my_command(debug):
            with with_error_handling(debug):
                # Command implementation
                pass
    """

    class ErrorHandler:
        """Context manager for error handling."""

        def __init__(self, show_debug: bool):
            self.show_debug = show_debug

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            passthrough = (SystemExit, click.exceptions.Exit)
            if exc_val is None or isinstance(exc_val, passthrough):
                return False  # Don't suppress normal exits
            exit_code = handle_cli_error(exc_val, self.show_debug)
            sys.exit(exit_code)

    return ErrorHandler(debug)
