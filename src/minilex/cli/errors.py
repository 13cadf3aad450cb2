"""
CLI Error Handling
==================

Provides consistent error handling and exit codes for the command line.

Lexical errors are part of the token table and never change the exit
code; only failures that prevent the table from being produced do.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from minilex.errors import ConfigurationError, MinilexError, SourceIOError


class ExitCode(IntEnum):
    """Exit codes for the minilex command."""
    SUCCESS = 0
    CONFIG_ERROR = 1     # Invalid MINILEX_* setting
    IO_ERROR = 2         # Input could not be read or output written
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception on stderr and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, SourceIOError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.IO_ERROR)

    elif isinstance(error, ConfigurationError):
        click.echo(f"Configuration error: {error}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    elif isinstance(error, MinilexError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INTERNAL_ERROR)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
