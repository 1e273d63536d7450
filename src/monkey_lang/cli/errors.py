"""
CLI Error Reporting
===================

Maps exceptions raised while tokenizing to stderr messages and exit codes.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from monkey_lang.lexer.errors import LexerError


class ExitCode(IntEnum):
    """Exit codes of monkey-lex."""
    SUCCESS = 0
    LEX_ERROR = 1        # Source could not be tokenized
    INVALID_ARGS = 2     # Unreadable input file
    INTERNAL_ERROR = 3   # Anything else


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report error on stderr and exit.

    LexerError messages already carry location and an "error:" prefix,
    so they are printed as-is. A traceback is only shown for internal
    errors in verbose mode.
    """
    if isinstance(error, LexerError):
        click.echo(str(error), err=True)
        sys.exit(ExitCode.LEX_ERROR)

    if isinstance(error, OSError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    click.echo(f"Internal error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)
