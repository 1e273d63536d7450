"""
monkey-lex - Monkey Tokenizer and REPL
======================================

Command-line front end for the Monkey lexer. With a file argument it
prints every token in the file; without one it starts an interactive
read-tokenize-print loop.

Usage Examples
--------------
Tokenize a file:
    $ monkey-lex program.mk

Tokenize a single expression:
    $ monkey-lex -e "let five = 5;"

Interactive session:
    $ monkey-lex
    Hello! This is the Monkey programming language!
    Feel free to type in commands
    >> let add = fn(x, y) { x + y; };
    Token(LET)
    Token(IDENT, 'add')
    ...
"""

import logging
from pathlib import Path
from typing import BinaryIO, Optional

import click

from monkey_lang import __version__
from monkey_lang.cli.errors import handle_cli_exception
from monkey_lang.lexer import Lexer, LexerError, LexerOptions, Token, TokenType

logger = logging.getLogger(__name__)

GREETING = "Hello! This is the Monkey programming language!"
INSTRUCTION = "Feel free to type in commands"
PROMPT = ">> "


# =============================================================================
# Helpers
# =============================================================================

def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def format_token(token: Token, show_location: bool = False) -> str:
    """Render a token for display, optionally prefixed with line:column."""
    if show_location and token.location is not None:
        return f"{token.location.line}:{token.location.column}\t{token!r}"
    return repr(token)


def print_tokens(
    source: str | bytes,
    filename: str,
    options: LexerOptions,
    show_location: bool = False,
) -> int:
    """
    Tokenize source and echo every token before EOF.

    Returns:
        The number of tokens printed
    """
    lexer = Lexer(source, filename, options)
    count = 0
    token = lexer.next_token()
    while token.type is not TokenType.EOF:
        click.echo(format_token(token, show_location))
        count += 1
        token = lexer.next_token()
    return count


def run_repl(stream: BinaryIO, options: LexerOptions, show_location: bool) -> None:
    """
    Read raw byte lines from stream until end of input, printing the tokens
    of each. Lines are never decoded, so any byte reaches the lexer.

    A lexer error is reported and the loop carries on with the next line.
    """
    click.echo(GREETING)
    click.echo(INSTRUCTION)

    while True:
        click.echo(PROMPT, nl=False)
        line = stream.readline()
        if not line:
            click.echo()
            return

        try:
            print_tokens(line, "<stdin>", options, show_location)
        except LexerError as e:
            click.echo(str(e), err=True)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-e", "--expr",
    type=str,
    default=None,
    help="Tokenize TEXT instead of reading a file",
)
@click.option(
    "--digits-in-identifiers",
    is_flag=True,
    help="Allow digits after the first letter of an identifier",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on unrecognized characters instead of emitting ILLEGAL tokens",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging and token locations)",
)
@click.version_option(version=__version__, prog_name="monkey-lex")
def main(
    input_file: Optional[Path],
    expr: Optional[str],
    digits_in_identifiers: bool,
    strict: bool,
    verbose: bool,
) -> None:
    """
    Tokenize Monkey source code.

    INPUT_FILE is the Monkey source file to tokenize. Without it (and
    without --expr) an interactive REPL is started.

    \b
    Examples:
        monkey-lex program.mk          # Print the tokens of a file
        monkey-lex -e "5 < 10 > 5"     # Print the tokens of an expression
        monkey-lex                     # Start the REPL
    """
    setup_logging(verbose)

    if input_file is not None and expr is not None:
        raise click.BadParameter(
            "cannot be combined with INPUT_FILE",
            param_hint="'-e' / '--expr'",
        )

    options = LexerOptions(
        allow_digits_in_identifiers=digits_in_identifiers,
        strict=strict,
    )

    try:
        if expr is not None:
            print_tokens(expr, "<expr>", options, verbose)
            return

        if input_file is not None:
            logger.debug(f"Tokenizing {input_file}")
            count = print_tokens(
                input_file.read_bytes(), str(input_file), options, verbose
            )
            logger.debug(f"Tokenized: {count} tokens")
            return

        run_repl(click.get_binary_stream("stdin"), options, verbose)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
