"""
minilex - Lexical Analyzer Command-Line Interface
=================================================

This module implements the command-line interface for the lexer. It reads
a program, tokenizes it, and writes the token table.

Usage Examples
--------------
Read one line from standard input, print the table:
    $ echo 'print("Hello\\n");' | minilex

Tokenize a file:
    $ minilex hello.t

Tokenize a file into another file:
    $ minilex hello.t hello.lex

The names "stdin" and "stdout" select the standard streams, so
`minilex stdin out.lex` reads standard input and writes out.lex.

Lexical errors appear as Error rows in the table and do not change the
exit status. Failing to read the input or write the output does.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from minilex import __version__
from minilex.cli.errors import handle_cli_exception
from minilex.config import LexerOptions
from minilex.errors import SourceIOError
from minilex.lexer import Lexer
from minilex.render import list_tokens
from minilex.tokens import TokenKind

logger = logging.getLogger(__name__)

# Argument values that select the standard streams
STDIN = "stdin"
STDOUT = "stdout"

# Files and standard input map bytes 1:1 onto characters
ENCODING = "latin-1"


# =============================================================================
# Input / Output
# =============================================================================

def read_source(path: str) -> str:
    """
    Read the program text.

    Args:
        path: File to read, or "stdin" to read one line from standard input
              (without its line terminator)

    Raises:
        SourceIOError: If the file cannot be read
    """
    if path == STDIN:
        data = sys.stdin.buffer.readline()
        logger.debug(f"Read {len(data)} bytes from standard input")
        return data.decode(ENCODING).removesuffix("\n")

    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise SourceIOError(path, "read", e.strerror or str(e)) from e

    logger.debug(f"Read {len(data)} bytes from {path}")
    return data.decode(ENCODING)


def write_output(path: str, text: str) -> None:
    """
    Write the rendered token table.

    Args:
        path: File to write, or "stdout" for standard output
        text: The table

    Raises:
        SourceIOError: If the file cannot be written
    """
    if path == STDOUT:
        click.echo(text, nl=False)
        return

    try:
        Path(path).write_bytes(text.encode(ENCODING))
    except OSError as e:
        raise SourceIOError(path, "write", e.strerror or str(e)) from e

    logger.debug(f"Wrote {len(text)} bytes to {path}")


def lex_to_table(source: str, options: Optional[LexerOptions] = None) -> str:
    """
    Tokenize source and render the token table.

    Args:
        source: Program text
        options: Lexer configuration (uses defaults if None)

    Returns:
        The table, ending with the End_of_input row
    """
    tokens = list(Lexer(source, options).tokenize())

    error_count = sum(1 for token in tokens if token.kind is TokenKind.ERROR)
    logger.info(f"Tokenized: {len(tokens)} tokens")
    if error_count:
        logger.warning(f"{error_count} lexical error(s) reported in the token table")

    return list_tokens(tokens)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument("input_file", default=STDIN, required=False)
@click.argument("output_file", default=STDOUT, required=False)
@click.version_option(version=__version__, prog_name="minilex")
def main(input_file: str, output_file: str) -> None:
    """
    Tokenize a program and write its token table.

    INPUT_FILE is the program to read ("stdin", the default, reads one
    line from standard input). OUTPUT_FILE receives the table ("stdout",
    the default, prints it).

    \b
    Examples:
        minilex                      # One line from stdin to stdout
        minilex hello.t              # File to stdout
        minilex hello.t hello.lex    # File to file
    """
    options = None

    try:
        options = LexerOptions.from_env()
        logging.basicConfig(
            level=options.logging_level,
            format="%(levelname)s: %(message)s",
        )

        source = read_source(input_file)
        table = lex_to_table(source, options)
        write_output(output_file, table)

    except Exception as e:
        verbose = options is not None and options.logging_level <= logging.DEBUG
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
