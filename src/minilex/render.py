"""
Token Table Rendering
=====================

Formats a token list as the fixed-width table printed by the command line:

    Location  Token name        Value
    ----------------------------------------
     1    1   Integer           1
     1    3   Op_add
     1    5   Integer           2
     1    6   Semicolon
     1    7   End_of_input

Strings are shown quoted with newlines and backslashes escaped again, so
every token occupies exactly one line (error values excepted: they carry
their own position line).
"""

from typing import Iterable

from minilex.tokens import Token, TokenKind


TABLE_HEADER = "Location  Token name        Value\n" + "-" * 40 + "\n"

# Label column width, value starts right after it
LABEL_WIDTH = 18


def sanitize(text: str) -> str:
    """Escape newlines and backslashes back into their source form."""
    return text.replace("\\", "\\\\").replace("\n", "\\n")


def format_token(token: Token) -> str:
    """
    Format one token as a table line, trailing newline included.

    Args:
        token: The token to format

    Returns:
        "LL   CC   Label             value\\n"
    """
    location = f"{token.line:>2}   {token.column:>2}   "
    label = token.kind.label

    if token.kind is TokenKind.STRING:
        return f'{location}{label:<{LABEL_WIDTH}}"{sanitize(token.value)}"\n'

    if token.kind in (TokenKind.INTEGER, TokenKind.IDENTIFIER, TokenKind.ERROR):
        return f"{location}{label:<{LABEL_WIDTH}}{token.value}\n"

    return f"{location}{label}\n"


def list_tokens(tokens: Iterable[Token]) -> str:
    """Render the complete token table: header, separator, one line per token."""
    return TABLE_HEADER + "".join(format_token(token) for token in tokens)
