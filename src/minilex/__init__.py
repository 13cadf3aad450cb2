"""
minilex - Lexical Analyzer for a Small C-like Teaching Language
===============================================================

This package converts program text into an ordered sequence of classified
tokens, each annotated with its source position.

Main Components
---------------
- **scanner**: Cursor with line/column accounting
- **tokens**: Token kinds, the Token value object, and the keyword table
- **lexer**: The tokenizer
- **render**: The fixed-width token table
- **config**: LexerOptions, from defaults or MINILEX_* environment variables
- **cli**: The `minilex` command

Quick Start
-----------
    >>> from minilex import lex, list_tokens
    >>> print(list_tokens(lex("x = 1;")), end="")
    Location  Token name        Value
    ----------------------------------------
     1    1   Identifier        x
     1    3   Op_assign
     1    5   Integer           1
     1    6   Semicolon
     1    7   End_of_input

Or use the command-line tool:
    $ minilex program.t
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from minilex.config import LexerOptions
from minilex.errors import (
    MinilexError,
    SourceLocation,
    ConfigurationError,
    SourceIOError,
)
from minilex.scanner import Cursor, SENTINEL
from minilex.tokens import KEYWORDS, Token, TokenKind, TokenValue
from minilex.lexer import Lexer, lex
from minilex.render import format_token, list_tokens, sanitize

__all__ = [
    # Version
    "__version__",
    # Lexer
    "Lexer",
    "lex",
    "LexerOptions",
    "Cursor",
    "SENTINEL",
    # Tokens
    "Token",
    "TokenKind",
    "TokenValue",
    "KEYWORDS",
    # Rendering
    "format_token",
    "list_tokens",
    "sanitize",
    # Errors
    "MinilexError",
    "SourceLocation",
    "ConfigurationError",
    "SourceIOError",
]
