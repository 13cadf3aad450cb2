"""
Token Model
===========

Token kinds, the token value object, and the keyword table.

Token Categories
----------------
- Operators: * / % + - < <= > >= == != ! = && ||
- Punctuation: ( ) { } ; ,
- Keywords: if, else, while, print, putc
- Identifiers, integers (including character literals), strings
- END_OF_INPUT, and ERROR for lexical errors reported in-stream

Each kind's value is the label used in the rendered token table.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from minilex.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Closed set of token kinds produced by the lexer.

    OP_NEGATE is part of the language's token set but is never produced
    here: telling unary minus from subtraction is left to the parser.
    """

    # === Operators ===
    OP_MULTIPLY = "Op_multiply"             # *
    OP_DIVIDE = "Op_divide"                 # /
    OP_MOD = "Op_mod"                       # %
    OP_ADD = "Op_add"                       # +
    OP_SUBTRACT = "Op_subtract"             # -
    OP_NEGATE = "Op_negate"                 # unary - (parser only)
    OP_LESS = "Op_less"                     # <
    OP_LESSEQUAL = "Op_lessequal"           # <=
    OP_GREATER = "Op_greater"               # >
    OP_GREATEREQUAL = "Op_greaterequal"     # >=
    OP_EQUAL = "Op_equal"                   # ==
    OP_NOTEQUAL = "Op_notequal"             # !=
    OP_NOT = "Op_not"                       # !
    OP_ASSIGN = "Op_assign"                 # =
    OP_AND = "Op_and"                       # &&
    OP_OR = "Op_or"                         # ||

    # === Punctuation ===
    LEFTPAREN = "LeftParen"                 # (
    RIGHTPAREN = "RightParen"               # )
    LEFTBRACE = "LeftBrace"                 # {
    RIGHTBRACE = "RightBrace"               # }
    SEMICOLON = "Semicolon"                 # ;
    COMMA = "Comma"                         # ,

    # === Keywords ===
    KEYWORD_IF = "Keyword_if"
    KEYWORD_ELSE = "Keyword_else"
    KEYWORD_WHILE = "Keyword_while"
    KEYWORD_PRINT = "Keyword_print"
    KEYWORD_PUTC = "Keyword_putc"

    # === Values ===
    IDENTIFIER = "Identifier"
    INTEGER = "Integer"
    STRING = "String"

    # === Structural ===
    END_OF_INPUT = "End_of_input"
    ERROR = "Error"

    @property
    def label(self) -> str:
        """Name shown in the token table."""
        return self.value


# =============================================================================
# Keyword Mapping
# =============================================================================

KEYWORDS: Mapping[str, TokenKind] = MappingProxyType({
    "else": TokenKind.KEYWORD_ELSE,
    "if": TokenKind.KEYWORD_IF,
    "print": TokenKind.KEYWORD_PRINT,
    "putc": TokenKind.KEYWORD_PUTC,
    "while": TokenKind.KEYWORD_WHILE,
})


# =============================================================================
# Token Data Class
# =============================================================================

# absent, integer (integer and character literals), or text
TokenValue = Union[None, int, str]


@dataclass(frozen=True)
class Token:
    """
    A single lexical unit.

    Attributes:
        kind: The TokenKind classification
        value: int for INTEGER, str for IDENTIFIER/STRING/ERROR, else None
        line: Line of the token's first character (1-indexed)
        column: Column of the token's first character (1-indexed)
    """
    kind: TokenKind
    value: TokenValue
    line: int
    column: int

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.value is not None:
            if isinstance(self.value, int):
                return f"Token({self.kind.name}, {self.value}, {self.line}:{self.column})"
            return f"Token({self.kind.name}, {self.value!r}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.line}:{self.column})"

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return where this token starts as a SourceLocation."""
        return SourceLocation(filename, self.line, self.column)

    @property
    def is_error(self) -> bool:
        return self.kind is TokenKind.ERROR

    @property
    def is_keyword(self) -> bool:
        return self.kind in KEYWORDS.values()
