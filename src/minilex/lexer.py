"""
minilex Lexer (Tokenizer)
=========================

This module implements the lexer for the small C-like teaching language.
It converts program text into a stream of tokens, one call at a time.

Lexical Elements
----------------
- Keywords: if, else, while, print, putc
- Identifiers: [A-Za-z_][A-Za-z0-9_]*
- Integers: decimal digit runs
- Characters: 'c', '\\n', '\\\\' (produce an Integer token holding the ordinal)
- Strings: "text" with the same two escapes
- Operators: * / % + - < <= > >= == != ! = && ||
- Punctuation: ( ) { } ; ,
- Comments: /* ... */ (not nested)

Error Reporting
---------------
Lexical errors do not stop the lexer. Each bad character or sequence
becomes one ERROR token whose value is the diagnostic, a newline, and
the current "(line, column): " followed by the offending source excerpt:

    Empty character constant
                                (1, 2): '

Lexing then resumes after the offending text.

Example Usage
-------------
>>> from minilex.lexer import Lexer
>>> for token in Lexer("print(x);").tokenize():
...     print(token)
Token(KEYWORD_PRINT, 1:1)
Token(LEFTPAREN, 1:6)
Token(IDENTIFIER, 'x', 1:7)
Token(RIGHTPAREN, 1:8)
Token(SEMICOLON, 1:9)
Token(END_OF_INPUT, 1:10)
"""

import logging
import string
from typing import Iterator, Optional

from minilex.config import LexerOptions
from minilex.scanner import Cursor
from minilex.tokens import KEYWORDS, Token, TokenKind, TokenValue

logger = logging.getLogger(__name__)


# =============================================================================
# Character Classes
# =============================================================================

# Characters that can start an identifier
IDENT_START = frozenset(string.ascii_letters + "_")

# Characters that can continue an identifier
IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")

DIGITS = frozenset(string.digits)

# The C locale's isspace() set
WHITESPACE = frozenset(" \t\n\r\v\f")

# Escape sequences recognised in character and string literals
ESCAPE_SEQUENCES = {
    "n": "\n",
    "\\": "\\",
}

# Tokens made of exactly one character
SINGLE_CHAR_TOKENS = {
    "*": TokenKind.OP_MULTIPLY,
    "%": TokenKind.OP_MOD,
    "+": TokenKind.OP_ADD,
    "-": TokenKind.OP_SUBTRACT,
    "{": TokenKind.LEFTBRACE,
    "}": TokenKind.RIGHTBRACE,
    "(": TokenKind.LEFTPAREN,
    ")": TokenKind.RIGHTPAREN,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
}

# Operators that must be written twice: & -> &&, | -> ||
DOUBLED_TOKENS = {
    "&": TokenKind.OP_AND,
    "|": TokenKind.OP_OR,
}

# Operators with an optional trailing '=': char -> (with '=', without)
EQUALS_TOKENS = {
    "<": (TokenKind.OP_LESSEQUAL, TokenKind.OP_LESS),
    ">": (TokenKind.OP_GREATEREQUAL, TokenKind.OP_GREATER),
    "=": (TokenKind.OP_EQUAL, TokenKind.OP_ASSIGN),
    "!": (TokenKind.OP_NOTEQUAL, TokenKind.OP_NOT),
}


# =============================================================================
# Diagnostics
# =============================================================================

MSG_UNRECOGNIZED = "Unrecognized character '{char}'"
MSG_COMMENT_EOF = "End-of-file in comment. Closing comment characters not found."
MSG_EMPTY_CHAR = "Empty character constant"
MSG_UNKNOWN_ESCAPE = "Unknown escape sequence \\{char}"
MSG_MULTI_CHAR = "Multi-character constant"
MSG_CHAR_EOF = "End-of-file in character constant. Closing quote not found."
MSG_STRING_EOL = (
    "End-of-line while scanning string literal."
    " Closing string character not found before end-of-line."
)
MSG_STRING_EOF = (
    "End-of-file while scanning string literal."
    " Closing string character not found."
)
MSG_INVALID_NUMBER = (
    "Invalid number. Starts like a number, but ends in non-numeric characters."
)
MSG_NUMBER_TOO_BIG = "Number exceeds maximum value"


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes program text.

    The lexer owns a live cursor and a snapshot of it taken at the first
    character of the token being produced (token_start). Every call to
    next_token() consumes at least one character or returns END_OF_INPUT,
    so lexing a finite source always terminates.

    Usage:
        lexer = Lexer(source_text)
        tokens = list(lexer.tokenize())

    Attributes:
        source: The program text being tokenized
        options: Lexer configuration
    """

    def __init__(self, source: str, options: Optional[LexerOptions] = None):
        """
        Initialize the lexer with program text.

        Args:
            source: The text to tokenize
            options: Lexer configuration (uses defaults if None)
        """
        self.source = source
        self.options = options or LexerOptions()
        self._cursor = Cursor(source)
        self._token_start = self._cursor.snapshot()

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    @property
    def cursor(self) -> Cursor:
        """A copy of the live cursor."""
        return self._cursor.snapshot()

    def has_more(self) -> bool:
        """Return True while the live cursor has not reached end of input."""
        return not self._cursor.at_end

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including END_OF_INPUT.

        Yields:
            Token objects in source order, ERROR tokens included
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END_OF_INPUT:
                return

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Whitespace and comments before the token are skipped. At end of
        input this returns END_OF_INPUT without consuming anything, so it
        may be called again safely.
        """
        while True:
            self._skip_whitespace()
            self._token_start = self._cursor.snapshot()

            char = self._cursor.peek()

            if self._cursor.at_end:
                return self._make_token(TokenKind.END_OF_INPUT)

            if char in SINGLE_CHAR_TOKENS:
                return self._simply(SINGLE_CHAR_TOKENS[char])

            if char in DOUBLED_TOKENS:
                return self._expect(char, DOUBLED_TOKENS[char])

            if char in EQUALS_TOKENS:
                with_equals, without = EQUALS_TOKENS[char]
                return self._follow("=", with_equals, without)

            if char == "/":
                if self._cursor.next() != "*":
                    return self._make_token(TokenKind.OP_DIVIDE)
                if not self._skip_comment():
                    return self._error(MSG_COMMENT_EOF)
                continue

            if char == "'":
                return self._scan_char()

            if char == '"':
                return self._scan_string()

            if char in IDENT_START:
                return self._scan_identifier()

            if char in DIGITS:
                return self._scan_integer()

            return self._error(MSG_UNRECOGNIZED.format(char=char))

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _make_token(self, kind: TokenKind, value: TokenValue = None) -> Token:
        """Create a token positioned at token_start."""
        return Token(kind, value, self._token_start.line, self._token_start.column)

    def _simply(self, kind: TokenKind) -> Token:
        """Consume the current character and emit a valueless token."""
        self._cursor.advance()
        return self._make_token(kind)

    def _expect(self, char: str, kind: TokenKind) -> Token:
        """Emit kind if char is doubled, else an error for the lone char."""
        if self._cursor.next() == char:
            return self._simply(kind)
        return self._error(MSG_UNRECOGNIZED.format(char=char), skip=False)

    def _follow(self, expected: str, if_yes: TokenKind, if_no: TokenKind) -> Token:
        """Emit if_yes when expected follows the current character, else if_no."""
        if self._cursor.next() == expected:
            return self._simply(if_yes)
        return self._make_token(if_no)

    def _error(self, message: str, skip: bool = True) -> Token:
        """
        Create an ERROR token for the text between token_start and the cursor.

        Args:
            message: Diagnostic text
            skip: Consume the offending character so lexing can continue

        Returns:
            ERROR token positioned at token_start
        """
        start = self._token_start
        current = self._cursor
        excerpt = self.source[start.position:current.position]
        indent = " " * self.options.error_indent

        value = f"{message}\n{indent}({current.line}, {current.column}): {excerpt}"

        logger.debug(
            f"Lexical error at {start.line}:{start.column}: {message} ({excerpt!r})"
        )

        if skip:
            self._cursor.advance()

        return self._make_token(TokenKind.ERROR, value)

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace(self) -> None:
        """Skip all whitespace."""
        while self._cursor.peek() in WHITESPACE:
            self._cursor.advance()

    def _skip_comment(self) -> bool:
        """
        Skip the rest of a block comment; the cursor is on its '*'.

        Returns:
            True if the closing */ was found and consumed, False at end of input
        """
        self._cursor.advance()  # consume *

        while not self._cursor.at_end:
            if self._cursor.peek() == "*" and self._cursor.next() == "/":
                self._cursor.advance()  # consume /
                return True
            if self._cursor.peek() != "*":
                self._cursor.advance()

        return False

    # =========================================================================
    # Literal Scanning
    # =========================================================================

    def _scan_escape(self) -> Optional[str]:
        """
        Resolve the escape whose backslash is under the cursor.

        Leaves the cursor on the escaped character. Returns None if the
        escape is unknown.
        """
        return ESCAPE_SEQUENCES.get(self._cursor.next())

    def _scan_char(self) -> Token:
        """
        Scan a single-quoted character literal.

        Produces an INTEGER token holding the character's ordinal.
        """
        char = self._cursor.next()

        if self._cursor.at_end:
            return self._error(MSG_CHAR_EOF)

        if char == "'":
            return self._error(MSG_EMPTY_CHAR)

        if char == "\\":
            char = self._scan_escape()
            if self._cursor.at_end:
                return self._error(MSG_CHAR_EOF)
            if char is None:
                return self._error(MSG_UNKNOWN_ESCAPE.format(char=self._cursor.peek()))

        if self._cursor.next() != "'":
            if self._cursor.at_end:
                return self._error(MSG_CHAR_EOF)
            return self._error(MSG_MULTI_CHAR)

        self._cursor.advance()  # consume closing '
        return self._make_token(TokenKind.INTEGER, ord(char))

    def _scan_string(self) -> Token:
        """Scan a double-quoted string literal."""
        chars = []

        while self._cursor.next() != '"':
            char = self._cursor.peek()

            if self._cursor.at_end:
                return self._error(MSG_STRING_EOF)

            if char == "\n":
                return self._error(MSG_STRING_EOL)

            if char == "\\":
                escaped = self._scan_escape()
                if self._cursor.at_end:
                    return self._error(MSG_STRING_EOF)
                if escaped is None:
                    return self._error(MSG_UNKNOWN_ESCAPE.format(char=self._cursor.peek()))
                chars.append(escaped)
                continue

            chars.append(char)

        self._cursor.advance()  # consume closing "
        return self._make_token(TokenKind.STRING, "".join(chars))

    def _scan_identifier(self) -> Token:
        """
        Scan an identifier or keyword.

        Keywords are distinguished by checking against the keyword table.
        """
        chars = [self._cursor.peek()]
        while self._cursor.next() in IDENT_CHARS:
            chars.append(self._cursor.peek())

        name = "".join(chars)

        if name in KEYWORDS:
            return self._make_token(KEYWORDS[name])

        return self._make_token(TokenKind.IDENTIFIER, name)

    def _scan_integer(self) -> Token:
        """
        Scan a decimal integer literal.

        A digit run running straight into letters ("123abc") is consumed
        whole and reported as one invalid number.
        """
        chars = [self._cursor.peek()]
        while self._cursor.next() in DIGITS:
            chars.append(self._cursor.peek())

        if self._cursor.peek() in IDENT_START:
            while self._cursor.peek() in IDENT_CHARS:
                self._cursor.advance()
            return self._error(MSG_INVALID_NUMBER, skip=False)

        # Compare lengths first: int() refuses very long digit strings
        digits = "".join(chars).lstrip("0") or "0"
        if len(digits) > len(str(self.options.max_integer)):
            return self._error(MSG_NUMBER_TOO_BIG, skip=False)

        value = int(digits)
        if value > self.options.max_integer:
            return self._error(MSG_NUMBER_TOO_BIG, skip=False)

        return self._make_token(TokenKind.INTEGER, value)


# =============================================================================
# Convenience Functions
# =============================================================================

def lex(source: str, options: Optional[LexerOptions] = None) -> list[Token]:
    """
    Tokenize source text and return every token, END_OF_INPUT included.

    Args:
        source: Program text
        options: Lexer configuration (uses defaults if None)
    """
    return list(Lexer(source, options).tokenize())
