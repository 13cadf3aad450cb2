"""
Source Cursor
=============

The cursor walks the program text one character at a time and keeps the
1-based line/column of the character it is looking at.

The lexer keeps one live cursor and takes snapshots of it (for example at
the first character of every token). Snapshots are plain copies: moving
the live cursor never changes a snapshot.

Example
-------
>>> cursor = Cursor("a\\nb")
>>> cursor.peek()
'a'
>>> cursor.next()
'\\n'
>>> cursor.next(), cursor.line, cursor.column
('b', 2, 1)
"""

from dataclasses import dataclass, replace

from minilex.errors import SourceLocation


# Returned by peek() once the whole source has been consumed
SENTINEL = "\0"


@dataclass
class Cursor:
    """
    Read position plus line/column accounting over an immutable source.

    Attributes:
        source: The program text (never modified)
        position: Index of the current character (0-based)
        line: Line of the current character (1-based)
        column: Column of the current character (1-based)
    """
    source: str
    position: int = 0
    line: int = 1
    column: int = 1

    @property
    def at_end(self) -> bool:
        """True once every character of the source has been consumed."""
        return self.position >= len(self.source)

    def peek(self) -> str:
        """Return the current character, or SENTINEL at end of input."""
        if self.at_end:
            return SENTINEL
        return self.source[self.position]

    def advance(self) -> None:
        """
        Consume the current character.

        A consumed newline moves to column 1 of the next line; any other
        character moves one column right. Does nothing at end of input.
        """
        if self.at_end:
            return

        if self.source[self.position] == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.position += 1

    def next(self) -> str:
        """Consume the current character and return the one after it."""
        self.advance()
        return self.peek()

    def snapshot(self) -> "Cursor":
        """Return an independent copy of this cursor."""
        return replace(self)

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return the current position as a SourceLocation."""
        return SourceLocation(filename, self.line, self.column)
