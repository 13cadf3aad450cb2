"""
minilex Error Hierarchy
=======================

This module defines the exception hierarchy for minilex. All exceptions
inherit from MinilexError, allowing callers to catch every library error
with a single except clause.

Lexical errors are NOT exceptions: the lexer reports them in-stream as
ERROR tokens and keeps going. The exceptions here cover the situations in
which the lexer never gets to run at all.

Exception Hierarchy
-------------------
MinilexError (base)
├── ConfigurationError - invalid option value (e.g. from the environment)
└── SourceIOError - cannot read the program or write the token table
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MinilexError(Exception):
    """
    Base exception for all minilex errors.

        try:
            source = read_source("program.t")
        except MinilexError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in program text, used when describing tokens.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column'."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(MinilexError):
    """
    Invalid configuration value.

    Raised when an option (typically read from a MINILEX_* environment
    variable) cannot be converted or is out of range.
    """

    def __init__(self, name: str, value: str, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"invalid value {value!r} for {name}: {reason}")


# =============================================================================
# I/O Errors
# =============================================================================

class SourceIOError(MinilexError):
    """
    Cannot read the program text or write the token table.

    Wraps the underlying OSError so the command line can tell "the lexer
    never ran" apart from "the lexer found bad input".

    Attributes:
        path: The file that could not be accessed
        operation: "read" or "write"
        reason: Description from the operating system
    """

    def __init__(
        self,
        path: str,
        operation: str,
        reason: Optional[str] = None,
    ):
        self.path = path
        self.operation = operation
        self.reason = reason or "unknown error"
        super().__init__(f"cannot {operation} '{path}': {self.reason}")
