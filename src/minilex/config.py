"""
minilex Configuration
=====================

Options that tune the lexer and the command line. Values come from:
- Default values (defined here)
- Environment variables (LexerOptions.from_env)

Environment variables (all optional):
    MINILEX_MAX_INTEGER: Largest integer literal accepted (default 2147483647)
    MINILEX_ERROR_INDENT: Spaces before "(line, column)" in error values
    MINILEX_LOG_LEVEL: Logging level name for the command line
"""

import logging
import os
from dataclasses import dataclass

from minilex.errors import ConfigurationError


# Largest value of a signed 32-bit integer
DEFAULT_MAX_INTEGER = 2**31 - 1

# Width of "LL   CC   Error             " in the token table, so the
# position line of an error message lines up with the value column
DEFAULT_ERROR_INDENT = 28

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LexerOptions:
    """
    Lexer and command-line configuration.

    Attributes:
        max_integer: Integer literals above this value are lexical errors
        error_indent: Indentation of the position line in error values
        log_level: Level name passed to logging.basicConfig by the CLI
    """
    max_integer: int = DEFAULT_MAX_INTEGER
    error_indent: int = DEFAULT_ERROR_INDENT
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.max_integer < 0:
            raise ConfigurationError("max_integer", str(self.max_integer), "must not be negative")
        if self.error_indent < 0:
            raise ConfigurationError("error_indent", str(self.error_indent), "must not be negative")
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                "log_level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )

    @property
    def logging_level(self) -> int:
        """The log_level name as a logging module constant."""
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls) -> "LexerOptions":
        """
        Create LexerOptions from MINILEX_* environment variables.

        Raises:
            ConfigurationError: If a variable is set to an invalid value
        """
        kwargs = {}

        if max_integer := os.environ.get("MINILEX_MAX_INTEGER"):
            kwargs["max_integer"] = _parse_int("MINILEX_MAX_INTEGER", max_integer)

        if error_indent := os.environ.get("MINILEX_ERROR_INDENT"):
            kwargs["error_indent"] = _parse_int("MINILEX_ERROR_INDENT", error_indent)

        if log_level := os.environ.get("MINILEX_LOG_LEVEL"):
            kwargs["log_level"] = log_level

        return cls(**kwargs)


def _parse_int(name: str, text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ConfigurationError(name, text, "expected an integer") from None
