"""
minilex Command-Line Interface
==============================

This package provides the command-line tool for minilex:

- **minilex**: tokenize a program and print its token table

The tool is implemented as a Click-based CLI application with
consistent error reporting and exit codes.
"""

__all__ = ["minilex"]
