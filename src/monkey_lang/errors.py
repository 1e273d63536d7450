"""
Monkey Error Hierarchy
======================

This module defines the root of the exception hierarchy for the whole
package. Every exception raised by monkey_lang inherits from MonkeyError,
so callers can catch all project errors with a single except clause.

Exception Hierarchy
-------------------
MonkeyError (base)
└── LexerError (monkey_lang.lexer.errors)
    ├── IntegerOverflowError - digit run outside the signed 64-bit range
    └── InvalidCharacterError - unrecognized byte in strict mode

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class MonkeyError(Exception):
    """
    Base exception for all monkey_lang errors.

        try:
            tokens = tokenize(source)
        except MonkeyError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source text, used for tokens and error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed, counted in bytes)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"
