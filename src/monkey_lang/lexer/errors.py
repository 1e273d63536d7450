"""
Lexer Error Hierarchy
=====================

Exceptions raised while scanning Monkey source text.

The scanner is deliberately forgiving: an unrecognized byte is returned
as an ILLEGAL token, not raised. Only two situations produce exceptions:

LexerError (base for all lexer errors)
├── IntegerOverflowError - integer literal does not fit in a signed 64-bit value
└── InvalidCharacterError - unrecognized byte, only when strict mode is enabled

Example:
    repl.mk:1:9: error: integer literal '99999999999999999999' is out of range
        let x = 99999999999999999999;
                ^
    hint: integer literals must be between 0 and 9223372036854775807
"""

from typing import Optional

from monkey_lang.errors import MonkeyError, SourceLocation


# =============================================================================
# Base Lexer Exception
# =============================================================================

class LexerError(MonkeyError):
    """
    Base exception for all lexer errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The source text of the offending line
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error with location, source context and hint."""
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Specific Lexer Errors
# =============================================================================

class IntegerOverflowError(LexerError):
    """
    Integer literal outside the signed 64-bit range.

    The whole digit run has been consumed by the time this is raised, so
    scanning may resume with the token that follows the literal.
    """

    def __init__(
        self,
        literal: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        max_value: int = 2**63 - 1,
    ):
        self.literal = literal
        self.max_value = max_value
        super().__init__(
            f"integer literal '{literal}' is out of range",
            location=location,
            hint=f"integer literals must be between 0 and {max_value}",
            source_line=source_line,
        )


class InvalidCharacterError(LexerError):
    """Unrecognized byte in source, raised only by a strict lexer."""

    def __init__(
        self,
        byte: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.byte = byte
        if 0x20 <= byte < 0x7F:
            message = f"invalid character '{chr(byte)}' (0x{byte:02X})"
        else:
            message = f"invalid byte 0x{byte:02X}"
        super().__init__(
            message,
            location=location,
            source_line=source_line,
        )
