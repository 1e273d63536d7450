"""
Monkey Lexer (Tokenizer)
========================

This module implements the scanner that turns Monkey source text into
the token sequence consumed by the parser.

The input is treated as a stream of single bytes. Each call to
``next_token()`` skips whitespace, classifies the byte under the cursor
and returns exactly one token, looking at most one byte ahead.

Classification Order
--------------------
1. ``==`` and ``!=`` (maximal munch, otherwise ``=`` and ``!``)
2. Single-byte operators and delimiters: ``+ - * / < > , ; ( ) { }``
3. End of input
4. Letters and underscore: identifier or keyword
5. Decimal digits: integer literal
6. Anything else: ILLEGAL carrying the byte value

Unrecognized bytes are data, not failures. The only error the scanner
raises by default is IntegerOverflowError for a digit run that does not
fit in a signed 64-bit integer.

Example Usage
-------------
>>> from monkey_lang.lexer import Lexer
>>> lexer = Lexer("let five = 5;")
>>> for token in lexer.tokenize():
...     print(token)
Token(LET)
Token(IDENT, 'five')
Token(ASSIGN)
Token(INT, 5)
Token(SEMICOLON)
Token(EOF)
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterator, Optional, Union

from monkey_lang.errors import SourceLocation
from monkey_lang.lexer.errors import IntegerOverflowError, InvalidCharacterError
from monkey_lang.lexer.tokens import Token, TokenType, lookup_identifier

logger = logging.getLogger(__name__)


# Sentinel held in `ch` once the cursor is past the end of input
NUL = 0

# Largest value an INT token can carry (signed 64-bit)
INT64_MAX = 2**63 - 1
_INT64_MAX_DIGITS = len(str(INT64_MAX))

_WHITESPACE = frozenset(b" \t\n\r")
_NEWLINE = ord("\n")
_EQUALS = ord("=")
_BANG = ord("!")

SourceText = Union[str, bytes, bytearray, memoryview]


# =============================================================================
# Character Classes
# =============================================================================

def is_letter(ch: int) -> bool:
    """ASCII letter or underscore."""
    return (
        ord("a") <= ch <= ord("z")
        or ord("A") <= ch <= ord("Z")
        or ch == ord("_")
    )


def is_digit(ch: int) -> bool:
    return ord("0") <= ch <= ord("9")


def is_whitespace(ch: int) -> bool:
    return ch in _WHITESPACE


# =============================================================================
# Lexer Options
# =============================================================================

@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        allow_digits_in_identifiers: Let digits follow the first letter of
            an identifier ("x1"). Off by default, in which case "x1" scans
            as IDENT("x") followed by INT(1).
        strict: Raise InvalidCharacterError on an unrecognized byte
            instead of returning an ILLEGAL token.
    """
    allow_digits_in_identifiers: bool = False
    strict: bool = False


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes Monkey source code, one token per ``next_token()`` call.

    The lexer keeps a byte cursor over its input and nothing else: every
    call starts and ends between tokens. The input is never modified, so
    several lexers may share the same buffer. A single Lexer instance is
    not safe to use from multiple threads.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = list(lexer.tokenize())

    Attributes:
        input: The source bytes being tokenized
        filename: Name of the source (for locations and error messages)
        options: The LexerOptions in effect
        position: Index of the byte currently under examination
        read_position: Index of the next byte to read
        ch: The byte at ``position``, or NUL once past the end
    """

    SINGLE_CHAR_TOKENS: dict[int, TokenType] = {
        ord("+"): TokenType.PLUS,
        ord("-"): TokenType.MINUS,
        ord("*"): TokenType.ASTERISK,
        ord("/"): TokenType.SLASH,
        ord("<"): TokenType.LT,
        ord(">"): TokenType.GT,
        ord(","): TokenType.COMMA,
        ord(";"): TokenType.SEMICOLON,
        ord("("): TokenType.LPAREN,
        ord(")"): TokenType.RPAREN,
        ord("{"): TokenType.LBRACE,
        ord("}"): TokenType.RBRACE,
    }

    def __init__(
        self,
        source: SourceText,
        filename: str = "<input>",
        options: Optional[LexerOptions] = None,
    ):
        """
        Initialize the lexer and prime the cursor on the first byte.

        Args:
            source: The text to tokenize. A str is encoded as UTF-8 with
                surrogateescape, so undecodable bytes come back unchanged and
                every non-ASCII byte becomes its own ILLEGAL token.
            filename: Name of the source file (for error messages)
            options: Lexer configuration, defaults to LexerOptions()
        """
        if isinstance(source, str):
            source = source.encode("utf-8", "surrogateescape")
        self.input = bytes(source)
        self.filename = filename
        self.options = options or LexerOptions()

        self.position = 0
        self.read_position = 0
        self.ch = NUL

        # Line tracking for locations
        self._line = 1
        self._line_start_pos = 0

        self._read_char()

    # =========================================================================
    # Public Interface
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Once the input is exhausted every call returns EOF.

        Raises:
            IntegerOverflowError: If an integer literal exceeds INT64_MAX
            InvalidCharacterError: On an unrecognized byte in strict mode
        """
        self._skip_whitespace()

        location = self._location()
        ch = self.ch

        # Two-character operators, or their one-character prefixes
        if ch == _EQUALS or ch == _BANG:
            if self._peek_char() == _EQUALS:
                self._read_char()
                token_type = TokenType.EQ if ch == _EQUALS else TokenType.NOT_EQ
            else:
                token_type = TokenType.ASSIGN if ch == _EQUALS else TokenType.BANG
            token = Token(token_type, location=location)

        elif ch in self.SINGLE_CHAR_TOKENS:
            token = Token(self.SINGLE_CHAR_TOKENS[ch], location=location)

        elif self._at_end():
            return Token(TokenType.EOF, location=location)

        elif is_letter(ch):
            return self._read_identifier(location)

        elif is_digit(ch):
            return self._read_number(location)

        else:
            token = self._illegal(ch, location)

        self._read_char()
        return token

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including the first EOF.

        Yields:
            Token objects in source order
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def peek_token(self) -> Token:
        """
        Return the next token without consuming it.

        The cursor is restored afterwards, even if scanning raises.
        """
        saved = (
            self.position,
            self.read_position,
            self.ch,
            self._line,
            self._line_start_pos,
        )
        try:
            return self.next_token()
        finally:
            (
                self.position,
                self.read_position,
                self.ch,
                self._line,
                self._line_start_pos,
            ) = saved

    # =========================================================================
    # Cursor Movement
    # =========================================================================

    def _read_char(self) -> None:
        """Advance the cursor by one byte."""
        if self.ch == _NEWLINE:
            self._line += 1
            self._line_start_pos = self.read_position

        if self.read_position >= len(self.input):
            self.ch = NUL
        else:
            self.ch = self.input[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def _peek_char(self) -> int:
        """Return the byte after the current one without advancing."""
        if self.read_position >= len(self.input):
            return NUL
        return self.input[self.read_position]

    def _at_end(self) -> bool:
        # A NUL byte inside the input is not end of input
        return self.position >= len(self.input)

    def _skip_whitespace(self) -> None:
        while is_whitespace(self.ch):
            self._read_char()

    # =========================================================================
    # Multi-Byte Tokens
    # =========================================================================

    def _read_identifier(self, location: SourceLocation) -> Token:
        """
        Scan the maximal run of identifier bytes and resolve keywords.

        Digits continue an identifier only when the lexer options allow it.
        """
        allow_digits = self.options.allow_digits_in_identifiers
        start = self.position
        while is_letter(self.ch) or (allow_digits and is_digit(self.ch)):
            self._read_char()

        name = self.input[start:self.position].decode("ascii")
        return replace(lookup_identifier(name), location=location)

    def _read_number(self, location: SourceLocation) -> Token:
        """Scan the maximal run of decimal digits as a signed 64-bit integer."""
        start = self.position
        while is_digit(self.ch):
            self._read_char()

        literal = self.input[start:self.position].decode("ascii")

        # int() refuses digit strings longer than sys.get_int_max_str_digits()
        significant = literal.lstrip("0")
        if len(significant) > _INT64_MAX_DIGITS or int(significant or "0") > INT64_MAX:
            logger.debug(f"Integer literal overflow at {location}: {literal}")
            raise IntegerOverflowError(
                literal,
                location,
                self._get_current_line(),
                max_value=INT64_MAX,
            )

        return Token(TokenType.INT, int(significant or "0"), location=location)

    def _illegal(self, ch: int, location: SourceLocation) -> Token:
        """Build an ILLEGAL token, or raise in strict mode."""
        logger.debug(f"Illegal byte 0x{ch:02X} at {location}")
        if self.options.strict:
            source_line = self._get_current_line()
            self._read_char()
            raise InvalidCharacterError(ch, location, source_line)
        return Token(TokenType.ILLEGAL, ch, location=location)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _location(self) -> SourceLocation:
        column = self.position - self._line_start_pos + 1
        return SourceLocation(self.filename, self._line, column)

    def _get_current_line(self) -> str:
        """Get the current line of source text for error reporting."""
        line_end = self.input.find(b"\n", self._line_start_pos)
        if line_end == -1:
            line_end = len(self.input)
        text = self.input[self._line_start_pos:line_end]
        return text.decode("utf-8", errors="replace").rstrip("\r")


def tokenize(
    source: SourceText,
    filename: str = "<input>",
    options: Optional[LexerOptions] = None,
) -> list[Token]:
    """Tokenize source and return every token, ending with EOF."""
    return list(Lexer(source, filename, options).tokenize())
