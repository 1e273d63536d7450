"""
Monkey Token Model
==================

The closed set of lexical categories produced by the lexer.

Token Categories
----------------
| Category  | Types                                                   |
|-----------|---------------------------------------------------------|
| Sentinel  | ILLEGAL (payload: byte value), EOF                      |
| Literal   | IDENT (payload: name), INT (payload: signed 64-bit int) |
| Operator  | = + - ! * / < > == !=                                   |
| Delimiter | , ; ( ) { }                                             |
| Keyword   | fn let true false if else return                        |

Two tokens compare equal when they have the same type and the same
payload. Source locations are carried along for diagnostics but never
take part in comparison.

Example Usage
-------------
>>> from monkey_lang.lexer.tokens import Token, TokenType, lookup_keyword
>>> lookup_keyword("let")
Token(LET)
>>> lookup_keyword("lets") is None
True
>>> Token(TokenType.IDENT, "five")
Token(IDENT, 'five')
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping, Optional

from monkey_lang.errors import SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token types for the Monkey language."""

    # === Sentinels ===
    ILLEGAL = auto()        # Unrecognized byte
    EOF = auto()            # End of input

    # === Identifiers and Literals ===
    IDENT = auto()          # add, foo, x, y
    INT = auto()            # 1343456

    # === Operators ===
    ASSIGN = auto()         # =
    PLUS = auto()           # +
    MINUS = auto()          # -
    BANG = auto()           # !
    ASTERISK = auto()       # *
    SLASH = auto()          # /
    LT = auto()             # <
    GT = auto()             # >
    EQ = auto()             # ==
    NOT_EQ = auto()         # !=

    # === Delimiters ===
    COMMA = auto()          # ,
    SEMICOLON = auto()      # ;
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACE = auto()         # {
    RBRACE = auto()         # }

    # === Keywords ===
    FUNCTION = auto()       # fn
    LET = auto()            # let
    TRUE = auto()           # true
    FALSE = auto()          # false
    IF = auto()             # if
    ELSE = auto()           # else
    RETURN = auto()         # return


# =============================================================================
# Keyword and Lexeme Tables
# =============================================================================

# Reserved words. Built once at import; the public view is read-only.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
})

OPERATORS: frozenset[TokenType] = frozenset({
    TokenType.ASSIGN,
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.BANG,
    TokenType.ASTERISK,
    TokenType.SLASH,
    TokenType.LT,
    TokenType.GT,
    TokenType.EQ,
    TokenType.NOT_EQ,
})

# Fixed source text of every payload-free token
LEXEMES: dict[TokenType, str] = {
    TokenType.ASSIGN: "=",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.BANG: "!",
    TokenType.ASTERISK: "*",
    TokenType.SLASH: "/",
    TokenType.LT: "<",
    TokenType.GT: ">",
    TokenType.EQ: "==",
    TokenType.NOT_EQ: "!=",
    TokenType.COMMA: ",",
    TokenType.SEMICOLON: ";",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.LBRACE: "{",
    TokenType.RBRACE: "}",
    TokenType.EOF: "",
}
LEXEMES.update({token_type: word for word, token_type in KEYWORDS.items()})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical unit.

    Attributes:
        type: The TokenType classification
        value: The payload, the byte value for ILLEGAL, the name for IDENT,
            the integer for INT and None for everything else
        location: Where the token starts in the source (not compared)
    """
    type: TokenType
    value: str | int | None = None
    location: Optional[SourceLocation] = field(
        default=None, compare=False, repr=False
    )

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"

    @property
    def literal(self) -> str:
        """
        The source text this token was scanned from.

        An ILLEGAL byte is decoded as Latin-1, so a byte >= 0x80 shows up as
        the matching U+0080..U+00FF character rather than the text it was
        part of (the first byte of "é" reads back as "Ã").
        """
        if self.type is TokenType.IDENT:
            return self.value
        if self.type is TokenType.INT:
            return str(self.value)
        if self.type is TokenType.ILLEGAL:
            return bytes([self.value]).decode("latin-1")
        return LEXEMES[self.type]

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type in _KEYWORD_TYPES

    def is_operator(self) -> bool:
        """Return True if this token is an operator."""
        return self.type in OPERATORS


_KEYWORD_TYPES = frozenset(KEYWORDS.values())


# =============================================================================
# Keyword Lookup
# =============================================================================

def lookup_keyword(name: str) -> Optional[Token]:
    """
    Map an identifier to its keyword token.

    The match is exact and case-sensitive: "let" is a keyword, while
    "Let", "lets" and "le" are not.

    Returns:
        The keyword token, or None if name is not a reserved word
    """
    token_type = KEYWORDS.get(name)
    if token_type is None:
        return None
    return Token(token_type)


def lookup_identifier(name: str) -> Token:
    """Return the keyword token for name, or an IDENT token carrying it."""
    return lookup_keyword(name) or Token(TokenType.IDENT, name)
