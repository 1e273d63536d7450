"""
Monkey Lexer Package
====================

Turns Monkey source text into a linear sequence of typed tokens.

>>> from monkey_lang.lexer import tokenize
>>> tokenize("5 < 10")
[Token(INT, 5), Token(LT), Token(INT, 10), Token(EOF)]
"""

from monkey_lang.lexer.tokens import (
    KEYWORDS,
    Token,
    TokenType,
    lookup_identifier,
    lookup_keyword,
)
from monkey_lang.lexer.lexer import Lexer, LexerOptions, tokenize
from monkey_lang.lexer.errors import (
    LexerError,
    IntegerOverflowError,
    InvalidCharacterError,
)

__all__ = [
    "KEYWORDS",
    "Token",
    "TokenType",
    "lookup_identifier",
    "lookup_keyword",
    "Lexer",
    "LexerOptions",
    "tokenize",
    "LexerError",
    "IntegerOverflowError",
    "InvalidCharacterError",
]
