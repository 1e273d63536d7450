"""
Monkey - Front End for the Monkey Scripting Language
====================================================

This package provides the lexical analysis stage of an interpreter for
Monkey, a small C-like scripting language:

    let add = fn(x, y) { x + y; };
    let result = add(five, ten);

Main Components
---------------
- **lexer**: Token model and scanner
    Converts source text into Token objects, one per ``next_token()`` call

- **cli**: Command-line tools (monkey-lex)
    Interactive REPL and file tokenizer printing one token per line

Quick Start
-----------
    >>> from monkey_lang import Lexer
    >>> lexer = Lexer("let five = 5;")
    >>> lexer.next_token()
    Token(LET)

Or use the command-line tool:
    $ monkey-lex program.mk
    $ monkey-lex            # starts the REPL
"""

__version__ = "0.1.0"
__author__ = "Monkey Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from monkey_lang.errors import MonkeyError, SourceLocation
from monkey_lang.lexer import (
    KEYWORDS,
    IntegerOverflowError,
    InvalidCharacterError,
    Lexer,
    LexerError,
    LexerOptions,
    Token,
    TokenType,
    lookup_keyword,
    tokenize,
)

__all__ = [
    "__version__",
    "MonkeyError",
    "SourceLocation",
    "KEYWORDS",
    "IntegerOverflowError",
    "InvalidCharacterError",
    "Lexer",
    "LexerError",
    "LexerOptions",
    "Token",
    "TokenType",
    "lookup_keyword",
    "tokenize",
]
