"""
Monkey Command-Line Interface
=============================

- **monkey-lex**: tokenizer and interactive REPL

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["repl"]
