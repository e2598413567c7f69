"""
Lox Scanner Package

Front end for the Lox scripting language: a scanner producing
position-annotated tokens with recoverable error reporting.

Architecture:
    lox/
    ├── lexer/           # Tokens, diagnostics and the scanner
    ├── utils/           # Logging helpers
    ├── config.py        # Configuration constants
    └── cli.py           # `lox` command line

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerError, scan_source

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",
    "scan_source",

    # Version info
    "__version__",
    "__license__",
]
