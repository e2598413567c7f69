"""
Lox Lexer Package

Lexical analyzer (scanner) for the Lox scripting language.

Key Features:
- Character-class dispatch with maximal-munch operator matching
- Line and block comments, optionally kept as COMMENT tokens
- Line/column/offset tracking for every token
- Error recovery: lexical errors are collected, never fatal
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, OPERATORS
from .lexer import Lexer, ScanResult, CharClass, classify, scan_source, tokenize_string, tokenize_file
from .errors import LexerError, LexerWarning, ErrorKind, Diagnostic

__all__ = [
    "Lexer",
    "ScanResult",
    "CharClass",
    "classify",
    "scan_source",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "OPERATORS",
    "LexerError",
    "LexerWarning",
    "ErrorKind",
    "Diagnostic",
]
