"""
Token definitions for the Lox scanner.

This module defines all token types produced when scanning Lox source:
- Single and double character operators and punctuation
- Literals (numbers, strings) and identifiers
- Reserved keywords
- Special tokens (comments, end of input)
"""

import math
from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category, following the grammar's lexical rules.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # language, _tmp, x1
    STRING = auto()                 # "lox"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    COMMENT = auto()                # Only emitted when comments are requested
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Line and column are 1-based; offset is the 0-based character index
    of the location into the source text.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token type, lexeme (raw text), literal value
    and source location of the lexeme's first character.
    """
    type: TokenType
    lexeme: str                     # Exact text from source
    literal: Any                    # float for NUMBER, str for STRING, bool for TRUE/FALSE
    location: SourceLocation

    def __str__(self) -> str:
        if self.type in (TokenType.STRING, TokenType.NUMBER, TokenType.TRUE,
                         TokenType.FALSE, TokenType.NIL):
            return (f'Found {self.type.name} ("{self.lexeme}") {format_literal(self.literal)} '
                    f'at {self.line}:{self.column}')
        return f'Found {self.type.name} ("{self.lexeme}") at {self.line}:{self.column}'

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.location!r})")

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    @property
    def offset(self) -> int:
        return self.location.offset

    @property
    def length(self) -> int:
        """Number of source characters covered by this token."""
        return len(self.lexeme)

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation."""
        return self.type in OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation of the token, suitable for JSON output."""
        literal = self.literal
        if isinstance(literal, float) and not math.isfinite(literal):
            # JSON has no infinity; digit runs past float range overflow to inf
            literal = str(literal)
        return {
            "type": self.type.name,
            "lexeme": self.lexeme,
            "literal": literal,
            "line": self.line,
            "column": self.column,
            "offset": self.offset,
            "length": self.length,
        }


def format_literal(literal: Any) -> str:
    """Render a literal value the way Lox prints it."""
    if literal is None:
        return "nil"
    if isinstance(literal, bool):
        return "true" if literal else "false"
    if isinstance(literal, float):
        # Integral numbers print without the trailing ".0"
        if literal.is_integer():
            return str(int(literal))
        return str(literal)
    return f'"{literal}"'


# Reserved words. Matching is exact and case-sensitive.
KEYWORDS = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

# Operators and punctuation, looked up longest spelling first
OPERATORS = {
    # Two characters
    "!=": TokenType.BANG_EQUAL,
    "==": TokenType.EQUAL_EQUAL,
    ">=": TokenType.GREATER_EQUAL,
    "<=": TokenType.LESS_EQUAL,

    # Single character
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "/": TokenType.SLASH,
    "*": TokenType.STAR,
    "!": TokenType.BANG,
    "=": TokenType.EQUAL,
    ">": TokenType.GREATER,
    "<": TokenType.LESS,
}

# Longest operator spelling, used to bound maximal-munch look-ahead
MAX_OPERATOR_LENGTH = max(len(op) for op in OPERATORS)

# Characters that can begin an operator or punctuation token
OPERATOR_START_CHARS = frozenset(op[0] for op in OPERATORS)

KEYWORD_TYPES = frozenset(KEYWORDS.values())
OPERATOR_TYPES = frozenset(OPERATORS.values())
LITERAL_TYPES = frozenset({
    TokenType.STRING, TokenType.NUMBER,
    TokenType.TRUE, TokenType.FALSE, TokenType.NIL,
})
