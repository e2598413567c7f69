"""
Error handling for the Lox scanner.

Provides error reporting with source location information and
recovery hints. Lexical errors are collected by the lexer rather
than aborting the scan; they are only raised to callers by the
strict convenience helpers.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation, KEYWORDS


@dataclass
class Diagnostic:
    """Base record for lexer diagnostics (errors, warnings)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class ErrorKind(Enum):
    """Categories of recoverable lexical errors, valued by diagnostic code."""
    UNEXPECTED_CHARACTER = "L001"
    UNTERMINATED_STRING = "L002"
    UNTERMINATED_COMMENT = "L003"

    @property
    def code(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return ERROR_CODES[self.value]


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string",
    "L003": "Unterminated block comment",
    "W001": "Identifier resembles a keyword",
}


class LexerError(Exception):
    """
    A recoverable lexical error.

    Raised inside the lexer's token handlers and collected by the main
    scanning loop, so a single scan reports every error it meets.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        location: SourceLocation,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=kind.code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    def report(self) -> str:
        """One-line form used by the command line front end."""
        return f"{self.message} at ({self.line}:{self.column})"

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LexerError):
            return NotImplemented
        return (self.kind, self.message, self.location) == (other.kind, other.message, other.location)

    def __hash__(self) -> int:
        return hash((self.kind, self.message, self.location))

    def __repr__(self) -> str:
        return f"LexerError({self.kind.name}, {self.message!r}, {self.location!r})"


class LexerWarning:
    """
    Represents a lexer warning that doesn't affect the scan result.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.message = message
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def report(self) -> str:
        return f"warning: {self.message} at ({self.location.line}:{self.location.column})"

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"LexerWarning({self.message!r}, {self.location!r})"


class ErrorRecovery:
    """Hints offered alongside diagnostics."""

    @staticmethod
    def suggest_keyword_case(word: str) -> Optional[str]:
        """Return the keyword an identifier matches case-insensitively, if any."""
        lowered = word.lower()
        if lowered != word and lowered in KEYWORDS:
            return lowered
        return None

    @staticmethod
    def describe_character(char: str) -> str:
        if char.isprintable():
            return f"'{char}'"
        return f"U+{ord(char):04X}"


def create_unexpected_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that cannot start any token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        ErrorKind.UNEXPECTED_CHARACTER,
        message=f"Unexpected character {ErrorRecovery.describe_character(char)}",
        location=location,
        help_text=help_text,
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string literal that reaches end of input."""
    return LexerError(
        ErrorKind.UNTERMINATED_STRING,
        message="Unterminated string",
        location=location,
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote'],
    )


def create_unterminated_comment_error(location: SourceLocation) -> LexerError:
    """Create an error for a block comment that reaches end of input."""
    return LexerError(
        ErrorKind.UNTERMINATED_COMMENT,
        message="Unterminated block comment",
        location=location,
        help_text="Block comments must be closed with */ and do not nest.",
        suggestions=["Add a closing */"],
    )


def create_keyword_case_warning(word: str, keyword: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for an identifier spelled like a keyword in another case."""
    return LexerWarning(
        message=f"'{word}' is an identifier, not the keyword '{keyword}'",
        location=location,
        code="W001",
        help_text="Keywords are case-sensitive.",
        suggestions=[f"Did you mean '{keyword}'?"],
    )
