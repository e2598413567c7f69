"""
Lox Lexer - turns source text into tokens

Single linear pass over the source. Each step classifies the next
character and hands it to the handler registered for that class.
Handlers raise LexerError for bad input; the main loop collects the
error and keeps going, so one scan reports every lexical problem.
"""

from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Union
from dataclasses import dataclass, field

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, OPERATORS,
    MAX_OPERATOR_LENGTH, OPERATOR_START_CHARS
)
from .errors import (
    LexerError, LexerWarning, ErrorRecovery, create_unexpected_character_error,
    create_unterminated_string_error, create_unterminated_comment_error,
    create_keyword_case_warning
)
from ..config import DEFAULT_FILENAME, SOURCE_ENCODING
from ..utils.logging import get_logger

logger = get_logger(__name__)


class CharClass(Enum):
    """Lexical class of a single source character."""
    LETTER = auto()
    DIGIT = auto()
    QUOTE = auto()
    OPERATOR = auto()
    WHITESPACE = auto()
    OTHER = auto()


WHITESPACE_CHARS = frozenset(" \r\t\n")


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_alpha(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"


def is_alphanumeric(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


def classify(char: str) -> CharClass:
    """Classify a character by the kind of token it can start."""
    if is_alpha(char):
        return CharClass.LETTER
    if is_digit(char):
        return CharClass.DIGIT
    if char == '"':
        return CharClass.QUOTE
    if char in OPERATOR_START_CHARS:
        return CharClass.OPERATOR
    if char in WHITESPACE_CHARS:
        return CharClass.WHITESPACE
    return CharClass.OTHER


@dataclass
class ScanResult:
    """Outcome of scanning one source unit."""
    tokens: List[Token]
    errors: List[LexerError] = field(default_factory=list)
    warnings: List[LexerWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class Lexer:
    """
    Lox lexical analyzer.

    Converts source text into a list of tokens terminated by a single
    EOF token, collecting lexical errors along the way.
    """

    def __init__(self, source: str, filename: str = DEFAULT_FILENAME,
                 include_comments: bool = False):
        """
        Initialize the lexer with source code.

        Args:
            source: Complete source text of one compilation unit
            filename: Name of source file for error reporting
            include_comments: Emit COMMENT tokens instead of discarding comments

        Raises:
            TypeError: If source is missing or not a string
        """
        if source is None:
            raise TypeError("Lexer requires source text, got None")
        if not isinstance(source, str):
            raise TypeError(f"Lexer requires source text as str, got {type(source).__name__}")

        self.source = source
        self.filename = filename
        self.include_comments = include_comments
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []
        self.warnings: List[LexerWarning] = []

        self._dispatch: Dict[CharClass, Callable[[SourceLocation], Optional[Token]]] = {
            CharClass.LETTER: self._tokenize_identifier_or_keyword,
            CharClass.DIGIT: self._tokenize_number,
            CharClass.QUOTE: self._tokenize_string,
            CharClass.OPERATOR: self._tokenize_operator,
            CharClass.WHITESPACE: self._skip_whitespace,
            CharClass.OTHER: self._unexpected_character,
        }

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens ending with exactly one EOF token. Errors and
            warnings found on the way are left on ``errors`` and ``warnings``.
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []
        self.errors = []
        self.warnings = []

        while not self._at_end():
            start = self._location()
            handler = self._dispatch[classify(self._current())]
            try:
                token = handler(start)
            except LexerError as e:
                # Handlers consume what they covered before raising
                self.errors.append(e)
                continue
            if token is not None:
                self.tokens.append(token)

        self.tokens.append(Token(TokenType.EOF, "", None, self._location()))

        logger.debug("scanned %s: %d tokens, %d errors, %d warnings",
                     self.filename, len(self.tokens), len(self.errors), len(self.warnings))
        return self.tokens

    def scan(self) -> ScanResult:
        """Tokenize and return tokens together with diagnostics."""
        tokens = self.tokenize()
        return ScanResult(tokens=tokens, errors=list(self.errors), warnings=list(self.warnings))

    # ------------------------------------------------------------------
    # Token handlers
    # ------------------------------------------------------------------

    def _skip_whitespace(self, start: SourceLocation) -> None:
        while not self._at_end() and self._current() in WHITESPACE_CHARS:
            self._advance()
        return None

    def _unexpected_character(self, start: SourceLocation) -> None:
        char = self._advance()
        raise create_unexpected_character_error(char, start)

    def _tokenize_operator(self, start: SourceLocation) -> Optional[Token]:
        """Operators and punctuation, plus comments (which also start with '/')."""
        if self._current() == "/":
            if self._peek() == "/":
                return self._line_comment(start)
            if self._peek() == "*":
                return self._block_comment(start)

        # Maximal munch: longest spelling first
        for op_len in range(MAX_OPERATOR_LENGTH, 0, -1):
            candidate = self.source[self.pos:self.pos + op_len]
            if len(candidate) == op_len and candidate in OPERATORS:
                self._advance_by(op_len)
                return Token(OPERATORS[candidate], candidate, None, start)

        # OPERATOR_START_CHARS is derived from OPERATORS, so a one-character match always exists
        raise AssertionError(f"no operator matches {self._current()!r}")

    def _line_comment(self, start: SourceLocation) -> Optional[Token]:
        while not self._at_end() and self._current() != "\n":
            self._advance()
        return self._comment_token(start)

    def _block_comment(self, start: SourceLocation) -> Optional[Token]:
        self._advance_by(2)  # Skip /*
        while not self._at_end():
            if self._current() == "*" and self._peek() == "/":
                self._advance_by(2)
                return self._comment_token(start)
            self._advance()
        raise create_unterminated_comment_error(start)

    def _comment_token(self, start: SourceLocation) -> Optional[Token]:
        if not self.include_comments:
            return None
        return Token(TokenType.COMMENT, self.source[start.offset:self.pos], None, start)

    def _tokenize_string(self, start: SourceLocation) -> Token:
        """Strings run to the next quote, may span lines and have no escapes."""
        self._advance()  # Skip opening quote

        while not self._at_end() and self._current() != '"':
            self._advance()

        if self._at_end():
            raise create_unterminated_string_error(start)

        self._advance()  # Skip closing quote

        lexeme = self.source[start.offset:self.pos]
        return Token(TokenType.STRING, lexeme, lexeme[1:-1], start)

    def _tokenize_number(self, start: SourceLocation) -> Token:
        """
        Digits with an optional fraction. The '.' only belongs to the
        number when a digit follows it, so "1." scans as NUMBER then DOT.
        """
        while not self._at_end() and is_digit(self._current()):
            self._advance()

        if self._current() == "." and is_digit(self._peek()):
            self._advance()  # Consume the '.'
            while not self._at_end() and is_digit(self._current()):
                self._advance()

        lexeme = self.source[start.offset:self.pos]
        return Token(TokenType.NUMBER, lexeme, float(lexeme), start)

    def _tokenize_identifier_or_keyword(self, start: SourceLocation) -> Token:
        while not self._at_end() and is_alphanumeric(self._current()):
            self._advance()

        lexeme = self.source[start.offset:self.pos]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)

        literal = None
        if token_type in (TokenType.TRUE, TokenType.FALSE):
            literal = token_type == TokenType.TRUE
        elif token_type == TokenType.IDENTIFIER:
            keyword = ErrorRecovery.suggest_keyword_case(lexeme)
            if keyword is not None:
                self.warnings.append(create_keyword_case_warning(lexeme, keyword, start))

        return Token(token_type, lexeme, literal, start)

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _current(self) -> str:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return '\0'

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'

    def _advance(self) -> str:
        """Consume one character, updating line/column."""
        char = self.source[self.pos]
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        return char

    def _advance_by(self, count: int):
        for _ in range(count):
            if not self._at_end():
                self._advance()

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if lexer encountered any warnings."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[Union[LexerError, LexerWarning]]:
        """Get all diagnostics (errors and warnings), ordered by position."""
        return sorted(self.errors + self.warnings, key=lambda d: d.location.offset)


def scan_source(source: str, filename: str = DEFAULT_FILENAME,
                include_comments: bool = False) -> ScanResult:
    """Scan a source string, returning tokens and diagnostics."""
    return Lexer(source, filename, include_comments=include_comments).scan()


def tokenize_string(source: str, filename: str = DEFAULT_FILENAME) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Raises:
        LexerError: The first error encountered, if any
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding=SOURCE_ENCODING) as f:
        source = f.read()

    return tokenize_string(source, str(filepath))
