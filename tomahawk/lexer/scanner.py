"""
Tomahawk scanner - turns source text into a list of tokens

Single pass, one character of lookahead (two for the decimal point).
Whitespace and // comments produce no tokens. Bad characters and
unterminated strings are reported and skipped; a scan always finishes
with exactly one EOF token.
"""

from typing import List, Optional, Union

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, ONE_OR_TWO_CHAR_TOKENS
)
from .errors import (
    ErrorReporter, LexerError, SourceLocation, create_invalid_character_error,
    create_unterminated_string_error
)


class Scanner:
    """
    Tomahawk lexical analyzer.

    Walks the source with two cursors: ``start`` marks the first character
    of the lexeme being scanned and ``current`` the next unread character.
    ``line`` counts consumed newlines.
    """

    def __init__(self, source: str, filename: str = "<script>",
                 reporter: Optional[ErrorReporter] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Source code string
            filename: Name of source file for diagnostics
            reporter: Called with (line, message) for every lexical error
        """
        self.source = source
        self.filename = filename
        self.reporter = reporter
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens ending with a single EOF token
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens = []
        self.errors = []

        while not self._is_at_end():
            self.start = self.current
            self.start_line = self.line
            try:
                self._scan_token()
            except LexerError as e:
                self._record(e)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def _scan_token(self):
        """Consume one lexeme, adding at most one token."""
        c = self._advance()

        if c in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[c])
        elif c in ONE_OR_TWO_CHAR_TOKENS:
            single, double = ONE_OR_TWO_CHAR_TOKENS[c]
            self._add_token(double if self._advance_on_match('=') else single)
        elif c == '/':
            if self._advance_on_match('/'):
                self._skip_rest_of_line()
            else:
                self._add_token(TokenType.SLASH)
        elif c in (' ', '\r', '\t'):
            pass
        elif c == '\n':
            self.line += 1
        elif c == '"':
            self._string()
        elif is_digit(c):
            self._number()
        elif is_alpha(c):
            self._identifier()
        else:
            raise create_invalid_character_error(c, self._location(self.start))

    def _string(self):
        """Scan a string literal; the opening quote is already consumed."""
        while self._peek() != '"' and not self._is_at_end():
            # Multi-line strings are allowed
            if self._peek() == '\n':
                self.line += 1
            self._advance()

        if self._is_at_end():
            raise create_unterminated_string_error(self._location(self.current))

        self._advance()  # Closing quote

        # Literal is the text between the quotes, no escape processing
        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self):
        """Scan a decimal number, with an optional fractional part."""
        while is_digit(self._peek()):
            self._advance()

        # A trailing '.' not followed by a digit belongs to the next token
        if self._peek() == '.' and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _identifier(self):
        """Scan an identifier, then check it against the keyword table."""
        while is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _skip_rest_of_line(self):
        # The newline itself is left for the main loop to count
        while self._peek() != '\n' and not self._is_at_end():
            self._advance()

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        """Consume and return the next character."""
        c = self.source[self.current]
        self.current += 1
        return c

    def _advance_on_match(self, expected: str) -> bool:
        """Consume the next character only if it equals ``expected``."""
        if self._is_at_end():
            return False
        if self.source[self.current] != expected:
            return False

        self.current += 1
        return True

    def _peek(self) -> str:
        """Look at the next character without consuming it."""
        if self._is_at_end():
            return '\0'
        return self.source[self.current]

    def _peek_next(self) -> str:
        """Look two characters ahead without consuming anything."""
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def _add_token(self, token_type: TokenType, literal: Union[str, float, None] = None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.start_line))

    def _location(self, offset: int) -> SourceLocation:
        column = offset - self.source.rfind('\n', 0, offset)
        return SourceLocation(self.filename, self.line, column, offset)

    def _record(self, error: LexerError):
        self.errors.append(error)
        if self.reporter is not None:
            self.reporter(error.line, error.message)

    def has_errors(self) -> bool:
        """Check if the scanner encountered any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[LexerError]:
        return list(self.errors)


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_alpha(c: str) -> bool:
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z' or c == '_'


def is_alphanumeric(c: str) -> bool:
    return is_alpha(c) or is_digit(c)


def scan(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """
    Scan ``source`` into tokens.

    Lexical errors go to ``reporter`` (if given) and never abort the scan.
    """
    return Scanner(source, reporter=reporter).scan_tokens()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string strictly.

    Args:
        source: Source code string
        filename: Filename for diagnostics

    Returns:
        List of tokens

    Raises:
        LexerError: The first error found, after the whole source was scanned
    """
    scanner = Scanner(source, filename)
    tokens = scanner.scan_tokens()

    if scanner.has_errors():
        raise scanner.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file strictly.

    Raises:
        LexerError: If the file contains lexical errors
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
