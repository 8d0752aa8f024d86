"""
Tomahawk Lexer Package

Hand-written scanner for the Tomahawk language. Converts a source string
into a list of tokens for the parser.

Key Features:
- Single pass with one character of lookahead (two for decimal points)
- Keyword table shared read-only by every scanner
- Line tracking for diagnostics, including multi-line strings
- Error recovery: bad input is reported and skipped, never fatal
"""

from .tokens import Token, TokenType, KEYWORDS
from .scanner import Scanner, scan, tokenize_string, tokenize_file
from .errors import (
    LexerError, Diagnostic, SourceLocation, DiagnosticCollector, ErrorReporter
)

__all__ = [
    "Scanner",
    "scan",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenType",
    "KEYWORDS",
    "LexerError",
    "Diagnostic",
    "SourceLocation",
    "DiagnosticCollector",
    "ErrorReporter",
]
