"""
Error handling for the Tomahawk scanner.

Lexical errors never stop a scan. The scanner raises a LexerError at the
point of failure, catches it in its main loop, keeps it in its error list
and forwards ``(line, message)`` to an injected reporter.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple


# Signature of the error-reporting collaborator handed to the scanner.
ErrorReporter = Callable[[int, str], None]


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for diagnostics only; tokens themselves carry just a line number.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass
class Diagnostic:
    """A single scanner diagnostic with its location and help text."""
    message: str
    location: SourceLocation
    severity: str  # "error" or "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"{self.severity.upper()}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Exception describing a recoverable lexical error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
        )

    @property
    def line(self) -> int:
        return self.diagnostic.location.line

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)


class DiagnosticCollector:
    """
    Ready-made error reporter that remembers every report it receives.

    Pass an instance wherever an ``ErrorReporter`` is expected::

        collector = DiagnosticCollector()
        tokens = scan(source, reporter=collector)
        if collector.had_error:
            ...
    """

    def __init__(self):
        self.reports: List[Tuple[int, str]] = []

    def __call__(self, line: int, message: str) -> None:
        self.reports.append((line, message))

    @property
    def had_error(self) -> bool:
        return bool(self.reports)

    def reset(self) -> None:
        self.reports.clear()

    def format_reports(self) -> List[str]:
        return [format_report(line, message) for line, message in self.reports]


def format_report(line: int, message: str) -> str:
    """Render a report the way the command-line shell prints it."""
    return f"[line {line}] Error: {message}"


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
}


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character no token starts with."""
    if char.isprintable():
        help_text = f"The character {char!r} is not valid in Tomahawk source code."
    else:
        help_text = f"Non-printable character (U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Unexpected character: {char}",
        location=location,
        code="L001",
        help_text=help_text,
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string literal that runs into end of input."""
    return LexerError(
        message="Unterminated string.",
        location=location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
    )
