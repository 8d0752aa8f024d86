"""
Command-line shell for the Tomahawk scanner.

Scans a script file, or each line typed at an interactive prompt, and
prints the resulting tokens. Lexical errors are written to stderr.
"""

import argparse
import json
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer.errors import DiagnosticCollector
from .lexer.scanner import Scanner
from .lexer.tokens import Token

# sysexits.h
EX_OK = 0
EX_DATAERR = 65
EX_NOINPUT = 66

PROMPT = "> "


def print_tokens(tokens: List[Token], as_json: bool = False, out: Optional[TextIO] = None):
    out = out or sys.stdout
    if as_json:
        print(json.dumps([token.to_dict() for token in tokens], indent=2), file=out)
        return

    for token in tokens:
        print(token, file=out)


def report_errors(collector: DiagnosticCollector, err: Optional[TextIO] = None):
    err = err or sys.stderr
    for line in collector.format_reports():
        print(line, file=err)


def run_source(source: str, filename: str, as_json: bool = False) -> bool:
    """Scan one chunk of source; return True when it had lexical errors."""
    collector = DiagnosticCollector()
    tokens = Scanner(source, filename, reporter=collector).scan_tokens()
    report_errors(collector)
    print_tokens(tokens, as_json)
    return collector.had_error


def run_file(path: str, as_json: bool = False) -> int:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()
    except OSError as e:
        print(f"Cannot read {path}: {e.strerror}", file=sys.stderr)
        return EX_NOINPUT

    if run_source(source, path, as_json):
        return EX_DATAERR
    return EX_OK


def run_prompt(as_json: bool = False, stdin: Optional[TextIO] = None) -> int:
    stdin = stdin or sys.stdin
    # Each line is scanned on its own, so an error on one line does not
    # affect the next
    while True:
        print(PROMPT, end="", flush=True)
        line = stdin.readline()
        if not line:
            print()
            return EX_OK
        run_source(line, "<stdin>", as_json)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the tomahawk command"""

    parser = argparse.ArgumentParser(
        prog="tomahawk",
        description="Tomahawk scanner: print the tokens of a script",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    tomahawk script.tk            # Print tokens of a file
    tomahawk --json script.tk     # Same, as JSON
    tomahawk                      # Interactive prompt
        """
    )
    parser.add_argument('script', nargs='?',
                        help='Script to scan (omit for an interactive prompt)')
    parser.add_argument('--json', action='store_true',
                        help='Output tokens in JSON format')
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    if args.script is None:
        return run_prompt(args.json)
    return run_file(args.script, args.json)


if __name__ == "__main__":
    sys.exit(main())
