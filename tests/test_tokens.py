"""
Tests for token definitions and diagnostics.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from tomahawk.lexer.tokens import Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS
from tomahawk.lexer.errors import (
    Diagnostic, DiagnosticCollector, SourceLocation, ERROR_CODES,
    create_invalid_character_error, create_unterminated_string_error, format_report
)


class TestToken(unittest.TestCase):

    def test_token_is_immutable(self):
        token = Token(TokenType.NUMBER, "1", 1.0, 1)
        with self.assertRaises(AttributeError):
            token.line = 2

    def test_str_and_repr(self):
        number = Token(TokenType.NUMBER, "2.5", 2.5, 4)
        self.assertEqual(str(number), "NUMBER('2.5' -> 2.5)")
        self.assertEqual(repr(number), "Token(NUMBER, '2.5', 2.5, 4)")
        self.assertEqual(str(Token(TokenType.SEMICOLON, ";", None, 1)), "SEMICOLON(';')")

    def test_predicates(self):
        self.assertTrue(Token(TokenType.STRING, '"a"', "a", 1).is_literal)
        self.assertFalse(Token(TokenType.IDENTIFIER, "a", None, 1).is_literal)
        self.assertTrue(Token(TokenType.WHILE, "while", None, 1).is_keyword)
        self.assertFalse(Token(TokenType.IDENTIFIER, "loop", None, 1).is_keyword)

    def test_to_dict(self):
        token = Token(TokenType.STRING, '"hi"', "hi", 3)
        self.assertEqual(token.to_dict(), {
            "type": "STRING", "lexeme": '"hi"', "literal": "hi", "line": 3,
        })


class TestTables(unittest.TestCase):

    def test_keyword_table_is_read_only(self):
        with self.assertRaises(TypeError):
            KEYWORDS["loop"] = TokenType.WHILE
        self.assertNotIn("loop", KEYWORDS)

    def test_keyword_table_contents(self):
        self.assertEqual(len(KEYWORDS), 16)
        self.assertIs(KEYWORDS["fun"], TokenType.FUN)
        self.assertIs(KEYWORDS["nil"], TokenType.NIL)

    def test_single_char_table(self):
        self.assertEqual(set(SINGLE_CHAR_TOKENS), set("(){},.-+;*"))


class TestDiagnostics(unittest.TestCase):

    def setUp(self):
        self.location = SourceLocation("main.tk", 3, 7, 20)

    def test_location_str(self):
        self.assertEqual(str(self.location), "main.tk:3:7")

    def test_invalid_character_error(self):
        error = create_invalid_character_error("@", self.location)
        self.assertEqual(error.message, "Unexpected character: @")
        self.assertEqual(error.line, 3)
        self.assertEqual(error.diagnostic.code, "L001")
        self.assertIn("L001", ERROR_CODES)

    def test_non_printable_character_help(self):
        error = create_invalid_character_error("\x07", self.location)
        self.assertIn("U+0007", error.diagnostic.help_text)

    def test_unterminated_string_error_rendering(self):
        error = create_unterminated_string_error(self.location)
        text = str(error)
        self.assertTrue(text.startswith("ERROR: Unterminated string.\n"))
        self.assertIn("  --> main.tk:3:7\n", text)
        self.assertIn("  help: ", text)

    def test_diagnostic_without_help(self):
        diagnostic = Diagnostic("odd", self.location, "warning")
        self.assertEqual(str(diagnostic), "WARNING: odd\n  --> main.tk:3:7\n")

    def test_collector(self):
        collector = DiagnosticCollector()
        self.assertFalse(collector.had_error)
        collector(2, "Unexpected character: ~")
        self.assertTrue(collector.had_error)
        self.assertEqual(collector.format_reports(),
                         ["[line 2] Error: Unexpected character: ~"])
        collector.reset()
        self.assertFalse(collector.had_error)

    def test_format_report(self):
        self.assertEqual(format_report(9, "Unterminated string."),
                         "[line 9] Error: Unterminated string.")


if __name__ == "__main__":
    unittest.main(verbosity=2)
