"""
Tomahawk Language Package

Front end of the Tomahawk scripting language.

Architecture:
    tomahawk/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # Command-line shell (file and prompt modes)

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, scan

__all__ = [
    # Core API
    "Scanner",
    "Token",
    "TokenType",
    "scan",

    # Version info
    "__version__",
    "__license__",
]
