"""AddSub package: lex and evaluate integer addition and subtraction expressions."""

# Main API
from addsub.addsub import AddSub

# Exceptions
from addsub.addsub_error import (
    AddSubError, AddSubLexError, AddSubInvalidCharacterError,
    AddSubParseError, AddSubUnexpectedEndOfInputError, AddSubInvalidTokenError
)

# Lower-level components
from addsub.addsub_token import AddSubToken, AddSubTokenType
from addsub.addsub_lexer import AddSubLexer
from addsub.addsub_parser import AddSubParser


__version__ = "0.1.0"

__all__ = [
    # Main API
    "AddSub",

    # Exceptions
    "AddSubError", "AddSubLexError", "AddSubInvalidCharacterError",
    "AddSubParseError", "AddSubUnexpectedEndOfInputError", "AddSubInvalidTokenError",

    # Lower-level components
    "AddSubToken", "AddSubTokenType", "AddSubLexer", "AddSubParser"
]
