"""Lexer for AddSub expressions."""

from typing import List, Optional

from addsub.addsub_error import AddSubInvalidCharacterError
from addsub.addsub_token import AddSubToken, AddSubTokenType


class AddSubLexer:
    """
    Lexes an AddSub expression into tokens.

    A lexer owns a single expression and a cursor into it.  Create a new lexer for each
    expression; instances are not reusable and must not be shared between threads.
    """

    _DIGITS = "0123456789"

    def __init__(self, expression: str):
        """
        Initialize lexer with the expression to lex.

        Args:
            expression: The expression string to lex
        """
        self.expression = expression
        self.position = 0

    def peek(self) -> Optional[str]:
        """Return the character at the cursor without consuming it, or None at end of input."""
        if self.position >= len(self.expression):
            return None

        return self.expression[self.position]

    def advance(self) -> None:
        """Move the cursor on by one character.  Callers must peek first."""
        assert self.position < len(self.expression), "Cannot advance past end of input"
        self.position += 1

    def scan_number(self) -> int:
        """
        Scan a run of decimal digits starting at the cursor.

        Returns:
            The value of the digits scanned, or 0 if the cursor was not on a digit
        """
        value = 0

        while True:
            next_char = self.peek()
            if next_char is None or next_char not in self._DIGITS:
                return value

            value = 10 * value + (ord(next_char) - ord('0'))
            self.advance()

    def lex(self) -> List[AddSubToken]:
        """
        Lex the expression.

        Returns:
            List of tokens, empty if the expression is empty or only contains spaces

        Raises:
            AddSubInvalidCharacterError: If the expression contains a character that is not
                a digit, '+', '-' or a space
        """
        tokens: List[AddSubToken] = []

        while True:
            next_char = self.peek()
            if next_char is None:
                return tokens

            start = self.position

            if next_char in self._DIGITS:
                tokens.append(AddSubToken(AddSubTokenType.NUMBER, self.scan_number(), start))
                continue

            if next_char == '+':
                tokens.append(AddSubToken(AddSubTokenType.PLUS, '+', start))
                self.advance()
                continue

            if next_char == '-':
                tokens.append(AddSubToken(AddSubTokenType.MINUS, '-', start))
                self.advance()
                continue

            if next_char == ' ':
                self.advance()
                continue

            raise AddSubInvalidCharacterError(next_char, start)
