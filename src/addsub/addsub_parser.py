"""Parser for AddSub token sequences."""

from typing import List, Optional

from addsub.addsub_error import AddSubInvalidTokenError, AddSubUnexpectedEndOfInputError
from addsub.addsub_token import AddSubToken, AddSubTokenType


class AddSubParser:
    """
    Folds a sequence of tokens into a single integer.

    Numbers are combined left to right with no precedence, so "10 + 5 - 3 - 1" is
    ((10 + 5) - 3) - 1.  No syntax tree is built; the running value is updated as each
    operator and its operand are consumed.
    """

    def __init__(self, tokens: List[AddSubToken]):
        """
        Initialize parser with tokens.

        Args:
            tokens: List of tokens to parse, usually from AddSubLexer.lex()
        """
        self.tokens = tokens
        self.pos = 0

    def next_token(self) -> Optional[AddSubToken]:
        """Consume and return the next token, or None if all tokens have been consumed."""
        if self.pos >= len(self.tokens):
            return None

        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def parse_number(self) -> int:
        """
        Consume a token that must be a number.

        Returns:
            The number's value

        Raises:
            AddSubUnexpectedEndOfInputError: If there are no tokens left
            AddSubInvalidTokenError: If the next token is not a number
        """
        token = self.next_token()
        if token is None:
            raise AddSubUnexpectedEndOfInputError()

        if token.type != AddSubTokenType.NUMBER:
            raise AddSubInvalidTokenError(token)

        assert isinstance(token.value, int), "Number token must carry an int"
        return token.value

    def parse(self) -> int:
        """
        Parse the tokens into a result.

        Returns:
            The result of adding and subtracting the numbers from left to right

        Raises:
            AddSubUnexpectedEndOfInputError: If a number is needed but the tokens are exhausted
            AddSubInvalidTokenError: If a token appears in the wrong place
        """
        value = self.parse_number()

        while True:
            token = self.next_token()
            if token is None:
                return value

            if token.type == AddSubTokenType.PLUS:
                value += self.parse_number()
                continue

            if token.type == AddSubTokenType.MINUS:
                value -= self.parse_number()
                continue

            # Two numbers in a row
            raise AddSubInvalidTokenError(token)
