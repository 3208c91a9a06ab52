"""Main AddSub class."""

import logging
from typing import List

from addsub.addsub_lexer import AddSubLexer
from addsub.addsub_parser import AddSubParser
from addsub.addsub_token import AddSubToken


class AddSub:
    """
    Evaluator for expressions made of non-negative integers, '+', '-' and spaces.

    Each call lexes and parses with a fresh lexer and parser, so one AddSub instance
    can be used for any number of evaluations.  Errors are raised to the caller.
    """

    def __init__(self) -> None:
        """Initialize the evaluator."""
        self._logger = logging.getLogger("AddSub")

    def lex(self, expression: str) -> List[AddSubToken]:
        """
        Lex an expression into tokens.

        Args:
            expression: Expression string to lex

        Returns:
            List of tokens

        Raises:
            AddSubLexError: If the expression contains an invalid character
        """
        tokens = AddSubLexer(expression).lex()
        self._logger.debug("lexed %r: %s", expression, tokens)
        return tokens

    def parse(self, tokens: List[AddSubToken]) -> int:
        """
        Parse tokens into a result.

        Args:
            tokens: Tokens to parse

        Returns:
            The integer result

        Raises:
            AddSubParseError: If the tokens do not form a valid expression
        """
        return AddSubParser(tokens).parse()

    def evaluate(self, expression: str) -> int:
        """
        Evaluate an expression.

        Args:
            expression: Expression string to evaluate

        Returns:
            The integer result

        Raises:
            AddSubLexError: If lexing fails
            AddSubParseError: If parsing fails
        """
        tokens = self.lex(expression)
        result = self.parse(tokens)
        self._logger.debug("evaluated %r: %d", expression, result)
        return result
