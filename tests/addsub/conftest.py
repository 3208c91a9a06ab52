"""Shared fixtures and utilities for AddSub tests."""

import operator
from typing import List, Tuple

import pytest

from addsub import AddSub, AddSubToken


@pytest.fixture
def addsub():
    """Create a fresh AddSub instance for each test."""
    return AddSub()


class AddSubTestHelpers:
    """Helper utilities for AddSub testing."""

    OPERATORS = {'+': operator.add, '-': operator.sub}

    @staticmethod
    def tokens_of(*items) -> List[AddSubToken]:
        """Build a token list from ints and '+'/'-' strings."""
        tokens = []
        for item in items:
            if item == '+':
                tokens.append(AddSubToken.plus())

            elif item == '-':
                tokens.append(AddSubToken.minus())

            else:
                tokens.append(AddSubToken.number(item))

        return tokens

    @staticmethod
    def render(first: int, rest: List[Tuple[str, int]]) -> str:
        """Render a number and (operator, number) pairs as text with single spaces."""
        parts = [str(first)]
        for op, number in rest:
            parts.append(op)
            parts.append(str(number))

        return " ".join(parts)

    @staticmethod
    def fold(first: int, rest: List[Tuple[str, int]]) -> int:
        """Left-to-right fold of a number and (operator, number) pairs."""
        value = first
        for op, number in rest:
            value = AddSubTestHelpers.OPERATORS[op](value, number)

        return value


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return AddSubTestHelpers
