"""Token types and token representation for AddSub expressions."""

from dataclasses import dataclass, field
from enum import Enum


class AddSubTokenType(Enum):
    """Token types for AddSub expressions."""
    NUMBER = "NUMBER"
    PLUS = "+"
    MINUS = "-"


@dataclass(frozen=True)
class AddSubToken:
    """
    Represents a single token in an AddSub expression.

    The position is the character index of the start of the token in the source text.  It is
    only there for error reporting so it takes no part in equality or hashing.
    """
    type: AddSubTokenType
    value: int | str
    position: int = field(default=0, compare=False)

    @classmethod
    def number(cls, value: int, position: int = 0) -> 'AddSubToken':
        """Create a number token."""
        return cls(AddSubTokenType.NUMBER, value, position)

    @classmethod
    def plus(cls, position: int = 0) -> 'AddSubToken':
        """Create a '+' token."""
        return cls(AddSubTokenType.PLUS, '+', position)

    @classmethod
    def minus(cls, position: int = 0) -> 'AddSubToken':
        """Create a '-' token."""
        return cls(AddSubTokenType.MINUS, '-', position)

    def is_number(self) -> bool:
        return self.type == AddSubTokenType.NUMBER

    def is_operator(self) -> bool:
        return self.type in (AddSubTokenType.PLUS, AddSubTokenType.MINUS)

    def __str__(self) -> str:
        if self.type == AddSubTokenType.NUMBER:
            return f"Number: {self.value}"

        return f"Symbol: {self.value}"

    def __repr__(self) -> str:
        return f"AddSubToken({self.type.name}, {self.value!r}, pos={self.position})"
