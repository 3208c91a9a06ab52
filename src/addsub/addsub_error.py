"""Exception classes for AddSub expressions with detailed context."""

from typing import Optional

from addsub.addsub_token import AddSubToken


class AddSubError(Exception):
    """Base exception for AddSub errors with detailed context information."""

    def __init__(
        self,
        message: str,
        context: Optional[str] = None,
        expected: Optional[str] = None,
        received: Optional[str] = None,
        suggestion: Optional[str] = None,
        example: Optional[str] = None,
        position: Optional[int] = None
    ):
        """
        Initialize detailed error.

        Args:
            message: Core error description
            context: Additional context information
            expected: What was expected
            received: What was actually received
            suggestion: Suggestion for fixing the error
            example: Example of correct usage
            position: Character position where error occurred
        """
        self.message = message
        self.context = context
        self.expected = expected
        self.received = received
        self.suggestion = suggestion
        self.example = example
        self.position = position

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]

        if self.position is not None:
            parts.append(f"Position: {self.position}")

        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.context:
            parts.append(f"Context: {self.context}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        if self.example:
            parts.append(f"Example: {self.example}")

        return "\n".join(parts)


class AddSubLexError(AddSubError):
    """Lexing errors.  AddSubInvalidCharacterError is the only kind."""


class AddSubInvalidCharacterError(AddSubLexError):
    """The lexer found a character that is not a digit, '+', '-' or a space."""

    def __init__(self, character: str, position: int):
        self.character = character

        suggestion = f"Remove '{character}' from the expression"
        if character.isspace():
            suggestion = "Only plain spaces may separate numbers and operators"

        elif character.isdigit():
            suggestion = "Only the ASCII digits 0-9 may be used in numbers"

        super().__init__(
            message=f"Invalid character: {character!r}",
            position=position,
            received=f"Character: {character!r} (code {ord(character)})",
            expected="A digit 0-9, '+', '-' or a space",
            example="Valid: 10 + 3 - 5\\nInvalid: 10! + 3",
            suggestion=suggestion
        )


class AddSubParseError(AddSubError):
    """Parsing errors.  Either AddSubUnexpectedEndOfInputError or AddSubInvalidTokenError."""


class AddSubUnexpectedEndOfInputError(AddSubParseError):
    """A number was required but there were no more tokens."""

    def __init__(self) -> None:
        super().__init__(
            message="Unexpected end of input",
            expected="A number",
            example="Correct: 10 + 3\\nIncorrect: 10 +",
            suggestion="Expressions must start with a number and every operator must be followed by a number"
        )


class AddSubInvalidTokenError(AddSubParseError):
    """A token appeared where the grammar does not allow it."""

    def __init__(self, token: AddSubToken):
        self.token = token

        if token.is_number():
            expected = "'+' or '-' between numbers"
            suggestion = f"Add an operator before {token.value}"

        else:
            expected = "A number"
            suggestion = f"Put a number before and after '{token.value}'"

        super().__init__(
            message=f"Invalid token: {token.value}",
            position=token.position,
            received=f"Token: {token.value} (type: {token.type.name})",
            expected=expected,
            example="Correct: 10 + 3 - 5\\nIncorrect: + 3, 10 3",
            suggestion=suggestion
        )
