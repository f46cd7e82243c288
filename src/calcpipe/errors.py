"""Error taxonomy for the calculation pipeline.

Every stage raises a subclass of CalculationError. Each subclass carries a
machine-readable ErrorKind so callers can branch on the failure without
parsing the message.
"""

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Stable codes for pipeline failures."""

    EMPTY_EXPRESSION = "empty_expression"
    INVALID_CHARACTER = "invalid_character"
    INVALID_TOKEN = "invalid_token"
    MISMATCHED_PARENTHESES = "mismatched_parentheses"
    UNSUPPORTED_IDENTIFIER = "unsupported_identifier"
    MALFORMED_NUMBER = "malformed_number"
    STACK_UNDERFLOW = "stack_underflow"
    MALFORMED_POSTFIX = "malformed_postfix"
    DIVISION_BY_ZERO = "division_by_zero"


class CalculationError(Exception):
    """Base class for all pipeline errors."""

    kind: ErrorKind

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "message": str(self)}


class EmptyExpressionError(CalculationError):
    """The input produced no tokens."""

    kind = ErrorKind.EMPTY_EXPRESSION

    def __init__(self) -> None:
        super().__init__("empty expression")


class InvalidCharacterError(CalculationError):
    """The tokenizer met a character outside the recognized set."""

    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"invalid character '{character}' at position {position}")


class InvalidTokenError(CalculationError):
    """A token of unrecognized shape reached the converter."""

    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid token: {token}")


class MismatchedParenthesesError(CalculationError):
    kind = ErrorKind.MISMATCHED_PARENTHESES

    def __init__(self) -> None:
        super().__init__("mismatched parentheses")


class UnsupportedIdentifierError(CalculationError):
    """Identifiers are lexically valid but can never be evaluated."""

    kind = ErrorKind.UNSUPPORTED_IDENTIFIER

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"identifiers are not supported in evaluation: {name}")


class MalformedNumberError(CalculationError):
    kind = ErrorKind.MALFORMED_NUMBER

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"malformed number: {text}")


class StackUnderflowError(CalculationError):
    """An operator found fewer than two operands on the stack."""

    kind = ErrorKind.STACK_UNDERFLOW

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"not enough operands for '{operator}'")


class MalformedPostfixError(CalculationError):
    """The postfix pass did not leave exactly one value on the stack."""

    kind = ErrorKind.MALFORMED_POSTFIX

    def __init__(self, message: str = "invalid postfix expression", depth: int | None = None):
        self.depth = depth
        super().__init__(message)


class DivisionByZeroError(CalculationError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self) -> None:
        super().__init__("division by zero")
