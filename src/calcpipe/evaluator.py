"""Postfix evaluator.

Walks a postfix token list left to right with a value stack and computes
the result as a float.
"""

import logging
import math
import operator
from typing import Callable

from calcpipe.errors import (
    DivisionByZeroError,
    MalformedNumberError,
    MalformedPostfixError,
    StackUnderflowError,
    UnsupportedIdentifierError,
)
from calcpipe.lexer import NUMBER_CHARS, Token, TokenType

logger = logging.getLogger(__name__)


BINARY_OPERATIONS: dict[TokenType, Callable[[float, float], float]] = {
    TokenType.PLUS: operator.add,
    TokenType.MINUS: operator.sub,
    TokenType.MULTIPLY: operator.mul,
    TokenType.DIVIDE: operator.truediv,
}


def parse_number(text: str) -> float:
    """Parse a number literal made of digits and at most one '.'.

    Literals too large for a float are rejected rather than read as inf.
    """
    if not text or any(char not in NUMBER_CHARS for char in text):
        raise MalformedNumberError(text)
    try:
        value = float(text)
    except ValueError:
        raise MalformedNumberError(text) from None
    if math.isinf(value):
        raise MalformedNumberError(text)
    return value


class Evaluator:
    """Evaluates a postfix token list.

    Usage:
        evaluator = Evaluator(to_postfix(tokenize("1 + 2")))
        result = evaluator.evaluate()
    """

    def __init__(self, postfix: list[Token]):
        self.postfix = postfix

    def evaluate(self) -> float:
        """Evaluate the postfix sequence and return the single result.

        Raises:
            UnsupportedIdentifierError: An identifier was reached.
            MalformedNumberError: A number literal could not be parsed.
            StackUnderflowError: An operator had fewer than two operands.
            DivisionByZeroError: A divisor was exactly zero.
            MalformedPostfixError: Any other structural problem.
        """
        stack: list[float] = []

        for token in self.postfix:
            if token.type == TokenType.IDENTIFIER:
                raise UnsupportedIdentifierError(token.text)

            if token.type == TokenType.NUMBER:
                stack.append(parse_number(token.text))

            elif token.type in BINARY_OPERATIONS:
                if len(stack) < 2:
                    raise StackUnderflowError(token.text)
                b, a = stack.pop(), stack.pop()
                if token.type == TokenType.DIVIDE and b == 0:
                    raise DivisionByZeroError()
                stack.append(BINARY_OPERATIONS[token.type](a, b))

            else:
                raise MalformedPostfixError(f"invalid token in postfix: {token.text}")

        if len(stack) != 1:
            raise MalformedPostfixError(
                f"postfix expression left {len(stack)} values on the stack",
                depth=len(stack),
            )

        logger.debug("Evaluated %d postfix tokens to %r", len(self.postfix), stack[0])
        return stack[0]


def evaluate_postfix(postfix: list[Token]) -> float:
    """Evaluate a postfix token list."""
    return Evaluator(postfix).evaluate()
