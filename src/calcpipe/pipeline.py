"""Expression evaluation entry points.

Runs the three stages in order (tokenize, convert to postfix, evaluate) and
stops at the first failure. Every call owns its own token lists and stacks;
nothing is shared between calls.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable

from calcpipe.converter import to_postfix
from calcpipe.errors import CalculationError, EmptyExpressionError
from calcpipe.evaluator import evaluate_postfix
from calcpipe.lexer import Token, tokenize

logger = logging.getLogger(__name__)


def compile_expression(expression: str) -> list[Token]:
    """Tokenize an expression and convert it to postfix order.

    Raises:
        EmptyExpressionError: The expression holds no tokens.
        CalculationError: Any tokenizer or converter failure.
    """
    tokens = tokenize(expression)
    if not tokens:
        raise EmptyExpressionError()
    logger.debug("Tokenized %r into %d tokens", expression, len(tokens))
    return to_postfix(tokens)


def evaluate_expression(expression: str) -> float:
    """Evaluate an arithmetic expression string.

    This is the main entry point for expression evaluation.

    Args:
        expression: Infix arithmetic using + - * /, parentheses and
            decimal literals. Spaces are ignored.

    Returns:
        The result as a float.

    Raises:
        CalculationError: The subclass identifies which stage failed and why.

    Example:
        evaluate_expression("3 + 5 * (2 - 8)")
        # -27.0
    """
    try:
        postfix = compile_expression(expression)
        return evaluate_postfix(postfix)
    except CalculationError as e:
        logger.debug("Evaluation of %r failed (%s): %s", expression, e.kind.value, e)
        raise


def format_result(value: float) -> str:
    """Render a result the way the command line prints it.

    Integral values drop the fractional part ("-27"); everything else uses
    the shortest round-tripping representation.
    """
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Outcome:
    """The result of evaluating one expression in a batch.

    Attributes:
        expression: The source expression
        value: The result, or None when evaluation failed
        error: The failure, or None when evaluation succeeded
    """

    expression: str
    value: float | None = None
    error: CalculationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def describe(self) -> str:
        if self.error is not None:
            return f"Error: {self.error}"
        return f"Result: {format_result(self.value)}"

    def to_dict(self) -> dict[str, Any]:
        """Non-finite results become strings ("inf", "nan") so the dict stays valid JSON."""
        data: dict[str, Any] = {"expression": self.expression, "ok": self.ok}
        if self.error is not None:
            data["error"] = self.error.to_dict()
        else:
            data["result"] = self.value if math.isfinite(self.value) else format_result(self.value)
        return data


def evaluate_many(expressions: Iterable[str]) -> list[Outcome]:
    """Evaluate each expression independently, collecting failures."""
    outcomes = []
    for expression in expressions:
        try:
            outcomes.append(Outcome(expression, value=evaluate_expression(expression)))
        except CalculationError as e:
            outcomes.append(Outcome(expression, error=e))
    failed = sum(1 for outcome in outcomes if not outcome.ok)
    if failed:
        logger.info("%d of %d expressions failed", failed, len(outcomes))
    return outcomes
