"""Arithmetic expression evaluation for calcpipe.

This package provides:
- Lexer: Tokenizes expression strings
- Converter: Reorders infix tokens into postfix order (shunting-yard)
- Evaluator: Computes the value of a postfix token list
- evaluate_expression: Runs all three stages on a string
"""

from calcpipe.converter import PRECEDENCE, Converter, format_tokens, precedence, to_postfix
from calcpipe.errors import (
    CalculationError,
    DivisionByZeroError,
    EmptyExpressionError,
    ErrorKind,
    InvalidCharacterError,
    InvalidTokenError,
    MalformedNumberError,
    MalformedPostfixError,
    MismatchedParenthesesError,
    StackUnderflowError,
    UnsupportedIdentifierError,
)
from calcpipe.evaluator import Evaluator, evaluate_postfix
from calcpipe.lexer import Lexer, Token, TokenType, tokenize
from calcpipe.pipeline import (
    Outcome,
    compile_expression,
    evaluate_expression,
    evaluate_many,
    format_result,
)

__all__ = [
    # Pipeline
    "Outcome",
    "compile_expression",
    "evaluate_expression",
    "evaluate_many",
    "format_result",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    # Converter
    "PRECEDENCE",
    "Converter",
    "format_tokens",
    "precedence",
    "to_postfix",
    # Evaluator
    "Evaluator",
    "evaluate_postfix",
    # Errors
    "CalculationError",
    "DivisionByZeroError",
    "EmptyExpressionError",
    "ErrorKind",
    "InvalidCharacterError",
    "InvalidTokenError",
    "MalformedNumberError",
    "MalformedPostfixError",
    "MismatchedParenthesesError",
    "StackUnderflowError",
    "UnsupportedIdentifierError",
]
