"""Tokenizer for arithmetic expressions.

Converts an expression string into an ordered list of tokens for the
converter.

Token types:
- Literals: NUMBER (digits and '.'), IDENTIFIER (lowercase letter)
- Operators: PLUS, MINUS, MULTIPLY, DIVIDE
- Punctuation: LPAREN, RPAREN

Letters, digits and '.' are accumulated into one pending run and classified
by the run's first character. Whether the run is well formed ("a1", "1.2.3")
is decided later by the converter and evaluator, not here.
"""

import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from calcpipe.errors import InvalidCharacterError


class TokenType(Enum):
    """Types of tokens in the expression language."""

    # Literals
    NUMBER = auto()
    IDENTIFIER = auto()

    # Arithmetic operators
    PLUS = auto()        # +
    MINUS = auto()       # -
    MULTIPLY = auto()    # *
    DIVIDE = auto()      # /

    # Punctuation
    LPAREN = auto()      # (
    RPAREN = auto()      # )


OPERATOR_SYMBOLS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
}

PUNCTUATION = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

OPERATOR_TYPES = frozenset(OPERATOR_SYMBOLS.values())

IDENTIFIER_CHARS = frozenset(string.ascii_lowercase)
NUMBER_CHARS = frozenset(string.digits + ".")

_FIXED_TEXT = {token_type: symbol for symbol, token_type in {**OPERATOR_SYMBOLS, **PUNCTUATION}.items()}


@dataclass(frozen=True)
class Token:
    """A single token from the lexer.

    Attributes:
        type: The token type
        text: The literal source text of the token
    """

    type: TokenType
    text: str

    def __post_init__(self) -> None:
        expected = _FIXED_TEXT.get(self.type)
        if expected is not None and self.text != expected:
            raise ValueError(f"{self.type.name} token must have text {expected!r}, got {self.text!r}")

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.text!r})"

    def __str__(self) -> str:
        return self.text

    @property
    def is_operator(self) -> bool:
        return self.type in OPERATOR_TYPES

    @property
    def is_operand(self) -> bool:
        return self.type in (TokenType.NUMBER, TokenType.IDENTIFIER)


class Lexer:
    """Tokenizer for arithmetic expressions.

    Usage:
        lexer = Lexer("3 + 5 * (2 - 8)")
        for token in lexer:
            print(token)
    """

    def __init__(self, source: str):
        self.source = source

    def __iter__(self) -> Iterator[Token]:
        """Iterate over all tokens in the source.

        Raises:
            InvalidCharacterError: On any character outside the recognized set.
        """
        pending: list[str] = []

        for position, char in enumerate(self.source):
            if char == " ":
                continue

            if char in OPERATOR_SYMBOLS or char in PUNCTUATION:
                if pending:
                    yield self._literal("".join(pending))
                    pending.clear()
                yield Token(OPERATOR_SYMBOLS.get(char) or PUNCTUATION[char], char)

            elif char in IDENTIFIER_CHARS or char in NUMBER_CHARS:
                pending.append(char)

            else:
                raise InvalidCharacterError(char, position)

        if pending:
            yield self._literal("".join(pending))

    def _literal(self, text: str) -> Token:
        """Classify a buffered run by its first character."""
        if text[0] in IDENTIFIER_CHARS:
            return Token(TokenType.IDENTIFIER, text)
        return Token(TokenType.NUMBER, text)

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source and return list of tokens."""
        return list(self)


def tokenize(expression: str) -> list[Token]:
    """Tokenize an expression string.

    Spaces are skipped. An empty list means the input held no tokens.
    """
    return Lexer(expression).tokenize()
