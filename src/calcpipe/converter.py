"""Infix to postfix conversion (shunting-yard).

Reorders an infix token list into postfix (Reverse Polish) order using an
explicit operator stack.

Operator Precedence (lowest to highest):
1. + -
2. * /

Operators of equal precedence are left-associative: "8 - 3 - 1" becomes
"8 3 - 1 -". The output never contains parenthesis tokens.
"""

import logging

from calcpipe.errors import InvalidTokenError, MismatchedParenthesesError
from calcpipe.lexer import Token, TokenType

logger = logging.getLogger(__name__)


PRECEDENCE = {
    TokenType.PLUS: 1,
    TokenType.MINUS: 1,
    TokenType.MULTIPLY: 2,
    TokenType.DIVIDE: 2,
}


def precedence(token: Token) -> int:
    """Binding strength of a token; 0 for anything that is not an operator."""
    return PRECEDENCE.get(token.type, 0)


class Converter:
    """Converts an infix token list to postfix order.

    Usage:
        converter = Converter(tokenize("3 + 5 * 2"))
        postfix = converter.convert()
    """

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens

    def convert(self) -> list[Token]:
        """Run the conversion and return the postfix token list.

        Raises:
            MismatchedParenthesesError: On an unmatched '(' or ')'.
            InvalidTokenError: On a token the converter cannot classify.
        """
        output: list[Token] = []
        stack: list[Token] = []

        for token in self.tokens:
            if token.is_operand:
                output.append(token)

            elif token.type == TokenType.LPAREN:
                stack.append(token)

            elif token.type == TokenType.RPAREN:
                while stack and stack[-1].type != TokenType.LPAREN:
                    output.append(stack.pop())
                if not stack:
                    raise MismatchedParenthesesError()
                stack.pop()

            elif token.is_operator:
                while stack and precedence(stack[-1]) >= precedence(token):
                    output.append(stack.pop())
                stack.append(token)

            else:
                raise InvalidTokenError(token.text)

        while stack:
            token = stack.pop()
            if token.type == TokenType.LPAREN:
                raise MismatchedParenthesesError()
            output.append(token)

        logger.debug("Converted %d tokens to postfix: %s", len(self.tokens), format_tokens(output))
        return output


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Convert an infix token list to postfix order."""
    return Converter(tokens).convert()


def format_tokens(tokens: list[Token]) -> str:
    """Render tokens as space-separated source text."""
    return " ".join(token.text for token in tokens)
