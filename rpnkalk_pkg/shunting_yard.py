"""Infix to postfix conversion (shunting-yard)."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from .config import PRECEDENCE
from .types import Token, TokenKind, UnknownTokenError, UnmatchedParenError


def to_postfix(tokens: Iterable[Token]) -> list[Token]:
    """Reorder infix tokens into postfix (RPN) order.

    Operators of equal precedence are popped before the new one is pushed,
    which makes all four operators left-associative.

    Args:
        tokens: Infix tokens as produced by tokenizer.tokenize

    Returns:
        The same numbers and operators in postfix order, parentheses removed

    Raises:
        UnmatchedParenError: on a ')' without '(' or a '(' never closed
        UnknownTokenError: on a token that is not a number, operator or paren,
            or a number too large to represent as a float
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            if not math.isfinite(token.value):
                raise UnknownTokenError(token)
            output.append(token)
        elif token.kind is TokenKind.LPAREN:
            stack.append(token)
        elif token.kind is TokenKind.RPAREN:
            while stack and stack[-1].kind is not TokenKind.LPAREN:
                output.append(stack.pop())
            if not stack:
                raise UnmatchedParenError("no matching opening parenthesis")
            stack.pop()
        elif token.kind is TokenKind.OPERATOR and token.text in PRECEDENCE:
            rank = PRECEDENCE[token.text]
            while (
                stack
                and stack[-1].kind is TokenKind.OPERATOR
                and PRECEDENCE[stack[-1].text] >= rank
            ):
                output.append(stack.pop())
            stack.append(token)
        else:
            raise UnknownTokenError(token)

    while stack:
        top = stack.pop()
        if top.kind is TokenKind.LPAREN:
            raise UnmatchedParenError("no matching closing parenthesis")
        output.append(top)

    return output


def postfix_to_string(postfix: Sequence[Token]) -> str:
    """Render a postfix sequence as space-separated token texts."""
    return " ".join(token.text for token in postfix)
