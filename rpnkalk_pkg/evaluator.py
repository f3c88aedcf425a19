"""Stack-based evaluation of postfix token sequences."""

from __future__ import annotations

from collections.abc import Sequence

from .operators import apply
from .types import (
    DivisionByZeroError,
    InsufficientOperandsError,
    MalformedExpressionError,
    OperatorError,
    Token,
    TokenKind,
)


def evaluate(postfix: Sequence[Token]) -> float:
    """Evaluate a postfix sequence to a single number.

    For an operator seen with the stack ending in [..., b, a] the result
    pushed is ``b op a``.

    Args:
        postfix: Tokens in postfix order (see shunting_yard.to_postfix)

    Returns:
        The value left on the operand stack

    Raises:
        InsufficientOperandsError: operator with fewer than two operands;
            position is 1-based within ``postfix``
        OperatorError: the operator itself failed (division by zero)
        MalformedExpressionError: not exactly one value remains, or a
            token that is neither number nor operator was found
    """
    stack: list[float] = []

    for position, token in enumerate(postfix, start=1):
        if token.kind is TokenKind.NUMBER:
            stack.append(token.value)
            continue
        if token.kind is not TokenKind.OPERATOR:
            raise MalformedExpressionError(
                f"malformed expression: unexpected token '{token}' at position {position}"
            )
        if len(stack) < 2:
            raise InsufficientOperandsError(token.text, position)

        right = stack.pop()
        left = stack.pop()
        try:
            result = apply(token.text, left, right)
        except DivisionByZeroError as exc:
            raise OperatorError(token.text, exc) from exc
        stack.append(result)

    if len(stack) != 1:
        raise MalformedExpressionError()
    return stack[0]
