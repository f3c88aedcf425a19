"""Binary arithmetic for the postfix evaluator."""

from __future__ import annotations

import operator

from .types import DivisionByZeroError, MalformedExpressionError

_BINARY_OPS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def apply(op: str, a: float, b: float) -> float:
    """Compute ``a op b``.

    Raises:
        DivisionByZeroError: for "/" with b == 0
        MalformedExpressionError: for a symbol outside + - * /
    """
    func = _BINARY_OPS.get(op)
    if func is None:
        raise MalformedExpressionError(f"malformed expression: unsupported operator '{op}'")
    if op == "/" and b == 0:
        raise DivisionByZeroError()
    return func(a, b)
