"""Token types, result dataclasses and the error hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TokenKind(Enum):
    """Lexical category of a token."""

    NUMBER = "number"
    OPERATOR = "operator"
    LPAREN = "lparen"
    RPAREN = "rparen"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Token:
    """A single lexical token, kept as its source text."""

    kind: TokenKind
    text: str
    position: int = 0

    @property
    def value(self) -> float:
        """Numeric value of a NUMBER token."""
        return float(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass
class EvalResult:
    """Result of evaluating an infix expression."""

    ok: bool
    value: float | None = None
    postfix: str | None = None
    error: str | None = None
    error_code: str | None = None
    cause_code: str | None = None

    def failed_with(self, code: str) -> bool:
        """True if the evaluation failed with ``code`` or a cause carrying it."""
        return not self.ok and code in (self.error_code, self.cause_code)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.value is not None:
            result_dict["result"] = self.value
        if self.postfix is not None:
            result_dict["postfix"] = self.postfix
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        if self.cause_code is not None:
            result_dict["cause_code"] = self.cause_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error_code={self.error_code!r}, error={self.error!r})"
        return f"EvalResult(ok=True, value={self.value!r}, postfix={self.postfix!r})"


class CalculatorError(Exception):
    """Base class for every expected failure of the expression pipeline."""

    def __init__(self, message: str, code: str = "CALCULATOR_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ValidationError(CalculatorError):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code)


class NoTokensFoundError(CalculatorError):
    """Raised when tokenizing yields nothing."""

    def __init__(self, expression: str):
        self.expression = expression
        super().__init__(
            f"could not tokenize expression: {expression!r}", code="NO_TOKENS"
        )


class UnmatchedParenError(CalculatorError):
    """Raised for a ')' without '(' or a '(' left open."""

    def __init__(self, detail: str):
        super().__init__(f"invalid expression: {detail}", code="UNMATCHED_PAREN")


class UnknownTokenError(CalculatorError):
    """Raised for a token that is not a number, operator or parenthesis."""

    def __init__(self, token: Token | str):
        self.token = token
        super().__init__(f"invalid token: {token}", code="UNKNOWN_TOKEN")


class InsufficientOperandsError(CalculatorError):
    """Raised when an operator finds fewer than two operands on the stack."""

    def __init__(self, operator: str, position: int):
        self.operator = operator
        self.position = position
        super().__init__(
            f"not enough operands for operator '{operator}' at position {position}",
            code="INSUFFICIENT_OPERANDS",
        )


class DivisionByZeroError(CalculatorError):
    """Raised when the right operand of "/" is zero."""

    def __init__(self):
        super().__init__("division by zero is undefined", code="DIVISION_BY_ZERO")


class OperatorError(CalculatorError):
    """Wraps an arithmetic failure with the operator that triggered it."""

    def __init__(self, operator: str, cause: CalculatorError):
        self.operator = operator
        self.cause = cause
        super().__init__(
            f"error while applying operator '{operator}': {cause}",
            code="OPERATOR_ERROR",
        )


class MalformedExpressionError(CalculatorError):
    """Raised when a postfix sequence cannot reduce to a single value."""

    def __init__(
        self,
        message: str = "malformed expression: extra or missing operands",
    ):
        super().__init__(message, code="MALFORMED_EXPRESSION")
