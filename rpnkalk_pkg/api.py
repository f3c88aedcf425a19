"""Public API for rpnkalk - returns structured objects without side effects."""

from __future__ import annotations

from . import config
from .evaluator import evaluate
from .logging_config import get_logger
from .shunting_yard import postfix_to_string, to_postfix
from .tokenizer import tokenize
from .types import CalculatorError, EvalResult, OperatorError, Token, ValidationError

logger = get_logger("api")


def _validate_length(raw: str) -> None:
    if len(raw) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (max {config.MAX_INPUT_LENGTH} characters)",
            code="TOO_LONG",
        )


def _postfix_tokens(raw: str, strict: bool | None) -> list[Token]:
    _validate_length(raw)
    return to_postfix(tokenize(raw, strict=strict))


def convert_to_postfix(raw: str, strict: bool | None = None) -> list[str]:
    """Convert an infix expression to postfix token texts.

    Args:
        raw: Infix expression (e.g., "(2+3)*4")
        strict: Reject unrecognized characters (defaults to config.STRICT_TOKENS)

    Returns:
        Postfix token texts

    Raises:
        CalculatorError: any tokenizing or conversion failure

    Example:
        >>> from rpnkalk_pkg.api import convert_to_postfix
        >>> convert_to_postfix("(2+3)*4")
        ['2', '3', '+', '4', '*']
    """
    return [token.text for token in _postfix_tokens(raw, strict)]


def evaluate_expression(raw: str, strict: bool | None = None) -> EvalResult:
    """Evaluate an infix arithmetic expression.

    Args:
        raw: Infix expression (e.g., "2 + 3*4", "1.5+2.25")
        strict: Reject unrecognized characters (defaults to config.STRICT_TOKENS)

    Returns:
        EvalResult with the full-precision value, or the error message and code

    Example:
        >>> from rpnkalk_pkg.api import evaluate_expression
        >>> evaluate_expression("(2+3)*4").value
        20.0
        >>> evaluate_expression("5/0").failed_with("DIVISION_BY_ZERO")
        True
    """
    try:
        postfix = _postfix_tokens(raw, strict)
        value = evaluate(postfix)
    except CalculatorError as e:
        cause_code = e.cause.code if isinstance(e, OperatorError) else None
        logger.debug("Evaluation of %r failed [%s]: %s", raw, e.code, e)
        return EvalResult(
            ok=False, error=str(e), error_code=e.code, cause_code=cause_code
        )
    return EvalResult(ok=True, value=value, postfix=postfix_to_string(postfix))


def validate_expression(raw: str, strict: bool | None = None) -> tuple[bool, str | None]:
    """Check that an expression tokenizes and converts, without evaluating it.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from rpnkalk_pkg.api import validate_expression
        >>> validate_expression("2 + 2")
        (True, None)
        >>> validate_expression("(2 + 2")
        (False, 'invalid expression: no matching closing parenthesis')
    """
    try:
        _postfix_tokens(raw, strict)
    except CalculatorError as e:
        return False, str(e)
    return True, None
