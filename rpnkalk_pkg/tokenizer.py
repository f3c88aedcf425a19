"""Lexical scanning of infix expressions.

Numbers (digits with an optional fractional part), the four binary
operators and parentheses are recognized left to right with longest match.
Whitespace is skipped. Any other character is dropped silently unless strict
tokenizing is enabled, in which case each run of such characters becomes an
UNKNOWN token for the converter to reject.
"""

from __future__ import annotations

from collections.abc import Iterator

from . import config
from .types import NoTokensFoundError, Token, TokenKind

_GROUP_KINDS = {
    "number": TokenKind.NUMBER,
    "operator": TokenKind.OPERATOR,
    "lparen": TokenKind.LPAREN,
    "rparen": TokenKind.RPAREN,
    "unknown": TokenKind.UNKNOWN,
}


def iter_tokens(expression: str, strict: bool = False) -> Iterator[Token]:
    """Yield tokens of ``expression`` lazily in source order."""
    for match in config.TOKEN_REGEX.finditer(expression):
        kind = _GROUP_KINDS[match.lastgroup]
        if kind is TokenKind.UNKNOWN and not strict:
            continue
        yield Token(kind, match.group(), match.start())


def tokenize(expression: str, strict: bool | None = None) -> list[Token]:
    """Split an expression into tokens.

    Args:
        expression: Raw infix text (e.g., "2 + 3*(4 - 1)")
        strict: Keep unrecognized characters as UNKNOWN tokens. Defaults to
            config.STRICT_TOKENS.

    Returns:
        Tokens in source order, number texts left unparsed

    Raises:
        NoTokensFoundError: if nothing in the input is recognized
    """
    if strict is None:
        strict = config.STRICT_TOKENS
    tokens = list(iter_tokens(expression, strict=strict))
    if not tokens:
        raise NoTokensFoundError(expression)
    return tokens
