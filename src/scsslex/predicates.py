"""Token checks for parsers built on top of the token stream."""

from __future__ import annotations

from scsslex.errors import LexError
from scsslex.tokens import Token, TokenType


def _type_name(tt: TokenType | str) -> str:
    return tt.value if isinstance(tt, TokenType) else tt


def is_type(token: Token | None, tt: TokenType | str) -> bool:
    """Return True if token is present and has the given type."""
    return token is not None and token.type.value == _type_name(tt)


def is_value(token: Token | None, value: str) -> bool:
    """Return True if token is present and has the given value."""
    return token is not None and token.value == value


def assert_type(token: Token | None, tt: TokenType | str) -> Token:
    """Return token if it has the given type, otherwise raise LexError."""
    expected = _type_name(tt)
    if token is None:
        raise LexError(f"Expected a {expected}, got end of input")
    if token.type.value != expected:
        raise LexError(f"Expected a {expected}, got a {token.type.value}", token.start)
    return token


def assert_value(token: Token | None, value: str) -> Token:
    """Return token if it has the given value, otherwise raise LexError."""
    if token is None:
        raise LexError(f"Expected '{value}', got end of input")
    if token.value != value:
        raise LexError(f"Expected '{value}', got '{token.value}'", token.start)
    return token
