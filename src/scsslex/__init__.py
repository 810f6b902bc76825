"""Lexer for SCSS-style stylesheet source."""

from __future__ import annotations

from scsslex.errors import LexError
from scsslex.lexer import TokenStream
from scsslex.stream import InputStream
from scsslex.tokens import Position, Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "InputStream",
    "LexError",
    "Position",
    "Token",
    "TokenStream",
    "TokenType",
    "tokenize",
]


def tokenize(source: str) -> TokenStream:
    """Return a lazy token stream over source text."""
    return TokenStream(InputStream(source))
