"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    SPACE = "space"  # tab, newline, space runs
    COMMENT = "comment"  # // ... or /* ... */, delimiters stripped
    NUMBER = "number"  # 12, 1.5, .5
    COLOR_HEX = "color_hex"  # #fff / #ff0099, value without the #
    PUNCTUATION = "punctuation"  # , ; ( ) { } [ ] : # .
    OPERATOR = "operator"  # + - * / % = & | ! ~ > < ^  (&& || == repeat)
    IDENTIFIER = "identifier"
    STRING_DOUBLE = "string_double"  # "...", quotes stripped, escapes kept
    STRING_SINGLE = "string_single"  # '...'
    ATRULE = "atrule"  # @mixin, value without the @
    VARIABLE = "variable"  # $size, value without the $


@dataclass(frozen=True, slots=True)
class Position:
    """Source position: 0-based cursor offset, 1-based line, 0-based column."""

    cursor: int
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token. ``end`` is the position after its last character."""

    type: TokenType
    value: str
    start: Position
    end: Position


_WHITESPACE = frozenset("\t\n ")
_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_IDENT_START = _LETTERS | {"_"}
_IDENT = _IDENT_START | _DIGITS | {"-"}
_PUNCTUATION = frozenset(",;(){}[]:#.")
_OPERATORS = frozenset("+-*/%=&|!~><^")
# Operators read as a run of the same character (&&, ||, ==)
_REPEATABLE_OPERATORS = frozenset("&|=")


def is_whitespace(ch: str) -> bool:
    return ch in _WHITESPACE


def is_line_break(ch: str) -> bool:
    return ch == "\n"


def is_digit(ch: str) -> bool:
    return ch in _DIGITS


def is_hex_digit(ch: str) -> bool:
    """Return True if ch is a hexadecimal digit."""
    return ch in _HEX_DIGITS


def is_ident_start(ch: str) -> bool:
    """Return True if ch can begin an identifier."""
    return ch in _IDENT_START


def is_ident_char(ch: str) -> bool:
    """Return True if ch is a valid identifier character."""
    return ch in _IDENT


def is_punctuation(ch: str) -> bool:
    return ch in _PUNCTUATION


def is_operator(ch: str) -> bool:
    return ch in _OPERATORS


def is_operator_repeatable(ch: str) -> bool:
    return ch in _REPEATABLE_OPERATORS
