"""Test the parser-facing token checks."""

import pytest

from scsslex import tokenize
from scsslex.errors import LexError
from scsslex.predicates import assert_type, assert_value, is_type, is_value
from scsslex.tokens import Position, Token, TokenType

IDENT = Token(TokenType.IDENTIFIER, "color", Position(4, 2, 3), Position(9, 2, 8))


class TestIsType:
    def test_matching_enum(self):
        assert is_type(IDENT, TokenType.IDENTIFIER)

    def test_matching_string(self):
        assert is_type(IDENT, "identifier")

    def test_mismatch(self):
        assert not is_type(IDENT, TokenType.NUMBER)

    def test_missing_token(self):
        assert not is_type(None, TokenType.IDENTIFIER)


class TestIsValue:
    def test_match(self):
        assert is_value(IDENT, "color")

    def test_mismatch(self):
        assert not is_value(IDENT, "colour")

    def test_missing_token(self):
        assert not is_value(None, "color")


class TestAssertType:
    def test_returns_token(self):
        assert assert_type(IDENT, TokenType.IDENTIFIER) is IDENT

    def test_mismatch_message(self):
        with pytest.raises(LexError) as exc_info:
            assert_type(IDENT, TokenType.NUMBER)
        assert str(exc_info.value) == "Expected a number, got a identifier (2:3)"
        assert exc_info.value.position == IDENT.start

    def test_string_type(self):
        with pytest.raises(LexError, match=r"Expected a variable, got a identifier"):
            assert_type(IDENT, "variable")

    def test_end_of_input(self):
        with pytest.raises(LexError) as exc_info:
            assert_type(None, TokenType.PUNCTUATION)
        assert str(exc_info.value) == "Expected a punctuation, got end of input"


class TestAssertValue:
    def test_returns_token(self):
        assert assert_value(IDENT, "color") is IDENT

    def test_mismatch_message(self):
        with pytest.raises(LexError) as exc_info:
            assert_value(IDENT, ";")
        assert str(exc_info.value) == "Expected ';', got 'color' (2:3)"

    def test_end_of_input(self):
        with pytest.raises(LexError, match="Expected '}', got end of input"):
            assert_value(None, "}")


class TestWithStream:
    def test_parser_style_usage(self):
        t = tokenize("@mixin m {")
        assert_type(t.next(), TokenType.ATRULE)
        assert is_type(t.next(), TokenType.SPACE)
        assert_value(t.next(), "m")
        t.next()
        assert_value(t.next(), "{")
        assert t.eof()
