"""scsslex token reader: classifies characters into a lazily buffered token stream."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from typing import NoReturn

from scsslex.stream import InputStream
from scsslex.tokens import (
    Position,
    Token,
    TokenType,
    is_digit,
    is_hex_digit,
    is_ident_char,
    is_ident_start,
    is_line_break,
    is_operator,
    is_operator_repeatable,
    is_punctuation,
    is_whitespace,
)

_HEX_LENGTHS = (6, 3)


class TokenStream:
    """Tokenize stylesheet source read from an InputStream.

    Tokens are produced on demand. ``peek`` buffers as many tokens as the
    requested lookahead needs; ``next`` drains the buffer before reading
    fresh tokens from the input.
    """

    def __init__(self, stream: InputStream) -> None:
        self._input = stream
        self._tokens: deque[Token] = deque()

    def __iter__(self) -> Iterator[Token]:
        while (tok := self.next()) is not None:
            yield tok

    def all(self) -> list[Token]:
        """Consume the remaining input and return its tokens."""
        return list(self)

    def peek(self, offset: int = 0) -> Token | None:
        if offset < 0:
            raise ValueError("offset must be >= 0")
        while len(self._tokens) <= offset:
            tok = self._read_next()
            if tok is None:
                return None
            self._tokens.append(tok)
        return self._tokens[offset]

    def next(self) -> Token | None:
        if self._tokens:
            return self._tokens.popleft()
        return self._read_next()

    def eof(self) -> bool:
        return self.peek() is None

    def err(self, message: str) -> NoReturn:
        self._input.err(message)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def _read_next(self) -> Token | None:
        inp = self._input
        if inp.eof():
            return None

        ch = inp.peek()

        if is_whitespace(ch):
            return self._read_whitespace()

        if ch == "/" and inp.peek(1) in ("/", "*"):
            return self._read_comment()

        if is_digit(ch) or (ch == "." and is_digit(inp.peek(1))):
            return self._read_number()

        hex_length = self._hex_length()
        if hex_length:
            return self._read_hex(hex_length)

        if is_punctuation(ch):
            return self._read_punctuation()

        if is_ident_start(ch):
            return self._read_ident()

        if is_operator(ch):
            return self._read_operator()

        if ch == '"':
            return self._read_string(TokenType.STRING_DOUBLE)

        if ch == "'":
            return self._read_string(TokenType.STRING_SINGLE)

        if ch == "@":
            return self._read_sigil(TokenType.ATRULE)

        if ch == "$":
            return self._read_sigil(TokenType.VARIABLE)

        self.err(f"Can't handle character: \"{ch}\"")

    def _hex_length(self) -> int:
        """Return 3 or 6 if a hex color starts at the cursor, otherwise 0."""
        inp = self._input
        if inp.peek() != "#":
            return 0
        # Scan one digit past the longest form so longer runs are rejected
        length = 0
        while length <= 6 and is_hex_digit(inp.peek(length + 1)):
            length += 1
        return length if length in _HEX_LENGTHS else 0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _emit(self, tt: TokenType, value: str, start: Position) -> Token:
        return Token(tt, value, start, self._input.position())

    def _read_while(self, predicate: Callable[[str], bool]) -> str:
        inp = self._input
        chars = []
        while not inp.eof() and predicate(inp.peek()):
            chars.append(inp.next())
        return "".join(chars)

    # ------------------------------------------------------------------
    # Sub-readers
    # ------------------------------------------------------------------

    def _read_whitespace(self) -> Token:
        start = self._input.position()
        return self._emit(TokenType.SPACE, self._read_while(is_whitespace), start)

    def _read_comment(self) -> Token:
        inp = self._input
        start = inp.position()
        inp.next()  # consume /
        if inp.next() == "/":
            value = self._read_while(lambda c: not is_line_break(c))
            return self._emit(TokenType.COMMENT, value, start)

        chars = []
        while not inp.eof():
            if inp.peek() == "*" and inp.peek(1) == "/":
                inp.next()
                inp.next()
                break
            chars.append(inp.next())
        return self._emit(TokenType.COMMENT, "".join(chars), start)

    def _read_number(self) -> Token:
        start = self._input.position()
        seen_dot = False

        def accept(c: str) -> bool:
            nonlocal seen_dot
            if c == ".":
                if seen_dot:
                    return False
                seen_dot = True
                return True
            return is_digit(c)

        return self._emit(TokenType.NUMBER, self._read_while(accept), start)

    def _read_hex(self, length: int) -> Token:
        inp = self._input
        start = inp.position()
        inp.next()  # consume #
        value = "".join(inp.next() for _ in range(length))
        return self._emit(TokenType.COLOR_HEX, value, start)

    def _read_punctuation(self) -> Token:
        start = self._input.position()
        return self._emit(TokenType.PUNCTUATION, self._input.next(), start)

    def _read_operator(self) -> Token:
        inp = self._input
        start = inp.position()
        ch = inp.peek()
        if is_operator_repeatable(ch):
            value = self._read_while(lambda c: c == ch)
        else:
            value = inp.next()
        return self._emit(TokenType.OPERATOR, value, start)

    def _read_ident(self) -> Token:
        start = self._input.position()
        return self._emit(TokenType.IDENTIFIER, self._read_while(is_ident_char), start)

    def _read_string(self, tt: TokenType) -> Token:
        inp = self._input
        start = inp.position()
        quote = inp.next()
        chars = []
        escaped = False
        while not inp.eof():
            c = inp.next()
            if escaped:
                escaped = False
            elif c == "\\":
                escaped = True
            elif c == quote:
                break
            chars.append(c)
        return self._emit(tt, "".join(chars), start)

    def _read_sigil(self, tt: TokenType) -> Token:
        start = self._input.position()
        self._input.next()  # consume @ or $
        return self._emit(tt, self._read_while(is_ident_char), start)
