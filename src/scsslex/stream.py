"""Character cursor over stylesheet source text."""

from __future__ import annotations

from typing import NoReturn

from scsslex.errors import LexError
from scsslex.tokens import Position


class InputStream:
    """Read characters from source text while tracking line and column.

    ``peek`` never moves the cursor; ``next`` is the only way forward and
    there is no way back.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.cursor = 0
        self.line = 1
        self.column = 0

    def position(self) -> Position:
        return Position(self.cursor, self.line, self.column)

    def peek(self, offset: int = 0) -> str:
        idx = self.cursor + offset
        if 0 <= idx < len(self.source):
            return self.source[idx]
        return ""

    def next(self) -> str:
        ch = self.peek()
        self.cursor += 1
        if ch == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        return ch

    def eof(self) -> bool:
        return self.peek() == ""

    def err(self, message: str) -> NoReturn:
        raise LexError(message, self.position(), self.source)
