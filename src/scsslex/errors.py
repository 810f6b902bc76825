"""Error type with formatted source context."""

from __future__ import annotations

from scsslex.tokens import Position


class LexError(Exception):
    """Raised on the first lexing error, with position and source context.

    Also raised by the parser-facing assertion helpers in
    :mod:`scsslex.predicates`. ``position`` is ``None`` only when an
    assertion was made against a missing token at end of input.
    """

    def __init__(
        self,
        message: str,
        position: Position | None = None,
        source: str | None = None,
    ) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} ({self.position.line}:{self.position.column})"

    def format(self, filename: str = "input.scss") -> str:
        if self.position is None:
            return f"error: {self.message}\n --> {filename}"

        lines = (self.source or "").splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        # Build the source line (strip trailing newline for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n")
        else:
            source_line = ""

        pad = " " * col
        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )
