"""Token dumps: one-line-per-token text, JSON, and a --debug summary."""

from __future__ import annotations

import json
import sys
from collections import Counter
from typing import Any, TextIO

from scsslex.tokens import Position, Token, TokenType


def format_token(tok: Token) -> str:
    """Render a token as ``line:col-line:col  type  'value'``."""
    span = f"{tok.start.line}:{tok.start.column}-{tok.end.line}:{tok.end.column}"
    return f"{span:<15} {tok.type.value:<13} {tok.value!r}"


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stdout) -> None:
    """Print one line per token to *file*."""
    for tok in tokens:
        file.write(format_token(tok) + "\n")


def _position_dict(pos: Position) -> dict[str, int]:
    return {"cursor": pos.cursor, "line": pos.line, "column": pos.column}


def token_dict(tok: Token) -> dict[str, Any]:
    return {
        "type": tok.type.value,
        "value": tok.value,
        "start": _position_dict(tok.start),
        "end": _position_dict(tok.end),
    }


def dump_json(tokens: list[Token], *, file: TextIO = sys.stdout) -> None:
    json.dump([token_dict(t) for t in tokens], file, indent=2)
    file.write("\n")


def dump_summary(tokens: list[Token], *, file: TextIO | None = None) -> None:
    """Print per-type token counts to *file* (default: stderr)."""
    file = file or sys.stderr
    counts = Counter(t.type for t in tokens)
    file.write(f"{len(tokens)} tokens\n")
    for tt in TokenType:
        if counts[tt]:
            file.write(f"  {tt.value:<13} {counts[tt]}\n")
