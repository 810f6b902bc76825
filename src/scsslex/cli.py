"""Command-line interface for scsslex: dump the token stream of a stylesheet."""

from __future__ import annotations

import argparse
import io
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from scsslex.errors import LexError
from scsslex.tokens import Token, TokenType

FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    format: str
    skip: frozenset[TokenType]
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="scsslex",
        description="Tokenize an SCSS stylesheet and dump its tokens",
    )
    p.add_argument("input", help="Input .scss file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Dump format (default: text)",
    )
    p.add_argument(
        "--skip",
        action="append",
        default=[],
        metavar="TYPE",
        help="Token type to omit from the dump (repeatable)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover scsslex.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Print token counts to stderr")
    return p


def parse_token_type(s: str) -> TokenType:
    """Parse a token type name such as ``space`` or ``color_hex``."""
    try:
        return TokenType(s)
    except ValueError:
        names = ", ".join(t.value for t in TokenType)
        raise argparse.ArgumentTypeError(
            f"unknown token type {s!r} (expected one of: {names})"
        ) from None


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "scsslex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from None

    cfg_output = config.get("output")
    if not isinstance(cfg_output, dict):
        cfg_output = {}

    # Format: config < CLI
    fmt = "text"
    cfg_format = cfg_output.get("format")
    if cfg_format is not None:
        if cfg_format not in FORMATS:
            raise argparse.ArgumentTypeError(f"invalid output format in config: {cfg_format!r}")
        fmt = cfg_format
    if args.format is not None:
        fmt = args.format

    # Skipped types: config and CLI are combined
    skip: set[TokenType] = set()
    cfg_skip = cfg_output.get("skip")
    if isinstance(cfg_skip, list):
        skip.update(parse_token_type(str(s)) for s in cfg_skip)
    skip.update(parse_token_type(s) for s in args.skip)

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        skip=frozenset(skip),
        debug=args.debug,
    )


def lex_file(options: CliOptions) -> list[Token]:
    """Read and tokenize a stylesheet, dropping skipped token types."""
    from scsslex import tokenize

    source = options.input_file.read_text(encoding="utf-8")
    tokens = tokenize(source).all()
    return [t for t in tokens if t.type not in options.skip]


def render_tokens(tokens: list[Token], fmt: str) -> str:
    """Render tokens in the requested dump format."""
    from scsslex.debug import dump_json, dump_tokens

    buf = io.StringIO()
    if fmt == "json":
        dump_json(tokens, file=buf)
    else:
        dump_tokens(tokens, file=buf)
    return buf.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        tokens = lex_file(options)
    except LexError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 2

    if options.debug:
        from scsslex.debug import dump_summary

        dump_summary(tokens, file=sys.stderr)

    output = render_tokens(tokens, options.format)
    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0
