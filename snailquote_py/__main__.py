"""CLI entry-point for snailquote-py."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from snailquote_py import __version__
from snailquote_py.core import ParseError, escape, escape_quoted, unescape
from snailquote_py.core import app_config

logger = logging.getLogger(__name__)


def _split_values(data: str, delimiter: str) -> list[str]:
    if not data:
        return []
    values = data.split(delimiter)
    if values[-1] == "":
        values.pop()
    return values


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="snailquote-py",
        description=(
            "Quote strings into a printable shell-like form, or parse such a form back."
        ),
    )
    parser.add_argument("mode", choices=("escape", "unescape"))
    parser.add_argument(
        "values",
        nargs="*",
        help="strings to process (default: read stdin, one value per line)",
    )
    parser.add_argument(
        "-0",
        "--null",
        action="store_true",
        help="read stdin values and write results separated by NUL instead of newline",
    )
    parser.add_argument(
        "--always-quote",
        action="store_true",
        help="escape: quote every result, even if it needs no quoting",
    )
    parser.add_argument(
        "--root",
        type=Path,
        help="project root holding config/app.toml (current directory is always read)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_intermixed_args(argv)
    if args.always_quote and args.mode != "escape":
        parser.error("--always-quote only applies to escape")
    cfg = app_config.load(args.root)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else cfg.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    delimiter = "\0" if args.null else "\n"
    values = args.values or _split_values(sys.stdin.read(), delimiter)
    separator = "\0" if args.null else cfg.separator
    quote_all = args.always_quote or cfg.always_quote
    logger.debug("%s %d value(s), always_quote=%s", args.mode, len(values), quote_all)

    for value in values:
        if args.mode == "escape":
            result = escape_quoted(value) if quote_all else escape(value)
        else:
            try:
                result = unescape(value)
            except ParseError as exc:
                logger.debug("rejected %r (%s)", value, exc.kind.name)
                print(f"snailquote-py: {exc}", file=sys.stderr)
                return 1
        sys.stdout.write(result + separator)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
