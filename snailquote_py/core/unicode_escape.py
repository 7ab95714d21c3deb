"""Codec for ``\\u{HEX}`` escape sequences."""

from __future__ import annotations

import re

from .errors import ErrorKind, ParseError

_HEX_RE = re.compile(r"[0-9A-Fa-f]+")
_MAX_CODE_POINT = 0x10FFFF
_MAX_HEX_VALUE = 0xFFFFFFFF
_SURROGATES = range(0xD800, 0xE000)


def encode_unicode_escape(ch: str) -> str:
    """Return ``\\u{hex}`` for *ch*, lowercase and without leading zeros."""
    return f"\\u{{{ord(ch):x}}}"


def decode_unicode_escape(text: str, pos: int) -> tuple[str, int]:
    """Parse the escape body of *text* starting at *pos*, just past ``\\u``.

    Returns the decoded character and the index following the closing
    brace. The digit run extends to the next ``}`` or to the end of *text*
    when the brace is never closed.
    """
    if pos >= len(text) or text[pos] != "{":
        found = repr(text[pos]) if pos < len(text) else "end of input"
        raise ParseError(
            ErrorKind.UNICODE_MISSING_BRACE,
            pos,
            text,
            f"expected '{{' after \\u, found {found}",
        )
    start = pos + 1
    end = text.find("}", start)
    if end == -1:
        digits = text[start:]
        after = len(text)
    else:
        digits = text[start:end]
        after = end + 1
    if not _HEX_RE.fullmatch(digits):
        raise ParseError(
            ErrorKind.UNICODE_INVALID_HEX,
            start,
            text,
            f"could not parse {digits!r} as hex",
        )
    value = int(digits, 16)
    if value > _MAX_HEX_VALUE:
        raise ParseError(
            ErrorKind.UNICODE_INVALID_HEX,
            start,
            text,
            f"{digits!r} does not fit in 32 bits",
        )
    if value > _MAX_CODE_POINT or value in _SURROGATES:
        raise ParseError(
            ErrorKind.UNICODE_INVALID_SCALAR,
            start,
            text,
            f"{digits!r} (0x{value:x}) is not a unicode scalar value",
        )
    return chr(value), after
