"""Parse quoted strings back into their original text."""

from __future__ import annotations

import enum

from .errors import ErrorKind, ParseError
from .unicode_escape import decode_unicode_escape


class QuoteState(enum.Enum):
    BARE = 0
    SINGLE_QUOTE = 1
    DOUBLE_QUOTE = 2


_SIMPLE_ESCAPES: dict[str, str] = {
    "a": "\x07",
    "b": "\x08",
    "v": "\x0b",
    "f": "\x0c",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "e": "\x1b",
    "E": "\x1b",
    "\\": "\\",
    "'": "'",
    '"': '"',
    " ": " ",
}


def _resolve_escape(text: str, pos: int) -> tuple[str, int]:
    """Resolve the escape whose backslash sits at *pos*; return char and next index."""
    if pos + 1 >= len(text):
        raise ParseError(
            ErrorKind.DANGLING_ESCAPE,
            pos,
            text,
            "backslash at end of input",
        )
    code = text[pos + 1]
    if code == "u":
        return decode_unicode_escape(text, pos + 2)
    resolved = _SIMPLE_ESCAPES.get(code)
    if resolved is None:
        raise ParseError(
            ErrorKind.UNRECOGNIZED_ESCAPE,
            pos + 1,
            text,
            f"invalid escape \\{code}",
        )
    return resolved, pos + 2


def unescape(text: str) -> str:
    """Return the string that *text* quotes.

    Bare, single-quoted and double-quoted segments may be mixed and are
    concatenated. A quote left open at the end of *text* is accepted.
    Raises :class:`ParseError` on a malformed escape.
    """
    state = QuoteState.BARE
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if state is QuoteState.SINGLE_QUOTE:
            if ch == "'":
                state = QuoteState.BARE
            else:
                out.append(ch)
        elif state is QuoteState.DOUBLE_QUOTE:
            if ch == '"':
                state = QuoteState.BARE
            elif ch == "\\":
                resolved, i = _resolve_escape(text, i)
                out.append(resolved)
                continue
            else:
                out.append(ch)
        elif ch == "'":
            state = QuoteState.SINGLE_QUOTE
        elif ch == '"':
            state = QuoteState.DOUBLE_QUOTE
        else:
            out.append(ch)
        i += 1
    return "".join(out)
