"""Produce the least-quoted printable form of a string."""

from __future__ import annotations

from .classify import classify, needs_escape
from .unicode_escape import encode_unicode_escape

_MNEMONICS: dict[str, str] = {
    "\x07": "\\a",
    "\x08": "\\b",
    "\x0b": "\\v",
    "\x0c": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\x1b": "\\e",
}


def _double_quote(text: str) -> str:
    out: list[str] = ['"']
    for ch in text:
        if ch == '"':
            out.append('\\"')
        elif ch == "\\":
            out.append("\\\\")
        elif needs_escape(ch):
            out.append(_MNEMONICS.get(ch) or encode_unicode_escape(ch))
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def escape(text: str) -> str:
    """Return *text* unchanged, wrapped in single quotes, or double-quoted.

    The plainest form that :func:`~snailquote_py.core.unescaper.unescape`
    turns back into *text* is chosen.
    """
    verdict = classify(text)
    if not verdict.needs_quoting:
        return text
    if verdict.single_quotable:
        return f"'{text}'"
    return _double_quote(text)


def escape_quoted(text: str) -> str:
    """Like :func:`escape`, but the result is always wrapped in quotes."""
    verdict = classify(text)
    if verdict.single_quotable:
        return f"'{text}'"
    return _double_quote(text)
