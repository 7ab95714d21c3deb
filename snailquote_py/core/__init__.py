"""Backend-core public surface – re-export runtime API."""

from __future__ import annotations

from .classify import Classification, classify
from .errors import ErrorKind, ParseError
from .escaper import escape, escape_quoted
from .unescaper import unescape

__all__ = [
    "escape",
    "escape_quoted",
    "unescape",
    "classify",
    "Classification",
    "ErrorKind",
    "ParseError",
]
