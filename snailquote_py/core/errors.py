"""Failure types raised while parsing quoted strings."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    DANGLING_ESCAPE = "dangling escape"
    UNRECOGNIZED_ESCAPE = "unrecognized escape"
    UNICODE_MISSING_BRACE = "unicode escape missing '{'"
    UNICODE_INVALID_HEX = "unicode escape with invalid hex"
    UNICODE_INVALID_SCALAR = "unicode escape with invalid scalar value"


class ParseError(ValueError):
    """Raised when text is not a validly quoted string.

    *position* is the character index the failure was detected at and
    *text* is the complete input, kept around for diagnostics.
    """

    def __init__(self, kind: ErrorKind, position: int, text: str, detail: str) -> None:
        super().__init__(kind, position, text, detail)
        self.kind = kind
        self.position = position
        self.text = text
        self.detail = detail

    def __str__(self) -> str:
        return (
            f"{self.kind.value} at char {self.position} in {self.text!r}: {self.detail}"
        )
