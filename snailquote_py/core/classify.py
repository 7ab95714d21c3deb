"""Per-character quoting policy."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

_SEPARATOR_CATEGORIES = frozenset({"Zs", "Zl", "Zp"})
_OTHER_CATEGORIES = frozenset({"Cc", "Cf", "Cs", "Co", "Cn"})


@dataclass(frozen=True, slots=True)
class Classification:
    """Quoting verdict for a whole string."""

    needs_quoting: bool = False
    single_quotable: bool = True


def is_separator(ch: str) -> bool:
    return unicodedata.category(ch) in _SEPARATOR_CATEGORIES


def is_other(ch: str) -> bool:
    return unicodedata.category(ch) in _OTHER_CATEGORIES


def needs_escape(ch: str) -> bool:
    """Return True if *ch* is written as a backslash escape inside double quotes."""
    if ch == " ":
        return False
    return is_other(ch) or is_separator(ch)


def _char_policy(ch: str) -> tuple[bool, bool]:
    """Return ``(forces_quoting, precludes_single_quote)`` for *ch*."""
    if ch in {"'", "\\"}:
        return True, True
    if ch == '"' or ch == " ":
        return True, False
    if ch.isspace() or is_separator(ch) or is_other(ch):
        return True, True
    return False, False


def classify(text: str) -> Classification:
    """Decide whether *text* needs quoting and whether single quotes suffice."""
    needs_quoting = False
    single_quotable = True
    for ch in text:
        forces, precludes = _char_policy(ch)
        needs_quoting = needs_quoting or forces
        single_quotable = single_quotable and not precludes
        if needs_quoting and not single_quotable:
            break
    return Classification(needs_quoting, single_quotable)
