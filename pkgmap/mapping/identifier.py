from __future__ import annotations
from typing import Optional

from pkgmap.mapping.errors import FormatError


def _first_invalid(text: str, start: int, end: int) -> Optional[int]:
    # Offset of the first character that cannot appear in a package name.
    for i in range(start, end):
        c = text[i]
        if c == "_" or c == "$":
            continue
        if "0" <= c <= "9" and i > start:
            continue
        if "a" <= c.lower() <= "z" and c.isascii():
            continue
        return i
    return None


def is_valid_identifier(text: str, start: int = 0, end: Optional[int] = None) -> bool:
    """True if `text[start:end]` is a legal package name.

    Letters, `_` and `$` anywhere; ASCII digits anywhere but first.
    """
    if end is None:
        end = len(text)
    if start >= end:
        return False
    return _first_invalid(text, start, end) is None


def check_identifier(text: str, start: int = 0, end: Optional[int] = None) -> None:
    """Like `is_valid_identifier` but raises `FormatError` at the offending offset."""
    if end is None:
        end = len(text)
    if start >= end:
        raise FormatError("empty package name", text, start)
    bad = _first_invalid(text, start, end)
    if bad is not None:
        raise FormatError("not an identifier", text, bad)
