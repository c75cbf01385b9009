"""String helpers modelled on Python-style string operations."""

from __future__ import annotations

import re
from collections.abc import Iterable

_WHITESPACE = " \t\n\v\f\r"
_WHITESPACE_RUN = re.compile(r"[ \t\n\v\f\r]+")


def _check_fill(fill: str) -> None:
    if len(fill) != 1:
        raise ValueError(f"fill must be a single character, got {fill!r}")


def slice_text(text: str, start: int, end: int = 0) -> str:
    """Return text[start:end] where an end of 0 means the end of the string."""
    if not text:
        return text
    length = len(text)
    if start < 0:
        start = max(start + length, 0)
    if end < 0:
        end = max(end + length, 0)
    start = min(start, length)
    if end > length or end == 0:
        end = length
    if start >= end:
        return ""
    return text[start:end]


def capitalize(text: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    if not text:
        return text
    lowered = text.lower()
    return lowered[0].upper() + lowered[1:]


def upper(text: str) -> str:
    """Return the text in upper case."""
    return text.upper()


def lower(text: str) -> str:
    """Return the text in lower case."""
    return text.lower()


def lstrip(text: str) -> str:
    """Remove leading whitespace."""
    return text.lstrip(_WHITESPACE)


def rstrip(text: str) -> str:
    """Remove trailing whitespace."""
    return text.rstrip(_WHITESPACE)


def strip(text: str) -> str:
    """Remove leading and trailing whitespace."""
    return lstrip(rstrip(text))


def center(text: str, width: int, fill: str = " ") -> str:
    """Pad text on both sides to width, with any odd extra on the right."""
    _check_fill(fill)
    padding = width - len(text)
    if padding <= 0:
        return text
    left = padding // 2
    right = padding - left
    return fill * left + text + fill * right


def ljust(text: str, width: int, fill: str = " ") -> str:
    """Pad text on the right to width."""
    _check_fill(fill)
    return text + fill * max(width - len(text), 0)


def rjust(text: str, width: int, fill: str = " ") -> str:
    """Pad text on the left to width."""
    _check_fill(fill)
    return fill * max(width - len(text), 0) + text


def replace(text: str, old: str, rep: str) -> str:
    """Replace every occurrence of old; an empty old leaves text unchanged."""
    if not old:
        return text
    return text.replace(old, rep)


def split(text: str, sep: str = "") -> list[str]:
    """Split text on sep, or on runs of whitespace when sep is empty.

    A trailing empty piece after the final separator is dropped.
    """
    if not text:
        return [""]
    if not sep:
        return [part for part in _WHITESPACE_RUN.split(text) if part]
    parts = text.split(sep)
    if not parts[-1]:
        parts.pop()
    return parts


def join(sep: str, items: Iterable[str]) -> str:
    """Join items with sep between them."""
    return sep.join(items)


def expand_tabs(text: str, tabsize: int = 4) -> str:
    """Replace tabs with spaces up to the next multiple of tabsize.

    A negative tabsize leaves the text unchanged; a tabsize of zero removes tabs.
    """
    if not text:
        return ""
    if tabsize < 0:
        return text
    pieces: list[str] = []
    column = 0
    for ch in text:
        if ch == "\t":
            if tabsize == 0:
                continue
            width = tabsize - column % tabsize
            pieces.append(" " * width)
            column += width
        else:
            pieces.append(ch)
            column += 1
    return "".join(pieces)


def edit_distance(left: str, right: str, ignorecase: bool = False) -> int:
    """Return the Levenshtein distance between left and right."""
    if ignorecase:
        left, right = left.lower(), right.lower()
    previous = list(range(len(right) + 1))
    for i, lch in enumerate(left, start=1):
        current = [i]
        for j, rch in enumerate(right, start=1):
            if lch == rch:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], previous[j], current[j - 1]) + 1)
        previous = current
    return previous[-1]