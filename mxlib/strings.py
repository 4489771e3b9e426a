"""String comparison, searching, splitting and rewriting helpers."""

import re
from itertools import zip_longest
from typing import Optional

_SPACE_CHARS = "\t\n\v\f\r "
_SPACE_RUN = re.compile(r"[\t\n\v\f\r ]+")


def _check_delim(delim: str) -> None:
    if not isinstance(delim, str) or len(delim) != 1:
        raise ValueError("delimiter must be a single character")


def strcmp(s1: str, s2: str) -> int:
    """Return the code-point difference at the first mismatch, or 0 if equal.

    A string that ends first compares as if followed by a NUL character.
    """
    for a, b in zip_longest(s1, s2, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strncmp(s1: str, s2: str, size: int) -> int:
    """Compare at most size characters; a non-positive size compares the whole strings."""
    if size > 0:
        s1, s2 = s1[:size], s2[:size]
    return strcmp(s1, s2)


def strstr(haystack: str, needle: str) -> Optional[str]:
    """Return haystack from the first occurrence of needle, or None if absent."""
    index = haystack.find(needle)
    return haystack[index:] if index >= 0 else None


def find_char(text: str, c: str) -> int:
    """Return the index of the first c in text, or -1 if absent."""
    _check_delim(c)
    return text.find(c)


def find_substr(text: str, sub: str) -> int:
    """Return the index of the first non-empty sub in text, or -1 if absent."""
    if not sub:
        return -1
    return text.find(sub)


def count_substr(text: str, sub: str) -> int:
    """Count non-overlapping occurrences of sub; an empty sub counts as 0."""
    return text.count(sub) if sub else 0


def count_words(text: str, delim: str) -> int:
    """Count the non-empty runs of characters separated by delim."""
    return len(strsplit(text, delim))


def strtrim(text: str) -> str:
    """Strip ASCII whitespace from both ends."""
    return text.strip(_SPACE_CHARS)


def del_extra_spaces(text: str) -> str:
    """Trim text and collapse every whitespace run inside it to one space."""
    return _SPACE_RUN.sub(" ", strtrim(text))


def strsplit(text: str, delim: str) -> list[str]:
    """Split text on delim, dropping empty pieces."""
    _check_delim(delim)
    return [word for word in text.split(delim) if word]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is skipped, and two give None."""
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def replace_substr(text: str, sub: str, replace: str) -> str:
    """Replace every non-overlapping sub with replace; an empty sub changes nothing."""
    return text.replace(sub, replace) if sub else text


def str_reverse(text: str) -> str:
    """Return text reversed."""
    return text[::-1]