"""Writing characters, strings and numbers to byte streams."""

import sys
from typing import BinaryIO, Iterable, Optional

_MAX_CODE = 0x10FFFF


def _stdout(stream: Optional[BinaryIO]) -> BinaryIO:
    return stream if stream is not None else sys.stdout.buffer


def encode_utf8(code: int) -> bytes:
    """Encode a code point as UTF-8; surrogate code points are encoded as well."""
    if not 0 <= code <= _MAX_CODE:
        raise ValueError(f"code point {code:#x} is out of range")
    if code < 0x80:
        return bytes([code])
    if code < 0x800:
        return bytes([0xC0 | (code >> 6 & 0x1F), 0x80 | (code & 0x3F)])
    if code < 0x10000:
        return bytes([
            0xE0 | (code >> 12 & 0x0F),
            0x80 | (code >> 6 & 0x3F),
            0x80 | (code & 0x3F),
        ])
    return bytes([
        0xF0 | (code >> 18 & 0x07),
        0x80 | (code >> 12 & 0x3F),
        0x80 | (code >> 6 & 0x3F),
        0x80 | (code & 0x3F),
    ])


def print_char(c: str, stream: Optional[BinaryIO] = None) -> None:
    """Write one character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    _stdout(stream).write(c.encode("utf-8"))


def print_unicode(code: int, stream: Optional[BinaryIO] = None) -> None:
    """Write a code point as UTF-8; code point 0 writes nothing."""
    encoded = encode_utf8(code)
    if code:
        _stdout(stream).write(encoded)


def print_str(text: Optional[str], stream: Optional[BinaryIO] = None) -> None:
    """Write a string; None writes nothing."""
    if text is not None:
        _stdout(stream).write(text.encode("utf-8"))


def print_strarr(
    items: Optional[Iterable[str]],
    delim: Optional[str],
    stream: Optional[BinaryIO] = None,
) -> None:
    """Write the strings separated by delim, then a newline.

    Nothing is written when either items or delim is None.
    """
    if items is None or delim is None:
        return
    _stdout(stream).write((delim.join(items) + "\n").encode("utf-8"))


def print_int(n: int, stream: Optional[BinaryIO] = None) -> None:
    """Write an integer in decimal."""
    if not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _stdout(stream).write(str(n).encode("ascii"))


def print_err(text: str, stream: Optional[BinaryIO] = None) -> None:
    """Write a string to standard error, or to the given stream."""
    target = stream if stream is not None else sys.stderr.buffer
    target.write(text.encode("utf-8"))