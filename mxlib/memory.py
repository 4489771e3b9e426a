"""Byte-buffer comparison, searching and copying helpers."""

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_byte(c: int) -> None:
    if not 0 <= c <= 0xFF:
        raise ValueError(f"byte value {c} is outside 0..255")


def _check_count(n: int, *buffers: bytes) -> None:
    if n < 0:
        raise ValueError("byte count must be non-negative")
    if any(n > len(buf) for buf in buffers):
        raise ValueError(f"byte count {n} exceeds the buffer length")


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first n bytes; return the difference at the first mismatch or 0."""
    a, b = bytes(a), bytes(b)
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte c within the first n bytes, or None.

    The search also stops at the first zero byte.
    """
    _check_byte(c)
    window = bytes(data)[:n].split(b"\0", 1)[0]
    index = window.find(bytes([c]))
    return index if index >= 0 else None


def memrchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the last byte c within the first n bytes, or None."""
    _check_byte(c)
    index = bytes(data).rfind(bytes([c]), 0, max(n, 0))
    return index if index >= 0 else None


def memmem(big: BytesLike, little: BytesLike) -> Optional[int]:
    """Return the index of the first occurrence of little in big, or None.

    Empty buffers never match, and no match may start at or after the
    first zero byte of big.
    """
    big, little = bytes(big), bytes(little)
    if not big or not little or len(little) > len(big):
        return None
    terminator = big.find(b"\0")
    limit = len(big) if terminator < 0 else terminator
    index = big.find(little)
    return index if 0 <= index < limit else None


def memccpy(dst: Union[bytearray, memoryview], src: BytesLike, c: int, n: int) -> Optional[int]:
    """Copy bytes from src into dst until byte c has been copied or n bytes are done.

    Return the index in dst just after the copied c, or None if c was not found.
    """
    _check_byte(c)
    src = bytes(src)
    _check_count(n, src)
    if n > len(dst):
        raise ValueError(f"byte count {n} exceeds the destination length")
    stop = src.find(bytes([c]), 0, n)
    count = n if stop < 0 else stop + 1
    dst[:count] = src[:count]
    return stop + 1 if stop >= 0 else None