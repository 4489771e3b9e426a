"""Integer parsing, formatting and small arithmetic helpers."""

import math
import string
from itertools import dropwhile, repeat, takewhile

from mxlib.chars import is_digit, is_space

_ULONG_MASK = (1 << 64) - 1
_HEX_CHARS = frozenset(string.hexdigits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; text without digits gives 0.
    """
    rest = "".join(dropwhile(is_space, text))
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    elif rest.startswith("+"):
        rest = rest[1:]
    digits = "".join(takewhile(is_digit, rest))
    return sign * int(digits) if digits else 0


def digits_num(num: int) -> int:
    """Return the number of characters in the decimal form of num, sign included."""
    count = 1 if num < 0 else 0
    num = abs(num)
    if num == 0:
        return 1
    while num:
        count += 1
        num //= 10
    return count


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    if not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return str(number)


def nbr_to_hex(nbr: int) -> str:
    """Return the lowercase hexadecimal form of an unsigned 64-bit number."""
    if not 0 <= nbr <= _ULONG_MASK:
        raise ValueError(f"{nbr} is outside the unsigned 64-bit range")
    return format(nbr, "x")


def hex_to_nbr(text: str) -> int:
    """Parse a hexadecimal string of either case, without prefix.

    The result wraps to 64 bits; an empty string gives 0.
    """
    bad = next((ch for ch in text if ch not in _HEX_CHARS), None)
    if bad is not None:
        raise ValueError(f"invalid hexadecimal digit {bad!r} in {text!r}")
    if not text:
        return 0
    return int(text, 16) & _ULONG_MASK


def power(base: float, exponent: int) -> float:
    """Raise base to a non-negative integer exponent by repeated multiplication."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return math.prod(repeat(float(base), exponent), start=1.0)


def exact_sqrt(x: int) -> int:
    """Return the integer square root of a perfect square, or 0 otherwise."""
    if x <= 0:
        return 0
    root = math.isqrt(x)
    return root if root * root == x else 0