"""Classification of single ASCII characters."""

_SPACE_CHARS = frozenset("\t\n\v\f\r ")


def _check_char(c: str) -> None:
    if not isinstance(c, str):
        raise TypeError(f"expected a one-character string, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")


def is_space(c: str) -> bool:
    """Return True for tab, newline, vertical tab, form feed, carriage return or space."""
    _check_char(c)
    return c in _SPACE_CHARS


def is_alpha(c: str) -> bool:
    """Return True for an ASCII letter."""
    _check_char(c)
    return "A" <= c <= "Z" or "a" <= c <= "z"


def is_digit(c: str) -> bool:
    """Return True for an ASCII decimal digit."""
    _check_char(c)
    return "0" <= c <= "9"