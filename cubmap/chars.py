"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: CharLike) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(c) <= 57


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        return _same_kind(c, code - 32)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        return _same_kind(c, code + 32)
    return c


def _wrap_int32(value: int) -> int:
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit.  Text with no digits yields 0.  The
    result wraps to a 32-bit signed integer.
    """
    chars = iter(s)
    sign = 1
    value = 0
    current = next(chars, "")
    while current in _WHITESPACE and current:
        current = next(chars, "")
    if current in ("-", "+") and current:
        if current == "-":
            sign = -1
        current = next(chars, "")
    while current and current in _DIGITS:
        value = value * 10 + int(current)
        current = next(chars, "")
    return _wrap_int32(value * sign)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer as decimal text."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    digits = str(abs(n))
    return f"-{digits}" if n < 0 else digits