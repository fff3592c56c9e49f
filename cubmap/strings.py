"""String helpers with bounded copying, searching, splitting and trimming."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Tuple, TypeVar, Union

CharLike = Union[str, int]
T = TypeVar("T")


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; integers are taken as char codes."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the terminator (code 0) gives the index just past the end.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the terminator (code 0) gives the index just past the end.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return -1, 0 or 1.

    A string that ends first compares lower than one that goes on.
    """
    _check_size("n", n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a < b:
            return -1
        if a > b:
            return 1
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0; otherwise None means not found.
    """
    _check_size("length", length)
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return "".join(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` from ``start``.

    A start at or past the end gives an empty string; None gives None.
    """
    _check_size("start", start)
    _check_size("length", length)
    if s is None:
        return None
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; None if either is None."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip every character found in ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        return None
    return s.strip(charset)


def split(s: Optional[str], sep: CharLike) -> Optional[list[str]]:
    """Split ``s`` on ``sep``, dropping empty fields; None gives None."""
    if s is None:
        return None
    ch = _char(sep)
    return [field for field in s.split(ch) if field]


def strmapi(s: Optional[str], f: Callable[[int, str], str]) -> Optional[str]:
    """Build a new string from ``f(index, char)`` applied to each character."""
    if s is None or f is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    s: Optional[MutableSequence[T]], f: Callable[[int, T], Optional[T]]
) -> None:
    """Apply ``f(index, item)`` to each item of ``s`` in place.

    A non-None result replaces the item; None leaves it as it was.
    """
    if s is None or f is None:
        return
    for index, item in enumerate(s):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``; truncation
    happened when that length is ``size`` or more.
    """
    _check_size("size", size)
    copied = src[:size - 1] if size else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have
    had: ``min(len(dest), size) + len(src)``.
    """
    _check_size("size", size)
    dest_len = min(len(dest), size)
    if dest_len >= size:
        return dest, dest_len + len(src)
    room = size - dest_len - 1
    return dest + src[:room], dest_len + len(src)