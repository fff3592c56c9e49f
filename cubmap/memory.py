"""Byte-buffer helpers: filling, copying, moving, searching, comparing, allocating."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]
MutableBytes = Union[bytearray, memoryview]

CALLOC_LIMIT = 2147483424


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _check_span(name: str, data: Bytes, offset: int, n: int) -> None:
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative, got {offset}")
    if offset + n > len(data):
        raise IndexError(
            f"{name}: {n} bytes from offset {offset} exceed a buffer of {len(data)}"
        )


def memset(buffer: MutableBytes, c: int, n: int) -> MutableBytes:
    """Set the first ``n`` bytes of ``buffer`` to ``c`` (taken modulo 256)."""
    _check_count("n", n)
    _check_span("memset", buffer, 0, n)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def bzero(buffer: MutableBytes, n: int) -> MutableBytes:
    """Zero the first ``n`` bytes of ``buffer``."""
    return memset(buffer, 0, n)


def memcpy(dest: MutableBytes, src: Bytes, n: int) -> MutableBytes:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count("n", n)
    _check_span("memcpy source", src, 0, n)
    _check_span("memcpy destination", dest, 0, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(
    buffer: MutableBytes, dest_offset: int, src_offset: int, n: int
) -> MutableBytes:
    """Move ``n`` bytes within ``buffer``; overlapping ranges are handled."""
    _check_count("n", n)
    _check_span("memmove source", buffer, src_offset, n)
    _check_span("memmove destination", buffer, dest_offset, n)
    chunk = bytes(buffer[src_offset:src_offset + n])
    buffer[dest_offset:dest_offset + n] = chunk
    return buffer


def memchr(data: Bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (modulo 256) in ``data[:n]``, or None."""
    _check_count("n", n)
    _check_span("memchr", data, 0, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Bytes, b: Bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_count("n", n)
    _check_span("memcmp first operand", a, 0, n)
    _check_span("memcmp second operand", b, 0, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate ``nmemb * size`` zeroed bytes.

    Requests larger than ``CALLOC_LIMIT`` bytes raise MemoryError.
    """
    _check_count("nmemb", nmemb)
    _check_count("size", size)
    total = nmemb * size
    if total > CALLOC_LIMIT:
        raise MemoryError(f"refusing to allocate {total} bytes")
    return bytearray(total)