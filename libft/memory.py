"""Byte-buffer operations on mutable buffers such as bytearray."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf, c: int, n: int):
    """Fill the first *n* bytes of *buf* with ``c & 0xFF`` and return *buf*."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf, n: int):
    """Zero the first *n* bytes of *buf* and return it."""
    return memset(buf, 0, n)


def memcpy(dest, src, n: int):
    """Copy *n* bytes from *src* to the start of *dest* and return *dest*."""
    if n == 0:
        return dest
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest, src, n: int):
    """Copy *n* bytes from *src* to *dest*; the regions may overlap."""
    _check_count(n, dest, src)
    # Taking a snapshot of the source first makes overlap harmless.
    dest[:n] = bytes(src[:n])
    return dest


def memcmp(s1, s2, n: int) -> int:
    """Compare the first *n* bytes; return the difference of the first mismatch."""
    _check_count(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def memchr(s, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte ``c & 0xFF`` in the first *n* bytes."""
    _check_count(n, s)
    index = bytes(s[:n]).find(c & 0xFF)
    return None if index < 0 else index


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if nmemb > SIZE_MAX // size:
        raise OverflowError("requested size overflows")
    return bytearray(nmemb * size)