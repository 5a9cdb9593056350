"""Writing characters, strings and integers straight to file descriptors."""

from __future__ import annotations

import os
from typing import Union

from libft.convert import itoa

CharLike = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    """Write every byte of *data* to *fd*, retrying after short writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _char_bytes(c: CharLike) -> bytes:
    if isinstance(c, bool):
        raise TypeError("expected a byte value or a one-character string")
    if isinstance(c, int):
        if not 0 <= c <= 0xFF:
            raise ValueError(f"byte value {c} out of range 0..255")
        return bytes([c])
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c.encode("utf-8")
    raise TypeError("expected a byte value or a one-character string")


def _text_bytes(s: str) -> bytes:
    if not isinstance(s, str):
        raise TypeError("expected a string")
    return s.encode("utf-8")


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write the single character *c* to *fd*."""
    _write_all(fd, _char_bytes(c))


def putstr_fd(s: str, fd: int) -> None:
    """Write the string *s* to *fd*."""
    _write_all(fd, _text_bytes(s))


def putendl_fd(s: str, fd: int) -> None:
    """Write *s* followed by a newline to *fd*."""
    _write_all(fd, _text_bytes(s) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of the 32-bit int *n* to *fd*."""
    _write_all(fd, itoa(n).encode("ascii"))