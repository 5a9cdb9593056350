"""String utilities: searching, copying, comparing, slicing and mapping.

Functions that look for a character or a substring return an index, or
``None`` when there is no match. The bounded copy functions ``strlcpy``
and ``strlcat`` work on NUL-terminated bytes held in a ``bytearray``.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    """Return *c* as a one-character string; integers are taken modulo 256."""
    if isinstance(c, bool):
        raise TypeError("expected a character code or a one-character string")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    raise TypeError("expected a character code or a one-character string")


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _c_string(data) -> bytes:
    """Return the bytes of *data* up to, not including, the first NUL."""
    raw = bytes(data)
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def _check_size(dest: bytearray, size: int) -> None:
    _check_non_negative(size, "size")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds buffer length {len(dest)}")


def strlen(s: str) -> int:
    """Return the length of *s*."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first *c* in *s*; a NUL character matches the end of *s*."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last *c* in *s*; a NUL character matches the end of *s*."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strlcpy(dest: bytearray, src, size: int) -> int:
    """Copy the C string *src* into *dest*, writing at most *size* bytes.

    The copy is always NUL-terminated when *size* is positive. Returns the
    length of *src*, so a result of *size* or more means truncation.
    """
    _check_size(dest, size)
    source = _c_string(src)
    if size:
        count = min(len(source), size - 1)
        dest[:count] = source[:count]
        dest[count] = 0
    return len(source)


def strlcat(dest: bytearray, src, size: int) -> int:
    """Append the C string *src* to the C string in *dest*, bounded by *size*.

    Returns the length of the string it tried to build. If no NUL is found
    in the first *size* bytes of *dest*, nothing is written and the result
    is ``size + len(src)``.
    """
    _check_size(dest, size)
    source = _c_string(src)
    terminator = bytes(dest[:size]).find(0)
    dest_len = size if terminator < 0 else terminator
    if size == 0 or dest_len >= size:
        return size + len(source)
    count = min(len(source), size - dest_len - 1)
    dest[dest_len:dest_len + count] = source[:count]
    dest[dest_len + count] = 0
    return dest_len + len(source)


def strdup(s: str) -> str:
    """Return a copy of *s*."""
    if not isinstance(s, str):
        raise TypeError("expected a string")
    return "".join(s)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first *little* lying wholly within the first *length* chars."""
    _check_non_negative(length, "length")
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; return the code difference at the first mismatch."""
    _check_non_negative(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def substr(s: str, start: int, length: int) -> str:
    """Return up to *length* characters of *s* starting at *start*."""
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("expected two strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in *charset* from both ends of *s*."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("expected two strings")
    return s.strip(charset) if charset else s


def split(s: str, sep: CharLike) -> list[str]:
    """Split *s* on the character *sep*, dropping empty words."""
    if not isinstance(s, str):
        raise TypeError("expected a string")
    return [word for word in s.split(_char(sep)) if word]


def _is_terminator(value) -> bool:
    return value == 0 or value == "\0"


def striteri(buf: MutableSequence, func: Callable) -> None:
    """Call ``func(index, item)`` for each item of *buf* up to a NUL, in place.

    When *func* returns something other than ``None``, that value replaces
    the item in *buf*.
    """
    if not callable(func):
        raise TypeError("func must be callable")
    for index, item in enumerate(list(buf)):
        if _is_terminator(item):
            break
        replacement = func(index, item)
        if replacement is not None:
            buf[index] = replacement


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    if not callable(func):
        raise TypeError("func must be callable")
    mapped = []
    for index, ch in enumerate(s):
        result = func(index, ch)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError("func must return a single character")
        mapped.append(result)
    return "".join(mapped)