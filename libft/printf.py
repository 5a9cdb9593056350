"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

from libft.convert import itoa
from libft.output import putstr_fd

HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"
DEC_LOWER = "0123456789"

UINT_MAX = 2**32 - 1
UINTPTR_MAX = 2**64 - 1

CharLike = Union[int, str]


def _check_base(base: Optional[str]) -> str:
    if base is None or len(base) < 2:
        raise ValueError("base must hold at least two digits")
    return base


def _digits(n: int, base: str) -> str:
    radix = len(base)
    digits = []
    while n > 0:
        n, remainder = divmod(n, radix)
        digits.append(base[remainder])
    return "".join(reversed(digits))


def char_string(c: CharLike) -> str:
    """Return a one-character string; integer codes are truncated to a byte."""
    if isinstance(c, bool):
        raise TypeError("expected a character code or a one-character string")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    raise TypeError("expected a character code or a one-character string")


def pointer_string(n: int, base: Optional[str]) -> str:
    """Return an address as ``0x`` followed by its digits, or ``(nil)`` for zero."""
    if not 0 <= n <= UINTPTR_MAX:
        raise ValueError(f"address {n} out of range")
    if n == 0:
        return "(nil)"
    return "0x" + _digits(n, _check_base(base))


def utoa_base(n: int, base: Optional[str]) -> str:
    """Return the unsigned 32-bit value *n* written with the digits of *base*."""
    if not 0 <= n <= UINT_MAX:
        raise OverflowError(f"{n} does not fit in an unsigned 32-bit int")
    if n == 0:
        return "0"
    return _digits(n, _check_base(base))


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"missing argument for %{spec}") from None


def expand(spec: str, args: Iterator[Any]) -> str:
    """Expand one conversion, taking its argument from the iterator *args*.

    ``%`` and unknown conversions take no argument; unknown ones expand to
    the empty string.
    """
    if spec in ("d", "i"):
        return itoa(_next_arg(args, spec))
    if spec == "s":
        value = _next_arg(args, spec)
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError("%s expects a string or None")
        return value
    if spec == "c":
        return char_string(_next_arg(args, spec))
    if spec == "p":
        value = _next_arg(args, spec)
        return pointer_string(0 if value is None else value, HEX_LOWER)
    if spec == "u":
        return utoa_base(_next_arg(args, spec) & UINT_MAX, DEC_LOWER)
    if spec == "x":
        return utoa_base(_next_arg(args, spec) & UINT_MAX, HEX_LOWER)
    if spec == "X":
        return utoa_base(_next_arg(args, spec) & UINT_MAX, HEX_UPPER)
    if spec == "%":
        return "%"
    return ""


def format_output(fmt: str, *args: Any) -> str:
    """Return *fmt* with each conversion replaced by its expanded argument."""
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    pending = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch == "%":
            pieces.append(expand(next(chars, ""), pending))
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(fd: int, fmt: str, *args: Any) -> int:
    """Format and write to *fd*; return the number of bytes written."""
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    if fd < 0:
        raise ValueError("file descriptor must not be negative")
    text = format_output(fmt, *args)
    putstr_fd(text, fd)
    return len(text.encode("utf-8"))