# libft

Helpers modelled on the classic C standard library. The package covers
character classification, operations on byte buffers, integer/string
conversion, string utilities, writing to file descriptors, a singly
linked list and a compact `printf`-style formatter.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.chars`

`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower` and
`toupper`. Each one accepts an integer character code or a one-character
string. The tests look at ASCII ranges only. `tolower` and `toupper`
return a value of the same kind they were given, and return anything
that is not an ASCII letter unchanged.

### `libft.memory`

`memset`, `bzero`, `memcpy`, `memmove`, `memcmp`, `memchr` and `calloc`
work on mutable byte buffers such as `bytearray`.

- The writing functions return the destination buffer.
- `memcmp` returns the difference of the first pair of bytes that differ,
  or 0 when there is none.
- `memchr` returns an index, or `None` when there is no match.
- `calloc(nmemb, size)` returns a zeroed `bytearray`. It raises
  `OverflowError` when the product overflows a 64-bit size.
- A negative byte count, or one longer than a buffer, raises `ValueError`.

### `libft.convert`

- `atoi(text)` skips leading whitespace and accepts one sign. It parses
  digits up to the first non-digit and saturates to `INT_MAX` or
  `INT_MIN` on 32-bit overflow.
- `itoa(n)` returns the decimal text of a 32-bit int. It raises
  `OverflowError` outside that range.

### `libft.text`

`strlen`, `strchr`, `strrchr`, `strlcpy`, `strlcat`, `strdup`, `strnstr`,
`strncmp`, `substr`, `strjoin`, `strtrim`, `split`, `striteri` and
`strmapi`.

- The search functions return an index, or `None` when nothing matches.
  For `strchr` and `strrchr`, a NUL character matches the end of the
  string.
- `strlcpy` and `strlcat` copy NUL-terminated bytes into a `bytearray`.
  They return the length of the string they tried to build.
- `split(s, sep)` drops empty words.
- `striteri(buf, func)` calls `func(index, item)` for each item up to the
  first NUL. When `func` returns a value other than `None`, that value
  replaces the item in place.
- `strmapi(s, func)` builds a new string from `func(index, char)`, which
  must return a single character.

### `libft.output`

`putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write UTF-8 text
to an open file descriptor. They retry after short writes.

### `libft.linkedlist`

`Node` holds a `content` and a `next` link. `LinkedList` can be built from
an iterable and offers:

- `push_front` and `push_back`, which return the new node;
- `last`, which returns the final node or `None`;
- `len()` and iteration over the contents;
- `clear(delete)`;
- `for_each(func)`;
- `map(func, delete)`. If `func` raises part way through, the contents
  produced so far are passed to `delete` and the exception propagates.

### `libft.printf`

`format_output(fmt, *args)` returns the formatted string. `printf(fd, fmt,
*args)` writes it to `fd` and returns the number of bytes written.

Supported conversions are `%c %s %d %i %u %x %X %p %%`:

- `%s` with `None` gives `(null)`.
- `%p` with 0 or `None` gives `(nil)`.
- Unknown conversions expand to nothing.
- A missing argument raises `TypeError`.

The helpers `char_string`, `pointer_string`, `utoa_base` and `expand` are
also public.

## Example

```python
from libft.convert import atoi, itoa
from libft.text import split, strtrim
from libft.linkedlist import LinkedList
from libft.printf import format_output, printf

atoi("   -42abc")            # -42
itoa(-2147483648)            # "-2147483648"
split("  a b  c ", " ")      # ["a", "b", "c"]
strtrim("xxhixx", "x")       # "hi"

items = LinkedList([1, 2])
doubled = items.map(lambda v: v * 2, lambda v: None)
list(doubled)                # [2, 4]

format_output("%s=%x", "n", 255)   # "n=ff"
printf(1, "%d items\n", 3)         # writes to stdout, returns 8
```

## What it does not do

This is a library only. It has no command-line program, and it does not
manage raw memory. Buffers are ordinary Python `bytearray` objects, and
strings are Python `str` values.