import pytest

from libft.text import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen_matches_len():
    for s in ["", "a", "hello world"]:
        assert strlen(s) == len(s)


def test_strchr_finds_first():
    s = "banana"
    assert strchr(s, "a") == s.index("a")
    assert strchr(s, ord("n")) == s.index("n")


def test_strchr_missing_and_nul():
    assert strchr("banana", "z") is None
    assert strchr("banana", 0) == len("banana")
    assert strchr("banana", "\0") == len("banana")


def test_strchr_int_is_taken_modulo_256():
    assert strchr("abc", ord("b") + 256) == "abc".index("b")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last():
    s = "banana"
    assert strrchr(s, "a") == s.rindex("a")
    assert strrchr(s, "z") is None
    assert strrchr(s, 0) == len(s)


def test_strlcpy_full_copy():
    dest = bytearray(10)
    assert strlcpy(dest, b"hello", len(dest)) == len(b"hello")
    assert dest[:6] == b"hello\0"


def test_strlcpy_truncates():
    dest = bytearray(4)
    assert strlcpy(dest, b"hello", 4) == len(b"hello")
    assert bytes(dest) == b"hello"[:3] + b"\0"


def test_strlcpy_zero_size_writes_nothing():
    dest = bytearray(b"xyz")
    assert strlcpy(dest, b"hello", 0) == len(b"hello")
    assert dest == bytearray(b"xyz")


def test_strlcpy_size_larger_than_buffer():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"hi", 5)


def test_strlcat_appends():
    dest = bytearray(b"ab" + bytes(8))
    assert strlcat(dest, b"cd", len(dest)) == len(b"abcd")
    assert dest[:5] == b"ab" + b"cd" + b"\0"


def test_strlcat_truncates():
    dest = bytearray(b"ab" + bytes(2))
    assert strlcat(dest, b"cdef", 4) == len(b"ab") + len(b"cdef")
    assert bytes(dest) == b"ab" + b"c" + b"\0"


def test_strlcat_no_room():
    dest = bytearray(b"abcd")
    assert strlcat(dest, b"xy", 3) == 3 + len(b"xy")
    assert dest == bytearray(b"abcd")


def test_strlcat_zero_size():
    dest = bytearray(b"ab\0")
    assert strlcat(dest, b"xyz", 0) == len(b"xyz")


def test_strdup_equal_copy():
    assert strdup("hello") == "hello"
    assert strdup("") == ""
    with pytest.raises(TypeError):
        strdup(None)


def test_strnstr_found_within_length():
    big = "Foo Bar Baz"
    assert strnstr(big, "Bar", len(big)) == big.index("Bar")
    assert strnstr(big, "Bar", big.index("Bar") + len("Bar")) == big.index("Bar")


def test_strnstr_cut_by_length():
    big = "Foo Bar Baz"
    assert strnstr(big, "Bar", big.index("Bar") + 2) is None
    assert strnstr(big, "Qux", len(big)) is None


def test_strnstr_empty_little():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("", "", 5) == 0


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abc", "ab", 5) > 0


def test_strncmp_difference_of_codes():
    assert strncmp("a", "b", 1) == ord("a") - ord("b")
    assert strncmp("", "b", 1) == -ord("b")


def test_substr():
    s = "hello world"
    assert substr(s, 6, 5) == "world"
    assert substr(s, 6, 100) == "world"
    assert substr(s, len(s), 3) == ""
    assert substr(s, 0, 0) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foo" + "bar"
    assert strjoin("", "") == ""
    with pytest.raises(TypeError):
        strjoin("a", None)


def test_strtrim():
    assert strtrim("xxhelloxyx", "xy") == "hello"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("  keep  ", "") == "  keep  "


def test_strtrim_keeps_inner():
    result = strtrim("--a-b--", "-")
    assert result == "a-b"
    assert result[0] != "-" and result[-1] != "-"


def test_split_drops_empty_words():
    assert split("  hello   world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_int_separator_and_rejoin():
    words = split("a,b,,c", ord(","))
    assert words == ["a", "b", "c"]
    assert all("," not in w and w for w in words)


def test_split_nul_separator_returns_whole():
    assert split("abc def", "\0") == ["abc def"]


def test_striteri_replaces_in_place():
    buf = list("abc")
    striteri(buf, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert buf == ["A", "b", "C"]


def test_striteri_stops_at_nul():
    buf = bytearray(b"ab\0cd")
    seen = []
    striteri(buf, lambda i, b: seen.append(i))
    assert seen == [0, 1]
    assert buf == bytearray(b"ab\0cd")


def test_strmapi():
    result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 else ch)
    assert result == "aBcD"
    assert strmapi("", lambda i, ch: ch) == ""


def test_strmapi_rejects_bad_result():
    with pytest.raises(ValueError):
        strmapi("ab", lambda i, ch: ch * 2)
    with pytest.raises(TypeError):
        strmapi("ab", None)