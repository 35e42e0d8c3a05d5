import pytest

from pushswap.transform import (
    atoi,
    itoa,
    split,
    striteri,
    strjoin,
    strmapi,
    strtrim,
    substr,
)


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_start_past_end_is_empty():
    assert substr("abc", 5, 2) == ""
    assert substr("abc", 3, 1) == ""


def test_substr_length_is_clamped():
    text = "abcdef"
    result = substr(text, 2, 100)
    assert text.endswith(result)
    assert len(result) == len(text) - 2


def test_substr_none_and_negative():
    assert substr(None, 0, 0) is None
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foo" + "bar"
    assert strjoin("", "x") == "x"
    assert strjoin(None, "x") is None
    assert strjoin("x", None) is None


def test_strtrim_both_ends():
    assert strtrim("  xx hi xx ", " x") == "hi"


def test_strtrim_everything_trimmed():
    assert strtrim("xxxx", "x") == ""
    assert strtrim("", "x") == ""


def test_strtrim_empty_charset_and_none():
    assert strtrim("abc", "") == "abc"
    assert strtrim(None, "a") is None
    assert strtrim("abc", None) is None


def test_split_drops_empty_words():
    assert split("  1 2   3 ", " ") == ["1", "2", "3"]


@pytest.mark.parametrize("text", ["", "   ", " "])
def test_split_blank(text):
    assert split(text, " ") == []


@pytest.mark.parametrize("text", ["a b c", "  -5 42  7 ", "single"])
def test_split_words_contain_no_separator(text):
    words = split(text, " ")
    assert all(" " not in word and word for word in words)
    assert " ".join(words) == " ".join(text.split())


def test_split_errors_and_none():
    with pytest.raises(ValueError):
        split("a,b", ",,")
    assert split(None, " ") is None


@pytest.mark.parametrize("n", [0, -1, 7, 2147483647, -2147483648, 123456])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)
    with pytest.raises(OverflowError):
        itoa(-2147483649)


def test_atoi_whitespace_sign_and_trailing_text():
    assert atoi("  \t\n-42xyz") == -42
    assert atoi("+7") == 7


@pytest.mark.parametrize("text", ["abc", "--5", "+-3", "", " "])
def test_atoi_no_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_wraps_like_int32():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


def test_strmapi_uses_char_and_index():
    assert strmapi("abc", lambda i, c: c.upper()) == "abc".upper()
    assert strmapi("aaa", lambda i, c: str(i)) == "012"
    assert strmapi(None, lambda i, c: c) is None
    assert strmapi("abc", None) is None


def test_striteri_modifies_in_place():
    chars = list("abc")
    striteri(chars, lambda i, c: c.upper())
    assert chars == list("ABC")


def test_striteri_sees_indices_and_keeps_on_none():
    chars = list("xyz")
    seen = []
    striteri(chars, lambda i, c: seen.append((i, c)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]
    assert chars == list("xyz")


def test_striteri_without_function_changes_nothing():
    chars = list("ab")
    striteri(chars, None)
    assert chars == ["a", "b"]