import pytest

from mshell.strutils import atoi, itoa, split, strncmp, strnstr, strtrim, substr


@pytest.mark.parametrize("number", [0, 1, -1, 7, 123456, -98765, 2147483647, -2147483648])
def test_atoi_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n  -17abc") == -17
    assert atoi("+25 30") == 25


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == atoi("") == atoi("-") == 0


def test_atoi_overflow_limits():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


def test_atoi_wraps_to_32_bits():
    for n in (0, 5, 123):
        assert atoi(str(2**32 + n)) == atoi(str(n))


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_split_drops_empty_words():
    assert split("  hello   world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_invariants():
    text = "a,,bb,ccc,,,d,"
    words = split(text, ",")
    assert all(words)
    assert all("," not in word for word in words)
    assert "".join(words) == text.replace(",", "")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xyxy", "xy") == ""
    assert strtrim(" keep ", "") == " keep "


def test_strtrim_keeps_inner_characters():
    assert strtrim("--a-b--", "-") == "a-b"


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 5, 1) == ""
    assert substr("hello", 50, 2) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_finds_match():
    haystack = "hello world"
    index = strnstr(haystack, "world", len(haystack))
    assert index is not None
    assert haystack[index:].startswith("world")
    assert strnstr(haystack, "world", len(haystack) - 1) is None


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None
    assert strnstr("", "a", 5) is None


def test_strncmp():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_is_antisymmetric_and_handles_prefix():
    assert strncmp("ab", "abc", 5) == -strncmp("abc", "ab", 5)
    assert strncmp("ab", "abc", 5) < 0