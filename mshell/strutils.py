"""Small string helpers used throughout the shell."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_LLONG_MAX = 2**63 - 1


def _to_int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def atoi(text: str) -> int:
    """Parse a leading integer from ``text``.

    Leading whitespace and one sign are accepted and parsing stops at the
    first non-digit.  A magnitude above the signed 64-bit limit yields -1
    for positive input and 0 for negative input.  The result is wrapped to
    a signed 32-bit integer.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    while position < length and "0" <= text[position] <= "9":
        result = result * 10 + (ord(text[position]) - ord("0"))
        if result > _LLONG_MAX:
            return -1 if sign == 1 else 0
        position += 1
    return _to_int32(result * sign)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(int(number))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first match, or None.  An empty needle
    matches at index 0.
    """
    if not needle:
        return 0
    limit = min(len(haystack), length)
    end = limit - len(needle)
    for index in range(end + 1):
        if haystack.startswith(needle, index):
            return index
    return None


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` bytes of two strings.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    left = first.encode("utf-8")
    right = second.encode("utf-8")
    for index in range(n):
        a = left[index] if index < len(left) else 0
        b = right[index] if index < len(right) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0