"""Conversions between numbers and their decimal text."""

from __future__ import annotations

import operator
from typing import Union

StrLike = Union[str, bytes, bytearray, memoryview]

_WHITESPACE = frozenset({9, 10, 11, 12, 13, 32})
_ZERO = ord("0")
_NINE = ord("9")
_PLUS = ord("+")
_MINUS = ord("-")
_DOT = ord(".")


def _codes(s: StrLike) -> list[int]:
    """Return the character codes of ``s`` up to its first NUL."""
    if isinstance(s, str):
        return [ord(ch) for ch in s.split("\0", 1)[0]]
    return list(memoryview(s).tobytes().split(b"\0", 1)[0])


def _skip_whitespace(codes: list[int]) -> int:
    pos = 0
    while pos < len(codes) and codes[pos] in _WHITESPACE:
        pos += 1
    return pos


def atoi(s: StrLike) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. Text without digits gives 0.
    """
    codes = _codes(s)
    pos = _skip_whitespace(codes)
    sign = 1
    if pos < len(codes) and codes[pos] in (_PLUS, _MINUS):
        if codes[pos] == _MINUS:
            sign = -1
        pos += 1
    result = 0
    while pos < len(codes) and _ZERO <= codes[pos] <= _NINE:
        result = result * 10 + (codes[pos] - _ZERO)
        pos += 1
    return result * sign


def atodbl(s: StrLike) -> float:
    """Parse a decimal number with an optional fraction.

    Leading whitespace is skipped and any run of signs is read, each minus
    flipping the sign. Characters are not validated: every character before
    the first dot adds its offset from ``'0'`` to the integer part, and every
    character after it adds to the fraction.
    """
    codes = _codes(s)
    pos = _skip_whitespace(codes)
    sign = 1
    while pos < len(codes) and codes[pos] in (_PLUS, _MINUS):
        if codes[pos] == _MINUS:
            sign = -sign
        pos += 1
    integer_part = 0
    while pos < len(codes) and codes[pos] != _DOT:
        integer_part = integer_part * 10 + (codes[pos] - _ZERO)
        pos += 1
    if pos < len(codes):
        pos += 1
    fractional_part = 0.0
    scale = 1.0
    for code in codes[pos:]:
        scale /= 10
        fractional_part += (code - _ZERO) * scale
    return (integer_part + fractional_part) * sign


def count_digits(num: int) -> int:
    """Return the number of characters in the decimal form of ``num``.

    The minus sign of a negative number counts as one character.
    """
    num = operator.index(num)
    count = 1 if num < 0 else 0
    if num == 0:
        return 1
    num = abs(num)
    while num:
        num //= 10
        count += 1
    return count


def itoa(n: int) -> str:
    """Return the decimal text of the integer ``n``."""
    n = operator.index(n)
    digits = []
    magnitude = abs(n)
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(_ZERO + digit))
        if magnitude == 0:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))