"""ASCII character classification and case conversion.

Every function accepts either an integer code point or a one-character
string. The classifiers return a ``bool``. The converters return a value of
the same kind as their argument.
"""

from __future__ import annotations

import operator

CharLike = int | str

_UPPER_A = ord("A")
_UPPER_Z = ord("Z")
_LOWER_A = ord("a")
_LOWER_Z = ord("z")
_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")
_CASE_OFFSET = 32


def _code(c: CharLike) -> int:
    """Return the integer code of a character given as int or 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _like(original: CharLike, code: int) -> CharLike:
    """Return ``code`` in the same form (str or int) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return _UPPER_A <= code <= _UPPER_Z or _LOWER_A <= code <= _LOWER_Z


def isdigit(c: CharLike) -> bool:
    """Return True for an ASCII decimal digit."""
    return _DIGIT_0 <= _code(c) <= _DIGIT_9


def isalnum(c: CharLike) -> bool:
    """Return True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """Return True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lowercase letter to uppercase; leave anything else alone."""
    code = _code(c)
    if _LOWER_A <= code <= _LOWER_Z:
        return _like(c, code - _CASE_OFFSET)
    return c


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII uppercase letter to lowercase; leave anything else alone."""
    code = _code(c)
    if _UPPER_A <= code <= _UPPER_Z:
        return _like(c, code + _CASE_OFFSET)
    return c