"""Building new strings out of existing ones.

Strings are ``str`` or bytes-like objects. A NUL character ends a string and
anything after it is ignored. Functions that build a new string return the
same kind they were given: ``str`` for ``str`` and ``bytes`` for bytes-like
input.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Union

StrLike = Union[str, bytes, bytearray, memoryview]
Text = Union[str, bytes]
CharLike = Union[int, str]


def _text(s: StrLike) -> Text:
    """Return ``s`` up to its first NUL, as ``str`` or ``bytes``."""
    if s is None:
        raise TypeError("expected a string, got None")
    if isinstance(s, str):
        return s.split("\0", 1)[0]
    return memoryview(s).tobytes().split(b"\0", 1)[0]


def _same_kind(a: Text, b: Text) -> None:
    if isinstance(a, str) != isinstance(b, str):
        raise TypeError("cannot mix str and bytes-like strings")


def _separator(c: CharLike, like: Text) -> Text:
    """Return the one-character separator ``c`` in the kind of ``like``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        code = ord(c)
    else:
        code = operator.index(c) & 0xFF
    if isinstance(like, str):
        return chr(code)
    if code > 0xFF:
        raise ValueError(f"character {c!r} does not fit in one byte")
    return bytes([code])


def _non_negative(name: str, value: int) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def substr(s: StrLike, start: int, length: int) -> Text:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A ``start`` at or past the end of ``s`` gives an empty string.
    """
    text = _text(s)
    start = _non_negative("start", start)
    length = _non_negative("length", length)
    return text[start:start + length]


def strjoin(s1: StrLike, s2: StrLike) -> Text:
    """Return the concatenation of ``s1`` and ``s2``."""
    first = _text(s1)
    second = _text(s2)
    _same_kind(first, second)
    return first + second


def _words(s: StrLike, c: CharLike) -> list[Text]:
    text = _text(s)
    sep = _separator(c, text)
    return [word for word in text.split(sep) if word]


def count_words(s: StrLike, c: CharLike) -> int:
    """Count the runs of characters other than ``c`` in ``s``."""
    return len(_words(s, c))


def split(s: StrLike, c: CharLike) -> list[Text]:
    """Split ``s`` on ``c``, dropping the empty pieces between separators."""
    return _words(s, c)


def strtrim(s: StrLike, charset: StrLike) -> Text:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    text = _text(s)
    chars = _text(charset)
    _same_kind(text, chars)
    return text.strip(chars)


def strmapi(s: StrLike, func: Callable[[int, CharLike], CharLike]) -> Text:
    """Build a string from ``func(index, char)`` applied to each character.

    For ``str`` input ``func`` receives and returns one-character strings;
    for bytes-like input it receives and returns byte values. A NUL produced
    by ``func`` ends the result.
    """
    text = _text(s)
    if isinstance(text, str):
        mapped: Text = "".join(func(i, ch) for i, ch in enumerate(text))
        return mapped.split("\0", 1)[0]
    mapped = bytes(func(i, byte) for i, byte in enumerate(text))
    return mapped.split(b"\0", 1)[0]


def striteri(
    buf: MutableSequence, func: Callable[[int, CharLike], CharLike | None]
) -> None:
    """Apply ``func(index, char)`` to each character of ``buf`` in place.

    ``buf`` is a mutable sequence of byte values or one-character strings,
    such as a ``bytearray`` or a list. Iteration stops at the first NUL.
    When ``func`` returns a value other than ``None`` it replaces the
    character at that index.
    """
    for index, value in enumerate(buf):
        if value == 0 or value == "\0":
            break
        replacement = func(index, value)
        if replacement is not None:
            buf[index] = replacement