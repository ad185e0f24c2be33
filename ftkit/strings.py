"""NUL-terminated string helpers.

A string is a ``str`` or any bytes-like object. A NUL character (``"\\0"``
or the byte ``0``) ends it, and anything after the first NUL is ignored.
Search functions return an index into the string, or ``None`` when nothing
is found.

``strlcpy`` and ``strlcat`` write into a fixed-size byte buffer: a
``bytearray`` or a writable ``memoryview``. A write that would not fit in
the buffer raises ``ValueError``.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Union

StrLike = Union[str, bytes, bytearray, memoryview]
CharLike = Union[int, str]
Buffer = Union[bytearray, memoryview]


def _codes(s: StrLike) -> Sequence[int]:
    """Return the character codes of ``s`` up to its first NUL."""
    if isinstance(s, str):
        return tuple(ord(ch) for ch in s.split("\0", 1)[0])
    return memoryview(s).tobytes().split(b"\0", 1)[0]


def _byte_string(s: StrLike) -> bytes:
    """Return the bytes of a bytes-like ``s`` up to its first NUL."""
    if isinstance(s, str):
        raise TypeError("expected a bytes-like object, not str")
    return memoryview(s).tobytes().split(b"\0", 1)[0]


def _char_code(c: CharLike) -> int:
    """Return the code of ``c``; integers are narrowed to one byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c) & 0xFF


def _check_count(name: str, value: int) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _ensure_capacity(buf: Buffer, needed: int) -> None:
    if needed > len(buf):
        raise ValueError(
            f"buffer of {len(buf)} bytes cannot hold {needed} bytes"
        )


def strlen(s: StrLike) -> int:
    """Return the number of characters before the first NUL."""
    return len(_codes(s))


def strchr(s: StrLike, c: CharLike) -> int | None:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    codes = _codes(s)
    target = _char_code(c)
    if target == 0:
        return len(codes)
    return next((i for i, code in enumerate(codes) if code == target), None)


def strrchr(s: StrLike, c: CharLike) -> int | None:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    codes = _codes(s)
    target = _char_code(c)
    if target == 0:
        return len(codes)
    found = None
    for i, code in enumerate(codes):
        if code == target:
            found = i
    return found


def strncmp(s1: StrLike, s2: StrLike, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of codes that differ, the
    terminator counting as code 0, or 0 when the compared parts match.
    """
    n = _check_count("n", n)
    a = _codes(s1)
    b = _codes(s2)
    for i in range(min(n, max(len(a), len(b)) + 1)):
        x = a[i] if i < len(a) else 0
        y = b[i] if i < len(b) else 0
        if x != y or x == 0:
            return x - y
    return 0


def strlcpy(dest: Buffer, src: StrLike, size: int) -> int:
    """Copy ``src`` into ``dest``, writing at most ``size`` bytes with NUL.

    Returns the length of ``src``, so a result of ``size`` or more means the
    copy was truncated.
    """
    size = _check_count("size", size)
    data = _byte_string(src)
    if size == 0:
        return len(data)
    count = min(size - 1, len(data))
    _ensure_capacity(dest, count + 1)
    dest[:count] = data[:count]
    dest[count] = 0
    return len(data)


def strlcat(dest: Buffer, src: StrLike, size: int) -> int:
    """Append ``src`` to the string in ``dest``, within ``size`` bytes total.

    Returns the length of the string it tried to create: the initial length
    of ``dest`` (capped at ``size``) plus the length of ``src``.
    """
    size = _check_count("size", size)
    data = _byte_string(src)
    dest_len = strlen(dest)
    if size > 0 and dest_len < size - 1:
        count = min(len(data), size - dest_len - 1)
        end = dest_len + count
        _ensure_capacity(dest, end + 1)
        dest[dest_len:end] = data[:count]
        dest[end] = 0
    return min(dest_len, size) + len(data)


def strnstr(big: StrLike, little: StrLike, length: int) -> int | None:
    """Find ``little`` within the first ``length`` characters of ``big``.

    Returns the index of the first match, 0 when ``little`` is empty, or
    ``None`` when there is no match.
    """
    length = _check_count("length", length)
    haystack = _codes(big)
    needle = _codes(little)
    if not needle:
        return 0
    width = len(needle)
    for i in range(len(haystack)):
        if width > length - i:
            break
        if haystack[i:i + width] == needle:
            return i
    return None


def strdup(s: StrLike) -> str | bytearray:
    """Return a fresh copy of ``s`` up to its first NUL.

    A ``str`` gives a ``str``; any bytes-like object gives a ``bytearray``.
    """
    if isinstance(s, str):
        return s.split("\0", 1)[0]
    return bytearray(_byte_string(s))