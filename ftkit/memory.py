"""Byte-buffer helpers: fill, copy, search and compare.

Buffers are ``bytearray`` or writable ``memoryview`` objects for the
functions that modify them, and any bytes-like object for those that only
read. Asking for more bytes than a buffer holds raises ``ValueError``.
"""

from __future__ import annotations

from typing import Any


def _view(buf: Any) -> memoryview:
    """Return a flat, byte-wise view of ``buf``."""
    view = memoryview(buf)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def _check_length(n: int, *views: memoryview) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for view in views:
        if n > len(view):
            raise ValueError(f"length {n} exceeds buffer size {len(view)}")


def memset(buf: Any, c: int, n: int) -> Any:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    view = _view(buf)
    _check_length(n, view)
    view[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Any, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest: Any, src: Any, n: int) -> Any:
    """Copy ``n`` bytes from ``src`` into ``dest`` and return ``dest``."""
    if dest is src:
        return dest
    dview, sview = _view(dest), _view(src)
    _check_length(n, dview, sview)
    dview[:n] = sview[:n]
    return dest


def memmove(dest: Any, src: Any, n: int) -> Any:
    """Copy ``n`` bytes from ``src`` into ``dest``; the areas may overlap."""
    if dest is src:
        return dest
    dview, sview = _view(dest), _view(src)
    _check_length(n, dview, sview)
    dview[:n] = bytes(sview[:n])
    return dest


def memchr(data: Any, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes."""
    view = _view(data)
    _check_length(n, view)
    index = bytes(view[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: Any, s2: Any, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair."""
    v1, v2 = _view(s1), _view(s2)
    _check_length(n, v1, v2)
    for a, b in zip(v1[:n], v2[:n]):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("member count and size must not be negative")
    return bytearray(nmemb * size)