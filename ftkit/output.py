"""Writing characters, strings and numbers to a file descriptor."""

from __future__ import annotations

import operator
import os
from typing import Union

from ftkit.convert import itoa

StrLike = Union[str, bytes, bytearray, memoryview]
CharLike = Union[int, str]


def _encode(s: StrLike) -> bytes:
    """Return the bytes of ``s`` up to its first NUL."""
    if s is None:
        raise TypeError("expected a string, got None")
    if isinstance(s, str):
        return s.split("\0", 1)[0].encode("utf-8")
    return memoryview(s).tobytes().split(b"\0", 1)[0]


def _write_all(fd: int, data: bytes) -> None:
    """Write every byte of ``data`` to ``fd``, retrying on short writes."""
    fd = operator.index(fd)
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to ``fd``.

    ``c`` is a one-character string, written as UTF-8, or an integer,
    narrowed to a single byte.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([operator.index(c) & 0xFF])
    _write_all(fd, data)


def putstr_fd(s: StrLike, fd: int) -> None:
    """Write ``s`` up to its first NUL to ``fd``."""
    _write_all(fd, _encode(s))


def putendl_fd(s: StrLike, fd: int) -> None:
    """Write ``s`` up to its first NUL to ``fd``, followed by a newline."""
    _write_all(fd, _encode(s) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of the integer ``n`` to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))