import os

import pytest

from ftkit.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


class _Pipe:
    """A pipe whose write end is handed to the code under test."""

    def __init__(self):
        self._read_fd, self.fd = os.pipe()
        self._write_open = True
        self._read_open = True

    def read(self):
        self._close_write()
        with os.fdopen(self._read_fd, "rb") as reader:
            self._read_open = False
            return reader.read()

    def _close_write(self):
        if self._write_open:
            os.close(self.fd)
            self._write_open = False

    def close(self):
        self._close_write()
        if self._read_open:
            os.close(self._read_fd)
            self._read_open = False


@pytest.fixture
def pipe():
    p = _Pipe()
    yield p
    p.close()


def test_putchar_str(pipe):
    putchar_fd("a", pipe.fd)
    assert pipe.read() == b"a"


def test_putchar_int(pipe):
    putchar_fd(ord("Z"), pipe.fd)
    assert pipe.read() == b"Z"


def test_putchar_large_int_is_one_byte(pipe):
    putchar_fd(0x141, pipe.fd)
    assert len(pipe.read()) == 1


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", 1)


def test_putstr_writes_text(pipe):
    putstr_fd("hello world", pipe.fd)
    assert pipe.read() == b"hello world"


def test_putstr_stops_at_nul_text(pipe):
    putstr_fd("abc\0def", pipe.fd)
    assert pipe.read() == b"abc"


def test_putstr_stops_at_nul_bytes(pipe):
    putstr_fd(b"xy\0z", pipe.fd)
    assert pipe.read() == b"xy"


def test_putstr_empty(pipe):
    putstr_fd("", pipe.fd)
    assert pipe.read() == b""


def test_putendl_appends_newline(pipe):
    putendl_fd("abc", pipe.fd)
    assert pipe.read() == b"abc\n"


def test_putendl_empty_is_newline_only(pipe):
    putendl_fd("", pipe.fd)
    assert pipe.read() == b"\n"


def test_putstr_none_raises():
    with pytest.raises(TypeError):
        putstr_fd(None, 1)


@pytest.mark.parametrize("n", [0, 7, 42, -5, 2147483647, -2147483647, 10**20])
def test_putnbr_round_trip(pipe, n):
    putnbr_fd(n, pipe.fd)
    assert int(pipe.read()) == n


def test_putnbr_int_min(pipe):
    putnbr_fd(-2147483648, pipe.fd)
    assert pipe.read() == b"-2147483648"


def test_putnbr_zero(pipe):
    putnbr_fd(0, pipe.fd)
    assert pipe.read() == b"0"


def test_write_to_closed_fd_raises():
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    os.close(write_fd)
    with pytest.raises(OSError):
        putstr_fd("x", write_fd)