# ftkit

A small collection of low-level helpers for characters, byte buffers,
NUL-terminated strings, number conversion, file-descriptor output and a
singly linked list. It has no dependencies outside the standard library.

## Installation

    pip install ftkit

To run the tests as well:

    pip install "ftkit[test]"
    pytest

## Modules

- `ftkit.chars`: ASCII classification and case mapping. Each function takes
  an integer code or a one-character string: `isalpha`, `isdigit`, `isalnum`,
  `isascii`, `isprint` return a `bool`; `toupper` and `tolower` return a
  value of the same kind as their argument.
- `ftkit.memory`: byte-buffer operations on `bytearray`, writable
  `memoryview` and other bytes-like objects: `memset`, `bzero`, `memcpy`,
  `memmove`, `memchr` (returns an index or `None`), `memcmp`, and `calloc`
  (returns a zero-filled `bytearray`). Asking for more bytes than a buffer
  holds raises `ValueError`.
- `ftkit.strings`: routines on `str` or bytes-like strings, where a NUL ends
  the string: `strlen`, `strchr`, `strrchr`, `strncmp`, `strlcpy`,
  `strlcat`, `strnstr`, `strdup`. Search functions return an index or
  `None`. `strlcpy` and `strlcat` write into a `bytearray` or writable
  `memoryview` and return the length of the string they tried to create.
- `ftkit.transform`: building new strings: `substr`, `strjoin`,
  `count_words`, `split`, `strtrim`, `strmapi`, and `striteri` (which
  updates a mutable sequence in place).
- `ftkit.convert`: `atoi` (leading integer, 0 when there are no digits),
  `atodbl` (lenient decimal parsing), `count_digits` and `itoa`.
- `ftkit.output`: writing to a file descriptor with `os.write`:
  `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`.
- `ftkit.linkedlist`: `Node`, `LinkedList` (with `push_front`, `push_back`,
  `last`, `len()`, iteration, `clear`, `for_each` and `map`) and
  `delete_node`.

## Examples

```python
from ftkit.transform import split, strtrim
from ftkit.convert import atoi, itoa
from ftkit.strings import strchr, strlcpy

split("aab22c2b33a3d4444akkkk", "a")   # ['b22c2b33', '3d4444', 'kkkk']
strtrim("xxhelloxx", "x")              # 'hello'
atoi("   -42abc")                      # -42
itoa(-2147483648)                      # '-2147483648'
strchr("hello", "l")                   # 2

buf = bytearray(4)
strlcpy(buf, b"hello", len(buf))       # 5; buf is now b'hel\x00'
```

```python
from ftkit.linkedlist import LinkedList, Node

items = LinkedList([1, 2, 3])
items.push_front(Node(0))
items.push_back(Node(4))
len(items)                             # 5
doubled = items.map(lambda x: x * 2, lambda x: None)
list(doubled)                          # [0, 2, 4, 6, 8]
```

`LinkedList.map` requires both `func` and `delete` to be callable; if
`func` raises, the contents built so far are passed to `delete` and the
exception propagates.

```python
import sys
from ftkit.output import putendl_fd, putnbr_fd

putendl_fd("hello", sys.stdout.fileno())
putnbr_fd(-123, sys.stdout.fileno())
```

## What it does not do

ftkit is a library only: it installs no command-line program. It does not
manage memory itself; "allocating" functions simply return new Python
objects.