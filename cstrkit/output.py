"""Writing characters, strings and integers to file descriptors."""

from __future__ import annotations

import operator
import os
from typing import Optional, Union

from cstrkit.strings import strdup

Text = Union[str, bytes, bytearray, memoryview]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encoded(s: Text) -> bytes:
    text = strdup(s)
    return text.encode("utf-8") if isinstance(text, str) else text


def put_char_fd(c: Union[int, str], fd: int) -> None:
    """Write one character to *fd*.

    An integer is written as its low byte; a one-character string is written
    in UTF-8.
    """
    if isinstance(c, bool):
        raise TypeError("expected a character code or a one-character string, got bool")
    if isinstance(c, int):
        data = bytes([c & 0xFF])
    elif isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        data = c.encode("utf-8")
    else:
        raise TypeError(
            f"expected a character code or a one-character string, got {type(c).__name__}"
        )
    _write_all(fd, data)


def put_str_fd(s: Text, fd: int) -> None:
    """Write *s*, up to its first NUL, to *fd*."""
    _write_all(fd, _encoded(s))


def put_endl_fd(s: Optional[Text], fd: int) -> None:
    """Write *s* followed by a newline to *fd*; do nothing when *s* is None."""
    if s is None:
        return
    _write_all(fd, _encoded(s) + b"\n")


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of the integer *n* to *fd*."""
    _write_all(fd, str(operator.index(n)).encode("ascii"))