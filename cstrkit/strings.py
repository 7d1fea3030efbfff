"""Length, search, comparison, bounded copy and integer parsing of C-style strings.

A string is a :class:`str` or a bytes-like object. As in C, a NUL character
ends it: anything after the first ``"\\0"`` (or zero byte) is ignored.
Positions are returned as indexes, and None is returned where nothing is found.
The bounded copy functions :func:`strlcpy` and :func:`strlcat` write into a
writable byte buffer such as a :class:`bytearray`.
"""

from __future__ import annotations

from itertools import islice, takewhile, zip_longest
from typing import Optional, Union

from cstrkit.chars import is_digit

Text = Union[str, bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _terminated(s: Text) -> Union[str, bytes]:
    """Return *s* cut at its first NUL; bytes-like input comes back as bytes."""
    if isinstance(s, str):
        end = s.find("\0")
    elif isinstance(s, (bytes, bytearray, memoryview)):
        s = bytes(s)
        end = s.find(0)
    else:
        raise TypeError(f"expected a str or bytes-like object, got {type(s).__name__}")
    return s if end < 0 else s[:end]


def _terminated_bytes(s: Text) -> bytes:
    data = _terminated(s)
    if isinstance(data, str):
        raise TypeError("expected a bytes-like object, got str")
    return data


def _char_code(c: Union[int, str]) -> int:
    """Return the code of *c*; integer codes are reduced to their low byte."""
    if isinstance(c, bool):
        raise TypeError("expected a character code or a one-character string, got bool")
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(
        f"expected a character code or a one-character string, got {type(c).__name__}"
    )


def _target(text: Union[str, bytes], code: int) -> Union[str, bytes]:
    return chr(code) if isinstance(text, str) else bytes([code])


def _codes(text: Union[str, bytes]) -> list[int]:
    return [ord(ch) for ch in text] if isinstance(text, str) else list(text)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL in *s*."""
    return len(_terminated(s))


def strchr(s: Text, c: Union[int, str]) -> Optional[int]:
    """Return the index of the first occurrence of *c* in *s*, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    index = text.find(_target(text, code))
    return None if index < 0 else index


def strrchr(s: Text, c: Union[int, str]) -> Optional[int]:
    """Return the index of the last occurrence of *c* in *s*, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    index = text.rfind(_target(text, code))
    return None if index < 0 else index


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most *n* characters of *s1* and *s2* as unsigned codes.

    Returns -1, 0 or 1. The shorter string compares as if padded with NUL.
    """
    _check_size("n", n)
    pairs = zip_longest(_codes(_terminated(s1)), _codes(_terminated(s2)), fillvalue=0)
    for a, b in islice(pairs, n):
        if a < b:
            return -1
        if a > b:
            return 1
    return 0


def strnstr(haystack: Text, needle: Text, length: int) -> Optional[int]:
    """Return the index of *needle* lying wholly within the first *length*
    characters of *haystack*, or None.

    An empty needle is found at index 0 whatever *length* is.
    """
    _check_size("length", length)
    pattern = _terminated(needle)
    if not pattern:
        return 0
    if length == 0:
        return None
    index = _terminated(haystack)[:length].find(pattern)
    return None if index < 0 else index


def strlcpy(dest: Optional[WritableBuffer], src: Text, size: int) -> int:
    """Copy *src* into *dest*, writing at most *size* bytes including the NUL.

    Returns the length of *src*; a result of *size* or more means the copy
    was truncated. With *size* 0 nothing is written and *dest* may be None.
    """
    _check_size("size", size)
    data = _terminated_bytes(src)
    if size == 0:
        return len(data)
    if dest is None:
        raise TypeError("strlcpy needs a destination buffer when size is not 0")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds destination of {len(dest)} bytes")
    count = min(len(data), size - 1)
    dest[:count] = data[:count]
    dest[count] = 0
    return len(data)


def strlcat(dest: Optional[WritableBuffer], src: Text, size: int) -> int:
    """Append *src* to the NUL-terminated string in *dest*, keeping the whole
    result, NUL included, within *size* bytes.

    Returns the length of the string it tried to build. When *size* does not
    exceed the current length of *dest*, nothing is written and the result is
    ``size + strlen(src)``.
    """
    _check_size("size", size)
    data = _terminated_bytes(src)
    if dest is None:
        if size == 0:
            return len(data)
        raise TypeError("strlcat needs a destination buffer when size is not 0")
    dst_len = len(_terminated(dest))
    if size <= dst_len:
        return size + len(data)
    if size > len(dest):
        raise ValueError(f"size {size} exceeds destination of {len(dest)} bytes")
    count = min(len(data), size - 1 - dst_len)
    dest[dst_len:dst_len + count] = data[:count]
    dest[dst_len + count] = 0
    return len(data) + dst_len


def strdup(s: Text) -> Union[str, bytes]:
    """Return a copy of *s* up to its first NUL; bytes-like input gives bytes."""
    return _terminated(s)


def atoi(s: str) -> int:
    """Parse a leading decimal integer from *s*.

    Leading blanks (space, tab, newline, vertical tab, form feed, carriage
    return) are skipped, then one optional sign and as many ASCII digits as
    follow. Without digits the result is 0. The value wraps to a signed
    32-bit integer.
    """
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    rest = s.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(is_digit, rest))
    value = sign * int(digits or "0")
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half