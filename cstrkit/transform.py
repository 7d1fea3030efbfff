"""Building new strings from C-style strings.

The functions here cover substrings, joining, trimming, splitting, integer
formatting and per-character mapping. A string is a :class:`str` or a
bytes-like object, and a NUL character ends it. Results have the same kind
as the input: text gives text, bytes-like input gives :class:`bytes`.
"""

from __future__ import annotations

import operator
from typing import Callable, MutableSequence, Optional, Union

from cstrkit.strings import strdup

Text = Union[str, bytes, bytearray, memoryview]
CharLike = Union[int, str]


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _separator(text: Union[str, bytes], sep: CharLike) -> Union[str, bytes]:
    """Return *sep* as a one-character piece of the same kind as *text*."""
    if isinstance(sep, bool):
        raise TypeError("expected a character code or a one-character string, got bool")
    if isinstance(sep, int):
        code = sep & 0xFF
    elif isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {len(sep)} characters")
        code = ord(sep)
    else:
        raise TypeError(
            f"expected a character code or a one-character string, got {type(sep).__name__}"
        )
    if isinstance(text, str):
        return chr(code)
    if code > 0xFF:
        raise ValueError(f"separator {sep!r} does not fit in a byte")
    return bytes([code])


def substr(s: Text, start: int, length: int) -> Union[str, bytes]:
    """Return at most *length* characters of *s* beginning at index *start*.

    A start at or past the end gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    text = strdup(s)
    if start >= len(text):
        return text[:0]
    return text[start:start + length]


def strjoin(s1: Text, s2: Text) -> Union[str, bytes]:
    """Return *s1* followed by *s2*; both must be text or both bytes-like."""
    first = strdup(s1)
    second = strdup(s2)
    if isinstance(first, str) != isinstance(second, str):
        raise TypeError("cannot join text with bytes")
    return first + second


def strtrim(s: Text, charset: Text) -> Union[str, bytes]:
    """Remove every character found in *charset* from both ends of *s*."""
    text = strdup(s)
    chars = strdup(charset)
    if isinstance(text, str) != isinstance(chars, str):
        raise TypeError("string and character set must both be text or both bytes")
    if not chars:
        return text
    return text.strip(chars)


def split(s: Text, sep: CharLike) -> list[Union[str, bytes]]:
    """Return the non-empty words of *s* separated by runs of *sep*."""
    text = strdup(s)
    return [word for word in text.split(_separator(text, sep)) if word]


def word_count(s: Text, sep: CharLike) -> int:
    """Return how many words :func:`split` finds in *s*."""
    return len(split(s, sep))


def itoa(n: int) -> str:
    """Return the decimal representation of the integer *n*."""
    return str(operator.index(n))


def strmapi(s: Text, f: Callable) -> Union[str, bytes]:
    """Return a new string made of ``f(index, char)`` for each character of *s*.

    For text, *f* gets and returns one-character strings; for bytes-like
    input it gets and returns integer byte values.
    """
    if f is None:
        raise TypeError("strmapi needs a mapping function")
    text = strdup(s)
    if isinstance(text, str):
        return "".join(f(i, ch) for i, ch in enumerate(text))
    return bytes(f(i, b) for i, b in enumerate(text))


def striteri(chars: MutableSequence, f: Callable[[int, object], Optional[object]]) -> None:
    """Call ``f(index, char)`` on each element of *chars* up to the first NUL.

    When *f* returns something other than None it replaces the element in
    place. *chars* is a mutable sequence such as a list of characters or a
    :class:`bytearray`.
    """
    if f is None:
        raise TypeError("striteri needs a function")
    for index, ch in enumerate(list(chars)):
        if ch in (0, "\0"):
            break
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement