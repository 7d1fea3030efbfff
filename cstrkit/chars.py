"""Classification and case conversion of single ASCII characters.

Every function accepts either an integer character code or a one-character
string. Only the ASCII ranges are recognised; any other code is left alone
by the converters and rejected by the predicates.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of *c*, which is an int or a one-character str."""
    if isinstance(c, bool):
        raise TypeError("expected a character code or a one-character string, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(
        f"expected a character code or a one-character string, got {type(c).__name__}"
    )


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_digit(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def is_alpha(c: CharLike) -> bool:
    """Return True if *c* is an ASCII letter."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def is_digit(c: CharLike) -> bool:
    """Return True if *c* is an ASCII decimal digit."""
    return _is_digit(_code(c))


def is_alnum(c: CharLike) -> bool:
    """Return True if *c* is an ASCII letter or decimal digit."""
    code = _code(c)
    return _is_digit(code) or _is_lower(code) or _is_upper(code)


def is_ascii(c: CharLike) -> bool:
    """Return True if *c* lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """Return True if *c* is a printable ASCII character, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Return the upper-case form of an ASCII lower-case letter, else *c* unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return _same_kind(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Return the lower-case form of an ASCII upper-case letter, else *c* unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return _same_kind(c, code)