import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cstrkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII_CODES = range(128)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_print_matches_printable_range(code):
    ch = chr(code)
    expected = ch in string.printable and ch not in "\t\n\r\x0b\x0c"
    assert is_print(code) == expected


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(127) is False
    assert is_print(31) is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


@given(st.integers(min_value=128, max_value=0x10FFFF))
def test_non_ascii_codes_are_not_classified(code):
    assert not is_alpha(code)
    assert not is_digit(code)
    assert not is_alnum(code)
    assert not is_print(code)
    assert not is_ascii(code)


def test_non_ascii_letter_strings_are_not_alpha():
    assert is_alpha("é") is False
    assert is_alnum("٣") is False


def test_accepts_strings_and_ints_alike():
    for ch in string.printable:
        assert is_alnum(ch) == is_alnum(ord(ch))
        assert is_print(ch) == is_print(ord(ch))


@pytest.mark.parametrize("code", ASCII_CODES)
def test_to_upper_matches_str_upper_for_ascii(code):
    ch = chr(code)
    assert to_upper(ch) == ch.upper()
    assert to_upper(code) == ord(ch.upper())


@pytest.mark.parametrize("code", ASCII_CODES)
def test_to_lower_matches_str_lower_for_ascii(code):
    ch = chr(code)
    assert to_lower(ch) == ch.lower()
    assert to_lower(code) == ord(ch.lower())


def test_case_conversion_pinned():
    assert to_upper("q") == "Q"
    assert to_lower("Q") == "q"


@given(st.integers(min_value=128, max_value=0x10FFFF))
def test_case_conversion_leaves_non_ascii_untouched(code):
    assert to_upper(code) == code
    assert to_lower(code) == code


@given(st.sampled_from(string.ascii_letters))
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch.lower()
    assert to_upper(to_lower(ch)) == ch.upper()


def test_result_type_follows_argument():
    from_str = to_upper("a")
    from_int = to_upper(ord("a"))
    assert from_str == "A"
    assert type(from_str) is str
    assert from_int == 65
    assert type(from_int) is int


@pytest.mark.parametrize("bad", ["", "ab"])
def test_multi_character_strings_rejected(bad):
    with pytest.raises(ValueError):
        is_alpha(bad)


@pytest.mark.parametrize("bad", [None, 1.5, b"a", True])
def test_wrong_types_rejected(bad):
    with pytest.raises(TypeError):
        to_upper(bad)