import string

import pytest

from pipex.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ALL_CODES = range(-5, 260)


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_alpha_matches_ascii_letters(code):
    expected = 0 <= code < 128 and chr(code) in string.ascii_letters
    assert is_alpha(code) == expected


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_digit_matches_ascii_digits(code):
    expected = 0 <= code < 128 and chr(code) in string.digits
    assert is_digit(code) == expected


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_ascii_bounds(code):
    assert is_ascii(code) == (0 <= code <= 127)


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_print_matches_printable_without_controls(code):
    printable = set(string.printable) - set(string.whitespace) | {" "}
    expected = 0 <= code < 128 and chr(code) in printable
    assert is_print(code) == expected


def test_string_and_int_inputs_agree():
    for ch in string.printable:
        assert is_alpha(ch) == is_alpha(ord(ch))
        assert is_digit(ch) == is_digit(ord(ch))
        assert is_print(ch) == is_print(ord(ch))


def test_non_ascii_letter_is_not_alpha():
    assert is_alpha("é") is False
    assert is_ascii("é") is False


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_to_upper_lower_round_trip(ch):
    upper = to_upper(ch)
    assert upper == ch.upper()
    assert to_lower(upper) == ch


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_others(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_converters_keep_int_kind():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")
    assert to_upper(300) == 300


def test_non_ascii_not_converted():
    assert to_upper("é") == "é"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")