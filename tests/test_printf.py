import io

import pytest

from pipex.printf import printf, render


def test_plain_text_unchanged():
    text = "hello, world\n"
    assert render(text) == text


def test_percent_escape():
    assert render("100%%") == "100%"


def test_char_from_str_and_int():
    assert render("%c%c", "a", ord("b")) == "ab"


def test_string_and_null():
    assert render("[%s]", "abc") == "[abc]"
    assert render("%s", None) == "(null)"


def test_pointer_null_and_nonzero():
    assert render("%p", 0) == "(nil)"
    assert render("%p", None) == "(nil)"
    assert render("%p", 0x1234abcd) == "0x" + format(0x1234ABCD, "x")


@pytest.mark.parametrize("n", [0, 7, -7, 42, -2147483648, 2147483647])
def test_signed_matches_str(n):
    assert render("%d", n) == str(n)
    assert render("%i", n) == str(n)


def test_signed_wraps_to_32_bits():
    assert render("%d", 2**31) == render("%d", -(2**31))
    assert render("%d", 2**32 + 5) == render("%d", 5)


@pytest.mark.parametrize("n", [0, 9, 10, 255, 4096, 0xDEADBEEF])
def test_hex_matches_format(n):
    assert render("%x", n) == format(n, "x")
    assert render("%X", n) == format(n, "X")


def test_negative_hex_is_unsigned():
    assert render("%x", -1) == "ffffffff"


def test_unsigned_wraps():
    assert render("%u", -1) == str(2**32 - 1)
    assert render("%u", 2**32) == render("%u", 0)


def test_unknown_specifier_dropped_without_consuming():
    assert render("a%qb%d", 3) == "ab3"


def test_trailing_percent_ignored():
    assert render("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        render("%d %d", 1)


def test_multi_char_for_c_raises():
    with pytest.raises(ValueError):
        render("%c", "ab")


def test_mixed_conversions_in_order():
    assert render("%s=%d (%x)", "n", 255, 255) == "n=255 (ff)"


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("pipex: %s%c%u\n", "x", "!", 12, stream=stream)
    assert stream.getvalue() == render("pipex: %s%c%u\n", "x", "!", 12)
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s-%d", "abc", -3)
    captured = capsys.readouterr().out
    assert captured == "abc--3"
    assert count == len(captured)