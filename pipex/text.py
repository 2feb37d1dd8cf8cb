"""String helpers with C-string semantics.

A NUL character ends a string wherever it appears, as it would in C.
Lookups return an index, or ``None`` when nothing is found.
"""

from __future__ import annotations

from collections.abc import Callable

_INT_BITS = 32
_WHITESPACE = " \t\n\v\f\r"

CharLike = str | int


def _cstr(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    return s.split("\0", 1)[0]


def _as_char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _wrap_int(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty fields."""
    sep = _as_char(sep)
    s = _cstr(s)
    if sep == "\0":
        return [s] if s else []
    return [word for word in s.split(sep) if word]


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted;
    parsing stops at the first non-digit. The result wraps to a signed
    32-bit integer. Text without digits gives 0.
    """
    text = _cstr(s).lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    value = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def trim(s: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``s``."""
    s = _cstr(s)
    chars = _cstr(chars)
    if not chars:
        return s
    return s.strip(chars)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or beyond the end of the string gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    s = _cstr(s)
    if start >= len(s) or length == 0:
        return ""
    return s[start:start + length]


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return -1, 0 or 1.

    Comparison stops at the end of either string.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    a = _cstr(a)[:n]
    b = _cstr(b)[:n]
    for ca, cb in zip(a, b):
        if ca != cb:
            return 1 if ca > cb else -1
    if len(a) == len(b):
        return 0
    return 1 if len(a) > len(b) else -1


def strnstr(big: str, little: str, length: int) -> int | None:
    """Find ``little`` entirely within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    little = _cstr(little)
    if not little:
        return 0
    position = _cstr(big)[:length].find(little)
    return None if position < 0 else position


def find_char(s: str, c: CharLike) -> int | None:
    """Index of the first ``c`` in ``s``; a NUL is found at the end."""
    ch = _as_char(c)
    s = _cstr(s)
    if ch == "\0":
        return len(s)
    position = s.find(ch)
    return None if position < 0 else position


def rfind_char(s: str, c: CharLike) -> int | None:
    """Index of the last ``c`` in ``s``; a NUL is found at the end."""
    ch = _as_char(c)
    s = _cstr(s)
    if ch == "\0":
        return len(s)
    position = s.rfind(ch)
    return None if position < 0 else position


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for each character of ``s``."""
    return "".join(func(i, ch) for i, ch in enumerate(_cstr(s)))