"""A small printf supporting %c %s %p %d %i %u %x %X and %%.

Integers follow 32-bit C semantics: %d and %i wrap to a signed int,
%u, %x and %X to an unsigned int. A character after '%' that is not a
known conversion is dropped along with the '%'; a lone trailing '%'
produces nothing.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from typing import Any, TextIO

_UINT_MASK = 0xFFFFFFFF
_DIRECTIVE = re.compile(r"%(.|\Z)", re.DOTALL)


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    address = int(value or 0)
    return "(nil)" if address == 0 else f"0x{address:x}"


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handlers = {
        "c": _char,
        "s": _string,
        "p": _pointer,
        "d": lambda v: str(_signed32(int(v))),
        "i": lambda v: str(_signed32(int(v))),
        "u": lambda v: str(int(v) & _UINT_MASK),
        "x": lambda v: format(int(v) & _UINT_MASK, "x"),
        "X": lambda v: format(int(v) & _UINT_MASK, "X"),
    }
    handler = handlers.get(spec)
    if handler is None:
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{spec}") from None
    return handler(value)


def render(fmt: str, *args: Any) -> str:
    """Format ``fmt`` with ``args`` and return the resulting text."""
    values = iter(args)
    return _DIRECTIVE.sub(lambda m: _convert(m.group(1), values), fmt)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    out.flush()
    return len(text)