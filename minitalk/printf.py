"""A small printf supporting the conversions %c %s %p %d %i %u %x %X and %%.

Integers follow the widths of the conversions they stand in for: ``%d``
and ``%i`` wrap to a signed 32-bit value, ``%u``, ``%x`` and ``%X`` to an
unsigned 32-bit value, and ``%p`` to an unsigned 64-bit address.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_UINT32 = 1 << 32
_INT32_MIN = -(1 << 31)
_UINT64 = 1 << 64

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"

NULL_TEXT = "(null)"


class FormatError(ValueError):
    """Raised for an unknown conversion, a missing argument or a wrong argument type."""


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(f"%{spec} expects an integer, got {value!r}")
    return value


def _signed32(value: int) -> int:
    return (value - _INT32_MIN) % _UINT32 + _INT32_MIN


def _to_hex(value: int, digits: str) -> str:
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _convert_str(value: Any) -> str:
    if value is None:
        return NULL_TEXT
    if not isinstance(value, str):
        raise FormatError(f"%s expects a string, got {value!r}")
    return value


def _convert_pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        address = value % _UINT64
    else:
        address = id(value) % _UINT64
    return "0x" + _to_hex(address, _HEX_LOWER)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        raise FormatError(f"unknown conversion %{spec}")
    try:
        value = next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{spec}") from None
    if spec == "c":
        return _convert_char(value)
    if spec == "s":
        return _convert_str(value)
    if spec == "p":
        return _convert_pointer(value)
    number = _require_int(value, spec)
    if spec in "di":
        return str(_signed32(number))
    unsigned = number % _UINT32
    if spec == "u":
        return str(unsigned)
    return _to_hex(unsigned, _HEX_UPPER if spec == "X" else _HEX_LOWER)


def format_message(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    A ``%`` at the very end of ``fmt`` is kept as a literal. Arguments
    left over after the last conversion are ignored.
    """
    remaining = iter(args)
    parts = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            parts.append("%")
        else:
            parts.append(_convert(spec, remaining))
    return "".join(parts)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expansion of ``fmt`` to ``stream`` and return the number of characters written."""
    text = format_message(fmt, *args)
    _target(stream).write(text)
    return len(text)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream``."""
    _target(stream).write(text)


def put_endline(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    _target(stream).write(text + "\n")


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of ``n`` to ``stream``."""
    _target(stream).write(str(_require_int(n, "d")))