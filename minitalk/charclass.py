"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. Classification functions return a ``bool``; the case
converters return a value of the same kind as they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) < 128


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space through tilde."""
    return 32 <= _code(c) < 127


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if _is_upper(code):
        return _same_kind(c, code + 32)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if _is_lower(code):
        return _same_kind(c, code - 32)
    return c