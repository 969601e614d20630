"""String helpers: integer parsing and formatting, splitting, searching,
bounded copying and concatenation, prefix comparison, trimming and slicing."""

from __future__ import annotations

from typing import List, Optional, Tuple, Union

_WHITESPACE = " \t\n\v\f\r"

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return chr(c & 0xFF)


def parse_int(text: str) -> int:
    """Parse the leading decimal integer of ``text``.

    Leading whitespace is skipped, one optional ``+`` or ``-`` is accepted,
    and digits are read until the first non-digit. Text with no digits
    parses as 0.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return -value if negative else value


def int_to_str(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {n!r}")
    return str(n)


def split_fields(text: str, sep: CharLike) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty fields."""
    delimiter = _char(sep)
    return [field for field in text.split(delimiter) if field]


def find_char(text: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or ``None``.

    The NUL character matches the end of the text.
    """
    ch = _char(c)
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == "\0" else None


def rfind_char(text: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or ``None``.

    The NUL character matches the end of the text.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` units.

    The result holds at most ``size - 1`` characters. Returns the result
    and the length that an unbounded concatenation would have had; when
    that length is not below ``size`` the result was truncated. If ``dst``
    already fills the buffer it is returned unchanged.
    """
    _check_size(size)
    used = min(len(dst), size)
    if used >= size:
        return dst, used + len(src)
    room = size - used - 1
    return dst + src[:room], used + len(src)


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copy and the full length of ``src``.
    """
    _check_size(size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def compare_prefix(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns zero when they match, otherwise the difference between the
    codes of the first differing characters; the end of a string counts
    as code 0.
    """
    _check_size(n)
    for index in range(n):
        x = ord(a[index]) if index < len(a) else 0
        y = ord(b[index]) if index < len(b) else 0
        if x != y or x == 0:
            return x - y
    return 0


def find_bounded(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at index 0.
    """
    _check_size(limit)
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return index if index >= 0 else None


def trim(text: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``text``."""
    if not text:
        return ""
    if not chars:
        return text
    return text.strip(chars)


def substring(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` starting at ``start``.

    A start past the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    _check_size(length)
    if start > len(text):
        return ""
    return text[start : start + length]