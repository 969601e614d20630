"""The one-bit-per-signal wire format.

Each byte of a message is sent as eight signals, most significant bit
first: ``SIGUSR1`` carries a 0 bit and ``SIGUSR2`` carries a 1 bit.
"""

from __future__ import annotations

import signal
from typing import Iterator, Optional, Tuple, Union

BITS_PER_CHAR = 8
ZERO_SIGNAL = signal.SIGUSR1
ONE_SIGNAL = signal.SIGUSR2

ByteLike = Union[str, bytes, bytearray, int]
Bits = Tuple[int, ...]


def _byte_value(c: ByteLike) -> int:
    if isinstance(c, (bytes, bytearray)):
        if len(c) != 1:
            raise ValueError(f"expected a single byte, got {c!r}")
        return c[0]
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        code = ord(c)
        if code > 0xFF:
            raise ValueError(f"character {c!r} does not fit in one byte")
        return code
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character, a byte or an integer, got {c!r}")
    return c & 0xFF


def encode_char(c: ByteLike) -> Bits:
    """Return the eight bits of one byte, most significant first.

    Integers are reduced to their low eight bits, so negative values
    encode as their two's-complement byte.
    """
    value = _byte_value(c)
    return tuple((value >> shift) & 1 for shift in reversed(range(BITS_PER_CHAR)))


def encode_message(message: Union[str, bytes, bytearray]) -> Iterator[Bits]:
    """Yield the bits of every byte of ``message``; text is sent as UTF-8."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    for byte in data:
        yield encode_char(byte)


class BitDecoder:
    """Reassemble bytes from a stream of bits, most significant bit first."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    def feed(self, bit: int) -> Optional[int]:
        """Take one bit; return the completed byte after every eighth bit."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._value = ((self._value << 1) | int(bit)) & 0xFF
        self._count += 1
        if self._count < BITS_PER_CHAR:
            return None
        value = self._value
        self._value = 0
        self._count = 0
        return value

    def feed_signal(self, sig: int) -> Optional[int]:
        """Take one bit given as the signal that carried it."""
        if sig == ZERO_SIGNAL:
            return self.feed(0)
        if sig == ONE_SIGNAL:
            return self.feed(1)
        raise ValueError(f"signal {sig!r} carries no bit")