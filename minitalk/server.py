"""Receive messages sent bit by bit as signals and print them."""

from __future__ import annotations

import codecs
import os
import signal
import sys
from types import FrameType
from typing import Optional, Sequence, TextIO

from minitalk.printf import printf
from minitalk.protocol import ONE_SIGNAL, ZERO_SIGNAL, BitDecoder


class Server:
    """Decode incoming bit signals and write the text they carry to ``stream``."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._bits = BitDecoder()
        self._text = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def handle(self, sig: int, frame: Optional[FrameType] = None) -> str:
        """Take one bit signal; return the text it completed, if any."""
        byte = self._bits.feed_signal(sig)
        if byte is None:
            return ""
        text = self._text.decode(bytes((byte,)))
        if text:
            out = sys.stdout if self._stream is None else self._stream
            out.write(text)
            out.flush()
        return text

    def install(self) -> None:
        """Route both bit signals of this process to :meth:`handle`."""
        signal.signal(ZERO_SIGNAL, self.handle)
        signal.signal(ONE_SIGNAL, self.handle)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server until interrupted."""
    printf("GREAT! You have activated the Server\n")
    printf("Please use the PID for the Client to send a message\n")
    printf("Server PID: %d\n", os.getpid())
    sys.stdout.flush()
    Server().install()
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())