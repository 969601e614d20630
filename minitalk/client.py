"""Send a message to a server process, one signal per bit."""

from __future__ import annotations

import os
import sys
import time
from typing import Callable, Optional, Sequence, TextIO, Union

from minitalk.printf import printf
from minitalk.protocol import ONE_SIGNAL, ZERO_SIGNAL, ByteLike, encode_char
from minitalk.textutil import parse_int

DEFAULT_DELAY = 200e-6

Kill = Callable[[int, int], None]


def send_character(
    pid: int,
    c: ByteLike,
    kill: Optional[Kill] = None,
    delay: float = DEFAULT_DELAY,
    stream: Optional[TextIO] = None,
) -> None:
    """Signal the eight bits of one byte to ``pid``, reporting each one sent."""
    send = os.kill if kill is None else kill
    for bit in encode_char(c):
        if bit:
            send(pid, ONE_SIGNAL)
            printf("SIGUSR2 HAS BEEN SENT - 1\n", stream=stream)
        else:
            send(pid, ZERO_SIGNAL)
            printf("SIGUSR1 HAS BEEN SENT - 0\n", stream=stream)
        time.sleep(delay)


def send_message(
    pid: int,
    message: Union[str, bytes, bytearray],
    kill: Optional[Kill] = None,
    delay: float = DEFAULT_DELAY,
    stream: Optional[TextIO] = None,
) -> int:
    """Send every byte of ``message`` to ``pid``; return the number of bytes sent.

    Text is sent as UTF-8.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    for byte in data:
        send_character(pid, byte, kill=kill, delay=delay, stream=stream)
        printf("\n", stream=stream)
    return len(data)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the client: ``client <PID> <message>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf("ERROR - Insufficient arguments \n")
        return 0
    pid = parse_int(args[0])
    try:
        send_message(pid, args[1])
    except OSError as exc:
        print(f"ERROR - cannot signal process {pid}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())