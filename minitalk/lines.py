"""Line-at-a-time reading from a stream, in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_CHUNK_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream.

    Data is pulled from ``stream.read`` ``chunk_size`` units at a time and
    buffered until a newline is seen. Each line is returned with its
    trailing newline; the final line is returned without one if the
    stream does not end in a newline. Once the stream is exhausted,
    :meth:`read_line` returns ``None``.
    """

    def __init__(self, stream: IO[AnyStr], chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._stream = stream
        self._chunk_size = chunk_size
        self._pending: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` when nothing is left to read."""
        pending = self._pending
        while True:
            if pending:
                newline = b"\n" if isinstance(pending, bytes) else "\n"
                index = pending.find(newline)
                if index >= 0:
                    self._pending = pending[index + 1 :]
                    return pending[: index + 1]
            try:
                chunk = self._stream.read(self._chunk_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        self._pending = None
        return pending or None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line