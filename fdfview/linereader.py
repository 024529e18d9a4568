"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Yield the lines of ``stream``, reading ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the final line may lack one.
    Text and binary streams are both accepted.
    """

    def __init__(
        self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE
    ) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: str | bytes = ""

    def read_line(self) -> str | bytes | None:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            pending = self._pending
            newline = b"\n" if isinstance(pending, bytes) else "\n"
            end = pending.find(newline)
            if end >= 0:
                self._pending = pending[end + 1:]
                return pending[:end + 1]
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._pending = pending[:0]
                return pending or None
            if isinstance(chunk, bytes) and isinstance(pending, str):
                pending = pending.encode()
            self._pending = pending + chunk

    def __iter__(self) -> Iterator[str | bytes]:
        return iter(self.read_line, None)


def read_lines(
    stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE
) -> list[str | bytes]:
    """Return every line of ``stream`` as a list."""
    return list(LineReader(stream, buffer_size))