"""Buffered line-by-line reading from a stream."""

from __future__ import annotations

from collections.abc import Iterator
from typing import AnyStr, Generic, IO

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines from ``stream`` in chunks of ``buffer_size``.

    Each line keeps its trailing newline; the last line may lack one.
    Data read past a newline is kept for the next call.  Works with text
    and binary streams alike.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def readline(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        data = self._pending
        while True:
            if data is not None:
                newline = b"\n" if isinstance(data, bytes) else "\n"
                position = data.find(newline)
                if position != -1:
                    self._pending = data[position + 1:]
                    return data[:position + 1]
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._pending = data[:0] if data is not None else None
                return data if data else None
            data = chunk if data is None else data + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line