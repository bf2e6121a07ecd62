"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import codecs
from collections.abc import Iterator
from typing import IO, Any

BUFFER_SIZE = 1


class LineReader:
    """Reads lines from ``stream`` in chunks of ``buffer_size``.

    The stream may be text or binary; binary input is decoded as UTF-8.
    Text read past a newline is kept for the next call.
    """

    def __init__(self, stream: IO[Any], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""
        self._decoder: codecs.IncrementalDecoder | None = None

    def _read_chunk(self) -> tuple[str, bool]:
        """Read one chunk; return its text and whether the stream is exhausted."""
        chunk = self._stream.read(self._buffer_size)
        if isinstance(chunk, (bytes, bytearray)):
            if self._decoder is None:
                self._decoder = codecs.getincrementaldecoder("utf-8")()
            at_end = not chunk
            return self._decoder.decode(bytes(chunk), final=at_end), at_end
        if not chunk:
            return "", True
        return chunk, False

    def next_line(self) -> tuple[str, bool]:
        """The next line without its newline, and whether a newline ended it.

        At the end of input the remaining text (possibly empty) comes back
        with False, and the reader starts afresh.
        """
        while "\n" not in self._pending:
            text, at_end = self._read_chunk()
            self._pending += text
            if at_end:
                break
        line, newline, rest = self._pending.partition("\n")
        if newline:
            self._pending = rest
            return line, True
        self._pending = ""
        self._decoder = None
        return line, False

    def __iter__(self) -> Iterator[str]:
        while True:
            line, complete = self.next_line()
            if complete:
                yield line
                continue
            if line:
                yield line
            return


def read_lines(stream: IO[Any], buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield every line of ``stream``; a final unterminated line is yielded if non-empty."""
    return iter(LineReader(stream, buffer_size))