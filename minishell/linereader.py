"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

DEFAULT_BUFFER_SIZE = 32


class LineReader:
    """Reads lines from a text stream in chunks of ``buffer_size`` characters.

    Lines are returned without their trailing newline. A last line with no
    newline is still returned; once the stream is exhausted ``read_line``
    returns ``None``.
    """

    def __init__(self, stream: TextIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""
        self._eof = False

    def read_line(self) -> str | None:
        """Return the next line, or ``None`` at end of input."""
        while "\n" not in self._pending and not self._eof:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
            else:
                self._pending += chunk
        if "\n" in self._pending:
            line, _, self._pending = self._pending.partition("\n")
            return line
        if self._pending:
            line, self._pending = self._pending, ""
            return line
        return None

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line