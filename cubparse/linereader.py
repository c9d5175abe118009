"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, List, Optional

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines.

    Each line keeps its trailing newline. A NUL character ends a line and is
    dropped; a line that would begin with NUL marks the end of the input.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._size = buffer_size
        self._buffer: Optional[AnyStr] = None
        self._index = 0
        self._finished = False

    def _refill(self) -> bool:
        self._buffer = self._stream.read(self._size)
        self._index = 0
        return bool(self._buffer)

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when the input is exhausted."""
        if self._finished:
            return None
        parts: List[AnyStr] = []
        while True:
            if self._buffer is None or self._index >= len(self._buffer):
                if not self._refill():
                    break
            chunk = self._buffer
            start = self._index
            newline, nul = ("\n", "\0") if isinstance(chunk, str) else (b"\n", b"\0")
            nl_pos = chunk.find(newline, start)
            nul_pos = chunk.find(nul, start)
            if nul_pos >= 0 and (nl_pos < 0 or nul_pos < nl_pos):
                if not parts and nul_pos == start:
                    self._finished = True
                    return None
                parts.append(chunk[start:nul_pos])
                self._index = nul_pos + 1
                return chunk[:0].join(parts)
            if nl_pos >= 0:
                parts.append(chunk[start:nl_pos + 1])
                self._index = nl_pos + 1
                return chunk[:0].join(parts)
            parts.append(chunk[start:])
            self._index = len(chunk)
        if not parts:
            return None
        return parts[0][:0].join(parts)

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(path: str) -> List[str]:
    """Return every line of the file at path, newlines kept."""
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as stream:
        return list(LineReader(stream))