from __future__ import annotations

from collections.abc import Iterable, Iterator


class LineReader:
    """Line source with a one-line push-back buffer.

    Lets the reader peek at the line after a frame to decide whether
    another frame follows, without needing a seekable stream.  Line
    endings are stripped; line numbers are 1-based and count every
    line handed out, pushed-back lines excepted.

    Args:
        lines: Any iterable of text lines, such as an open text file.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._pending: str | None = None
        self.line_number = 0

    def next_line(self) -> str | None:
        """Return the next line, or ``None`` at end of stream."""
        if self._pending is not None:
            line, self._pending = self._pending, None
        else:
            try:
                line = next(self._lines)
            except StopIteration:
                return None
            line = line.rstrip("\r\n")
        self.line_number += 1
        return line

    def push_back(self, line: str) -> None:
        """Return *line* to the stream so the next read yields it again.

        Raises:
            RuntimeError: If a line is already pushed back.
        """
        if self._pending is not None:
            raise RuntimeError("only one line can be pushed back")
        self._pending = line
        self.line_number -= 1
