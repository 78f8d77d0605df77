"""In-memory line store for a loaded document.

The document is kept as a list of lines without their terminators. Offsets
address the flattened text, where every line but the last is followed by a
single newline character.
"""

import logging
import os
from typing import Union

from .constants import ViewerConstants

logger = logging.getLogger(__name__)


class ProgrammingFault(RuntimeError):
    """Raised when the line store is used in a way no caller should.

    These are defects, not runtime conditions: an out-of-range line index
    or a call to one of the character-level edit operations.
    """


def split_lines(text: str) -> list[str]:
    """Split text on line feeds.

    A ``\\r`` directly before a line feed is dropped so CRLF files read the
    same as LF files. A final newline does not produce an extra empty line.
    """
    if not text:
        return []
    *lines, last = text.split('\n')
    lines = [line[:-1] if line.endswith('\r') else line for line in lines]
    if last:  # Unterminated final line, kept as is
        lines.append(last)
    return lines


class LineStore:
    """Ordered sequence of lines with cached length and line count."""

    lines: list[str]
    length: int
    newlines: int

    def __init__(self, lines=None):
        self.lines = list(lines) if lines is not None else []
        self.newlines = len(self.lines)
        # Count one separator per line, then drop the one after the last line
        total = sum(len(line) + 1 for line in self.lines)
        self.length = total - 1 if total else 0

    @classmethod
    def from_text(cls, text: str) -> "LineStore":
        return cls(split_lines(text))

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> "LineStore":
        """Load a file as UTF-8 text.

        Raises:
            OSError: if the file cannot be read
            UnicodeDecodeError: if the file is not valid UTF-8
        """
        with open(path, 'r', encoding=ViewerConstants.FILE_ENCODING, newline='') as f:
            text = f.read()
        store = cls.from_text(text)
        logger.debug("Loaded %s: %d lines, %d characters", path, store.newlines, store.length)
        return store

    @property
    def line_count(self) -> int:
        return self.newlines

    def __len__(self) -> int:
        return self.newlines

    def resolve(self, offset: int) -> tuple[int, int, int]:
        """Return (line index, line start offset, line length) for an offset.

        An offset equal to ``start + length`` (the newline position) belongs
        to the line it ends. This is a linear scan over the lines, fine for
        interactive use on modest files; a line-offset index would be needed
        for very large ones.
        """
        line = 0
        start = 0
        length = 0
        for text in self.lines:
            length = len(text)
            if offset > start + length:
                start += length + 1
                line += 1
            else:
                break
        return (line, start, length)

    def line_start(self, index: int) -> int:
        """Offset at which line ``index`` begins."""
        start = 0
        for text in self.lines[:index]:
            start += len(text) + 1
        return start

    def delete_line(self, index: int) -> None:
        if not 0 <= index < self.newlines:
            raise ProgrammingFault(
                f"line index {index} out of range for {self.newlines} lines")
        if self.newlines == 1:
            self.length = 0
        else:
            self.length -= len(self.lines[index]) + 1
        self.newlines -= 1
        del self.lines[index]

    def insert(self, offset: int, text: str) -> None:
        raise ProgrammingFault("character insertion is not supported")

    def delete(self, offset: int, count: int) -> None:
        raise ProgrammingFault("character deletion is not supported")
