"""Conversions between linear offsets and (line, column) positions."""

from dataclasses import dataclass
from typing import NamedTuple

from .text import LineStore


class ResolvedLine(NamedTuple):
    """The line that owns a point."""
    index: int
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def column(self, offset: int) -> int:
        return offset - self.start


@dataclass
class CursorPosition:
    line: int = 0
    column: int = 0


def resolve(store: LineStore, offset: int) -> ResolvedLine:
    """Resolve a linear offset to the line containing it."""
    return ResolvedLine(*store.resolve(offset))


def line_start(store: LineStore, line: int) -> int:
    """Offset of the first character of a line, clamped to the document."""
    if store.line_count == 0:
        return 0
    line = max(0, min(store.line_count - 1, line))
    return store.line_start(line)


def to_position(store: LineStore, offset: int) -> CursorPosition:
    resolved = resolve(store, offset)
    return CursorPosition(resolved.index, resolved.column(offset))


def to_offset(store: LineStore, line: int, column: int) -> int:
    """Convert a (line, column) pair to an offset.

    The line is clamped to the document and the column to the line's
    length, so the result always resolves back to the clamped line.
    """
    if store.line_count == 0:
        return 0
    line = max(0, min(store.line_count - 1, line))
    start = store.line_start(line)
    column = max(0, min(len(store.lines[line]), column))
    return start + column
