"""Which lines of a document are on screen."""

from dataclasses import dataclass


@dataclass
class Viewport:
    """The window of lines currently on screen."""
    origin: int = 0  # First visible line index
    height: int = 1  # Number of text rows

    def adjust(self, line: int) -> None:
        """Scroll the least amount needed to bring ``line`` into view."""
        if line < self.origin:
            self.origin = line
        elif line >= self.origin + self.height:
            self.origin = max(0, line - self.height + 1)

    def visible_range(self, line_count: int) -> range:
        """Indices of the document lines that fit in the viewport."""
        return range(self.origin, min(line_count, self.origin + self.height))
