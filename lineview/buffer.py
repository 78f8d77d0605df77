"""Buffer: a loaded document with a cursor and a viewport.

The cursor ("point") is a linear offset into the flattened text. Every
movement clamps the point to ``[0, length]`` and then scrolls the viewport
so the point's line stays on screen.
"""

import logging
import os
from typing import Optional

from .point import CursorPosition, ResolvedLine, line_start, resolve, to_offset, to_position
from .text import LineStore
from .viewport import Viewport

logger = logging.getLogger(__name__)


class Buffer:
    name: str
    path: str
    point: int
    view: Viewport
    data: LineStore
    page_size: int

    def __init__(self, name: str, path: str, data: LineStore, view: Viewport,
                 page_size: Optional[int] = None):
        self.name = name
        self.path = path
        self.point = 0
        self.view = view
        self.data = data
        self.page_size = page_size if page_size is not None else view.height + 1

    @classmethod
    def load(cls, file_path, height: int, page_size: Optional[int] = None) -> "Buffer":
        """Load a file into a new buffer showing ``height`` text rows.

        Raises:
            OSError: if the file cannot be read
            UnicodeDecodeError: if the file is not valid UTF-8
        """
        path = os.fspath(file_path)
        name = os.path.basename(path) or path
        data = LineStore.from_file(path)
        return cls(name, path, data, Viewport(0, max(1, height)), page_size)

    def lines(self) -> int:
        return self.data.newlines

    @property
    def length(self) -> int:
        return self.data.length

    def current_line(self) -> ResolvedLine:
        return resolve(self.data, self.point)

    @property
    def position(self) -> CursorPosition:
        return to_position(self.data, self.point)

    def _adjust(self) -> None:
        self.view.adjust(self.current_line().index)

    def move_to(self, offset: int) -> None:
        self.point = max(0, min(self.data.length, offset))
        self._adjust()

    def move_to_position(self, line: int, column: int) -> None:
        self.move_to(to_offset(self.data, line, column))

    def move_to_line(self, line: int) -> None:
        self.move_to(line_start(self.data, line))

    def move_right(self) -> None:
        self.move_to(self.point + 1)

    def move_left(self) -> None:
        self.move_to(self.point - 1)

    def move_end_of_line(self) -> None:
        self.point = self.current_line().end

    def move_start_of_line(self) -> None:
        self.point = self.current_line().start

    def move_down(self) -> None:
        # One past the end of the current line is the start of the next
        self.move_to(self.current_line().end + 1)

    def move_up(self) -> None:
        start = self.current_line().start
        if start == 0:
            self.move_to(0)
        else:
            self.move_to(resolve(self.data, start - 1).start)

    def move_start(self) -> None:
        self.point = 0
        self.view.adjust(0)

    def move_end(self) -> None:
        self.point = self.data.length
        self.view.adjust(max(0, self.lines() - 1))

    def page_down(self) -> None:
        for _ in range(self.page_size):
            self.move_down()

    def page_up(self) -> None:
        for _ in range(self.page_size):
            self.move_up()

    def delete_line(self) -> None:
        """Delete the line under the cursor and keep the cursor on screen."""
        if self.lines() == 0:
            return
        line = self.current_line()
        self.data.delete_line(line.index)
        logger.debug("Deleted line %d of %s", line.index, self.path)
        self.move_to(min(self.data.length, line.start))
