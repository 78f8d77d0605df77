"""Terminal interface using Blessed for display and Curtsies for input."""

import sys
from contextlib import ExitStack
from typing import Optional, TextIO

import blessed

from .constants import ViewerConstants
from .view import ClearBelow, ClearScreen, DrawLine, DrawStatus, Frame, PlaceCursor


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    Use it as a context manager: entering switches to the alternate screen
    and raw keyboard input, leaving restores the terminal on every exit
    path.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None,
                 stream: Optional[TextIO] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.stream = stream or sys.stdout
        self.is_fullscreen = False
        self._input = None
        self._stack: Optional[ExitStack] = None

    def __enter__(self) -> "TerminalInterface":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    def _write(self, *parts) -> None:
        print(*parts, sep='', end='', file=self.stream)

    def setup(self):
        """Enter fullscreen mode and raw input."""
        stack = ExitStack()
        try:
            self._write(self.term.enter_fullscreen, self.term.clear)
            self.is_fullscreen = True
            stack.callback(self._leave_fullscreen)

            from curtsies import Input
            keys = Input(keynames='curtsies')
            self._input = stack.enter_context(keys)
            stack.callback(setattr, self, '_input', None)
        except BaseException:
            stack.close()
            raise
        self._stack = stack

    def _leave_fullscreen(self) -> None:
        self._write(self.term.exit_fullscreen, self.term.normal_cursor)
        self.stream.flush()
        self.is_fullscreen = False

    def cleanup(self):
        """Leave raw input and fullscreen mode, in reverse order of setup."""
        stack, self._stack = self._stack, None
        if stack is not None:
            stack.close()

    def draw(self, frame: Frame) -> None:
        """Apply a rendered frame and flush once."""
        term = self.term
        for instruction in frame:
            if isinstance(instruction, ClearScreen):
                self._write(term.home, term.clear)
            elif isinstance(instruction, DrawLine):
                self._write(term.move_yx(instruction.row, 0), instruction.text, term.clear_eol)
            elif isinstance(instruction, ClearBelow):
                self._write(term.move_yx(instruction.row, 0), term.clear_eos)
            elif isinstance(instruction, DrawStatus):
                self._write(term.move_yx(instruction.row, 0),
                            term.bold, term.blue, instruction.text, term.normal,
                            term.clear_eol)
            elif isinstance(instruction, PlaceCursor):
                self._write(term.move_yx(instruction.row, instruction.column))
        self.stream.flush()

    def move_to_bottom(self) -> None:
        """Park the cursor on the last row before handing the terminal back."""
        self._write(self.term.move_yx(max(0, self.term.height - 1), 0))
        self.stream.flush()

    def get_key(self):
        """Block until the next key arrives.

        Returns:
            The curtsies key name, or None when input is not active or ended
        """
        if self._input is None:
            return None
        key = next(self._input, None)
        return None if key is None else str(key)

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return self.term.height - ViewerConstants.STATUS_ROWS
