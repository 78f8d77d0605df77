"""Projection of a buffer onto terminal draw instructions.

``render_buffer`` only reads the buffer. The instructions it returns are
applied to the screen by ``TerminalInterface.draw``.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .buffer import Buffer
from .constants import ViewerConstants


@dataclass(frozen=True)
class ClearScreen:
    """Blank the whole screen."""


@dataclass(frozen=True)
class DrawLine:
    """Write a text line at a row and clear whatever follows it on that row."""
    row: int
    text: str


@dataclass(frozen=True)
class ClearBelow:
    """Blank everything from the start of ``row`` to the bottom of the screen."""
    row: int


@dataclass(frozen=True)
class DrawStatus:
    row: int
    text: str


@dataclass(frozen=True)
class PlaceCursor:
    row: int
    column: int


Instruction = Union[ClearScreen, DrawLine, ClearBelow, DrawStatus, PlaceCursor]


@dataclass(frozen=True)
class Frame:
    instructions: tuple[Instruction, ...]

    def __iter__(self):
        return iter(self.instructions)

    @property
    def lines(self) -> list[str]:
        """Text of the content rows, top to bottom."""
        return [i.text for i in self.instructions if isinstance(i, DrawLine)]

    @property
    def status(self) -> Optional[str]:
        for instruction in self.instructions:
            if isinstance(instruction, DrawStatus):
                return instruction.text
        return None

    @property
    def cursor(self) -> Optional[tuple[int, int]]:
        for instruction in self.instructions:
            if isinstance(instruction, PlaceCursor):
                return (instruction.row, instruction.column)
        return None


def _clip(text: str, width: Optional[int]) -> str:
    return text if width is None else text[:width]


def format_status(buffer: Buffer) -> str:
    line = buffer.current_line()
    return ViewerConstants.STATUS_FORMAT.format(
        name=buffer.name,
        path=buffer.path,
        column=line.column(buffer.point) + 1,
        line=line.index + 1,
        lines=buffer.lines(),
    )


def render_buffer(buffer: Buffer, width: Optional[int] = None) -> Frame:
    """Build the frame for the current buffer state.

    Args:
        buffer: Buffer to draw
        width: Terminal width in columns; lines and the status are cut to it

    Returns:
        Frame with the text rows, status line and cursor placement
    """
    instructions: list[Instruction] = []
    view = buffer.view

    if buffer.lines() == 0:
        instructions.append(ClearScreen())
    else:
        visible = view.visible_range(buffer.lines())
        for row, index in enumerate(visible):
            instructions.append(DrawLine(row, _clip(buffer.data.lines[index], width)))
        # Document ends inside the viewport: wipe the stale rows below it
        if visible.stop == buffer.lines() and len(visible) < view.height:
            instructions.append(ClearBelow(len(visible)))

    instructions.append(DrawStatus(view.height, _clip(format_status(buffer), width)))

    line = buffer.current_line()
    column = line.column(buffer.point)
    if width is not None:
        column = min(column, max(0, width - 1))
    instructions.append(PlaceCursor(line.index - view.origin, column))

    return Frame(tuple(instructions))
