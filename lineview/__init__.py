"""Lineview - a minimal terminal text viewer."""

from .text import LineStore, ProgrammingFault
from .point import CursorPosition, ResolvedLine
from .viewport import Viewport
from .buffer import Buffer
from .view import Frame, render_buffer

__all__ = [
    'LineStore',
    'ProgrammingFault',
    'CursorPosition',
    'ResolvedLine',
    'Viewport',
    'Buffer',
    'Frame',
    'render_buffer',
]
