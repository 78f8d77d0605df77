"""Command pattern implementation for viewer actions."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, TYPE_CHECKING, Tuple

from .keyboard import KeyType

if TYPE_CHECKING:
    from .keyboard import KeyEvent
    from .viewer import Viewer


class ViewerCommand(ABC):
    """Base class for viewer commands."""

    @abstractmethod
    def execute(self, viewer: 'Viewer', key_event: 'KeyEvent') -> None:
        """Execute the command.

        Args:
            viewer: Viewer instance
            key_event: The key event that triggered this command
        """


class MovementCommand(ViewerCommand):
    """Base class for cursor movement commands."""

    def execute(self, viewer: 'Viewer', key_event: 'KeyEvent') -> None:
        self._move(viewer.buffer)

    @abstractmethod
    def _move(self, buffer):
        """Perform the movement."""


class RightCharCommand(MovementCommand):
    def _move(self, buffer):
        buffer.move_right()


class LeftCharCommand(MovementCommand):
    def _move(self, buffer):
        buffer.move_left()


class DownLineCommand(MovementCommand):
    def _move(self, buffer):
        buffer.move_down()


class UpLineCommand(MovementCommand):
    def _move(self, buffer):
        buffer.move_up()


class EndOfLineCommand(MovementCommand):
    def _move(self, buffer):
        buffer.move_end_of_line()


class BeginningOfLineCommand(MovementCommand):
    def _move(self, buffer):
        buffer.move_start_of_line()


class PageDownCommand(MovementCommand):
    def _move(self, buffer):
        buffer.page_down()


class PageUpCommand(MovementCommand):
    def _move(self, buffer):
        buffer.page_up()


class EndOfDocumentCommand(MovementCommand):
    def _move(self, buffer):
        buffer.move_end()


class StartOfDocumentCommand(MovementCommand):
    def _move(self, buffer):
        buffer.move_start()


class DeleteLineCommand(ViewerCommand):
    def execute(self, viewer, key_event):
        if viewer.buffer.lines():
            viewer.buffer.delete_line()


class QuitCommand(ViewerCommand):
    def execute(self, viewer, key_event):
        viewer.running = False


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], ViewerCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings (letter and arrow aliases)."""
        bindings = [
            (RightCharCommand(), [(KeyType.SPECIAL, 'right'), (KeyType.REGULAR, 'l')]),
            (LeftCharCommand(), [(KeyType.SPECIAL, 'left'), (KeyType.REGULAR, 'j')]),
            (DownLineCommand(), [(KeyType.SPECIAL, 'down'), (KeyType.REGULAR, 'k')]),
            (UpLineCommand(), [(KeyType.SPECIAL, 'up'), (KeyType.REGULAR, 'i')]),
            (EndOfLineCommand(), [(KeyType.SPECIAL, 'end'), (KeyType.REGULAR, 'L')]),
            (BeginningOfLineCommand(), [(KeyType.SPECIAL, 'home'), (KeyType.REGULAR, 'J')]),
            (PageDownCommand(), [(KeyType.SPECIAL, 'page_down'), (KeyType.REGULAR, 'K')]),
            (PageUpCommand(), [(KeyType.SPECIAL, 'page_up'), (KeyType.REGULAR, 'I')]),
            (EndOfDocumentCommand(), [(KeyType.REGULAR, '>')]),
            (StartOfDocumentCommand(), [(KeyType.REGULAR, '<')]),
            (DeleteLineCommand(), [(KeyType.REGULAR, 'd')]),
            (QuitCommand(), [(KeyType.REGULAR, 'q'), (KeyType.CTRL, 'c')]),
        ]
        for command, keys in bindings:
            for key in keys:
                self.register(key, command)

    def register(self, key: Tuple[KeyType, str], command: ViewerCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[ViewerCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, viewer: 'Viewer', key_event: 'KeyEvent') -> None:
        """Execute the command bound to the key event, if any."""
        command = self.get_command(key_event.key_type, key_event.value)
        if command is not None:
            command.execute(viewer, key_event)
