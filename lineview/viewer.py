"""Main viewer controller: read a key, apply it, redraw."""

import logging
import signal
from typing import Optional

from .buffer import Buffer
from .commands import CommandRegistry
from .keyboard import KeyboardHandler, KeyEvent
from .terminal import TerminalInterface
from .view import render_buffer

logger = logging.getLogger(__name__)


class Viewer:
    """Single-buffer terminal viewer."""

    def __init__(self, buffer: Buffer, terminal: Optional[TerminalInterface] = None):
        """Initialize the viewer components."""
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.buffer = buffer
        self.command_registry = CommandRegistry()
        self.running = False

    @classmethod
    def open(cls, path, terminal: Optional[TerminalInterface] = None) -> "Viewer":
        """Load ``path`` sized to the current terminal.

        Raises:
            OSError: if the file cannot be read
            UnicodeDecodeError: if the file is not valid UTF-8
        """
        terminal = terminal or TerminalInterface()
        buffer = Buffer.load(path, terminal.height)
        return cls(buffer, terminal)

    def _handle_terminate(self, signum, frame):
        """Turn SIGTERM/SIGHUP into SystemExit so the terminal is restored."""
        del frame  # Unused
        raise SystemExit(128 + signum)

    def _draw(self):
        """Draw the current buffer state to the terminal."""
        self.terminal.draw(render_buffer(self.buffer, self.terminal.width))

    def _handle_key_event(self, key_event: KeyEvent):
        """Apply one key event to the buffer."""
        self.command_registry.execute(self, key_event)

    def run(self):
        """Run the main loop until quit."""
        original_term_handler = signal.signal(signal.SIGTERM, self._handle_terminate)
        original_hup_handler = signal.signal(signal.SIGHUP, self._handle_terminate)
        try:
            with self.terminal:
                self.running = True
                try:
                    self._draw()
                    for key_event in self.keyboard.events():
                        self._handle_key_event(key_event)
                        if not self.running:
                            break
                        self._draw()
                except KeyboardInterrupt:
                    logger.debug("Interrupted")
                finally:
                    self.running = False
                    self.terminal.move_to_bottom()
        finally:
            signal.signal(signal.SIGTERM, original_term_handler)
            signal.signal(signal.SIGHUP, original_hup_handler)
