"""Screen state: size, cursor visibility and viewport-relative units."""

from __future__ import annotations

import os

from .terminal import Terminal

VIBEND_VERSION = 25002


class Screen:
    """Tracks the size of the terminal window and the cursor's visibility."""

    def __init__(self, terminal: Terminal) -> None:
        self.terminal = terminal
        self.width = 0
        self.height = 0
        self.visible = False

    def init(self) -> None:
        """Prepare the terminal for use; raises OSError if it is not a console."""
        stream = self.terminal.stream
        isatty = getattr(stream, "isatty", None)
        if isatty is None or not isatty():
            raise OSError("output stream is not a console")
        self.visible = True
        self.check_size()

    def version(self) -> None:
        """Write the library version."""
        self.terminal.writef("Vibend lib %i", VIBEND_VERSION)

    def check_size(self) -> None:
        """Update the width and height from the terminal window, if known."""
        try:
            size = os.get_terminal_size(self.terminal.stream.fileno())
        except (OSError, ValueError, AttributeError):
            return
        self.width = size.columns & 0xFFFF
        self.height = size.lines & 0xFFFF
        self.set_cursor(self.visible)

    def set_cursor(self, visible: bool) -> None:
        """Show or hide the cursor."""
        self.visible = bool(visible)
        self.terminal.write("\x1b[?25h" if self.visible else "\x1b[?25l")

    def vw(self, n: int) -> int:
        """``n`` percent of the screen width."""
        return ((n & 0xFFFF) * self.width // 100) & 0xFFFF

    def vh(self, n: int) -> int:
        """``n`` percent of the screen height."""
        return ((n & 0xFFFF) * self.height // 100) & 0xFFFF