"""Raw terminal output: text, cursor movement, colours and keyboard input."""

from __future__ import annotations

import os
import sys
from collections import deque
from contextlib import contextmanager
from enum import Enum, IntEnum
from typing import Callable, Iterator, Optional, TextIO

CONSOLE_MAX_SIZE = 65536

KeyReader = Callable[[bool], Optional[int]]


class Format(Enum):
    """Text attributes understood by ANSI terminals."""

    BOLD = 0
    DIM = 1
    ITALIC = 2
    UNDERLINE = 3
    REVERSE = 4

    @property
    def code(self) -> int:
        """The SGR parameter that switches this attribute on."""
        return 7 if self is Format.REVERSE else self.value + 1


class Color(IntEnum):
    """The eight basic ANSI colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


_ARROWS = {ord("A"): ord("H"), ord("B"): ord("P"), ord("C"): ord("M"), ord("D"): ord("K")}


def _windows_reader() -> KeyReader:
    import msvcrt

    def read(delay: bool) -> Optional[int]:
        if delay or msvcrt.kbhit():
            return msvcrt.getch()[0]
        return None

    return read


def _posix_reader() -> KeyReader:
    import select
    import termios
    import tty

    pending: deque[int] = deque()

    def read(delay: bool) -> Optional[int]:
        if pending:
            return pending.popleft()
        fd = sys.stdin.fileno()

        def read_byte(timeout: Optional[float]) -> Optional[int]:
            ready, _, _ = select.select([fd], [], [], timeout)
            if not ready:
                return None
            data = os.read(fd, 1)
            return data[0] if data else None

        saved = termios.tcgetattr(fd) if os.isatty(fd) else None
        try:
            if saved is not None:
                tty.setcbreak(fd)
            first = read_byte(None if delay else 0)
            if first == 27:
                second = read_byte(0.01)
                third = read_byte(0.01) if second is not None else None
                if second == ord("[") and third in _ARROWS:
                    pending.append(_ARROWS[third])
                    return 224
                pending.extend(b for b in (second, third) if b is not None)
            if first == 10:
                return 13
            return first
        finally:
            if saved is not None:
                termios.tcsetattr(fd, termios.TCSADRAIN, saved)

    return read


def _default_reader() -> KeyReader:
    return _windows_reader() if sys.platform == "win32" else _posix_reader()


class Terminal:
    """Writes text and ANSI escape sequences to a stream.

    Formatted output (``writef`` and everything built on it) can be held back
    while ``reserve`` is set and written later with ``flush_reserved``.
    Plain ``write`` always goes straight to the stream.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.reserve = False
        self._reserved: list[str] = []
        self._reserved_len = 0
        self.key_reader: Optional[KeyReader] = None

    # -- output -----------------------------------------------------------

    def write(self, text: str) -> None:
        """Write text directly to the stream."""
        if text is None:
            raise ValueError("Cannot print None")
        self.stream.write(text)

    def writef(self, fmt: str, *args: object) -> None:
        """Write ``fmt % args``, or keep it back while reserving."""
        if fmt is None:
            raise ValueError("Cannot print None")
        text = fmt % args if args else fmt
        if self.reserve:
            room = CONSOLE_MAX_SIZE - 1 - self._reserved_len
            if room > 0:
                text = text[:room]
                self._reserved.append(text)
                self._reserved_len += len(text)
        else:
            self.stream.write(text)

    @property
    def reserved(self) -> str:
        """The output held back so far."""
        return "".join(self._reserved)

    @contextmanager
    def reserving(self) -> Iterator["Terminal"]:
        """Hold back formatted output for the duration of the block.

        The held output stays reserved until ``flush_reserved`` is called.
        """
        previous = self.reserve
        self.reserve = True
        try:
            yield self
        finally:
            self.reserve = previous

    def flush_reserved(self) -> None:
        """Write the held-back output and clear it."""
        self.stream.write(self.reserved)
        self._reserved.clear()
        self._reserved_len = 0

    def write_clamped(self, text: str, maxsize: int) -> None:
        """Write at most ``maxsize`` characters of text."""
        if text is None:
            raise ValueError("Cannot print None")
        for ch in text[: max(maxsize, 0)]:
            self.writef("%c", ch)

    def write_full(self, text: str, fill: str, size: int) -> None:
        """Write text clamped to ``size`` and pad the rest with ``fill``."""
        self.write_clamped(text, size)
        left = size - len(text)
        if left > 0:
            self.write(fill * left)

    # -- cursor -----------------------------------------------------------

    def save_pos(self) -> None:
        self.write("\x1b[s")

    def load_pos(self) -> None:
        self.write("\x1b[u")

    def teleport(self, y: int, x: int) -> None:
        """Move the cursor to row ``y``, column ``x``."""
        self.writef("\x1b[%i;%iH", y, x)

    def move_rows(self, y: int) -> None:
        """Move the cursor down (positive) or up (negative)."""
        if y < 0:
            self.writef("\x1b[%iA", -y)
        elif y > 0:
            self.writef("\x1b[%iB", y)

    def move_cols(self, x: int) -> None:
        """Move the cursor right (positive) or left (negative)."""
        if x > 0:
            self.writef("\x1b[%iC", x)
        elif x < 0:
            self.writef("\x1b[%iD", -x)

    def move(self, y: int, x: int) -> None:
        self.move_rows(y)
        self.move_cols(x)

    # -- style ------------------------------------------------------------

    def reset_style(self) -> None:
        self.write("\x1b[0m")

    def reset_foreground(self) -> None:
        self.write("\x1b[39m")

    def set_foreground(self, color: Color) -> None:
        self.writef("\x1b[%im", int(Color(color)) + 30)

    def set_foreground_rgb(self, r: int, g: int, b: int) -> None:
        _check_rgb(r, g, b)
        self.writef("\x1b[38;2;%i;%i;%im", r, g, b)

    def reset_background(self) -> None:
        self.write("\x1b[49m")

    def set_background(self, color: Color) -> None:
        self.writef("\x1b[%im", int(Color(color)) + 40)

    def set_background_rgb(self, r: int, g: int, b: int) -> None:
        _check_rgb(r, g, b)
        self.writef("\x1b[48;2;%i;%i;%im", r, g, b)

    def set_format(self, fmt: Format) -> None:
        self.writef("\x1b[%im", Format(fmt).code)

    def clear(self) -> None:
        """Clear the whole screen."""
        self.write("\x1b[2J")

    def clear_line(self) -> None:
        """Clear the line from the cursor onwards."""
        self.write("\x1b[K")

    # -- input ------------------------------------------------------------

    def getch(self, delay: bool = True) -> int:
        """Read one key code without echo; 0 if none is waiting and not ``delay``.

        Arrow keys arrive as 224 followed by a second code.
        """
        if self.key_reader is None:
            self.key_reader = _default_reader()
        code = self.key_reader(delay)
        return code if code is not None else 0


def _check_rgb(*parts: int) -> None:
    for part in parts:
        if not 0 <= part <= 255:
            raise ValueError(f"colour component {part} is outside 0..255")