"""Widgets drawn with a Terminal: panels, progress bars, text boxes and item lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, List, Optional

from .terminal import Color, Terminal

_U16 = 0xFFFF


@dataclass
class Box:
    """A rectangle on the screen: left, top, width and height."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def inner(self) -> "Box":
        """The box shrunk by one cell on every side."""
        return Box(
            (self.x + 1) & _U16,
            (self.y + 1) & _U16,
            (self.w - 2) & _U16,
            (self.h - 2) & _U16,
        )

    def outer(self) -> "Box":
        """The box grown by one cell on every side."""
        return Box(
            (self.x - 1) & _U16,
            (self.y - 1) & _U16,
            (self.w + 2) & _U16,
            (self.h + 2) & _U16,
        )


@dataclass
class Panel:
    """A bordered rectangle with an optional filled centre."""

    box: Box
    toprow: str = "-"
    botrow: str = "-"
    leftcol: str = "|"
    rightcol: str = "|"
    topleftcorner: str = "+"
    toprightcorner: str = "+"
    botleftcorner: str = "+"
    botrightcorner: str = "+"
    fill: str = " "

    def draw_border(self, term: Terminal) -> None:
        """Draw the four edges and corners."""
        box = self.box
        if box.w == 0 or box.h == 0:
            return

        term.teleport(box.y, box.x)
        term.writef("%c", self.topleftcorner)
        if box.w > 2:
            term.write(self.toprow * (box.w - 2))
        if box.w > 1:
            term.writef("%c", self.toprightcorner)

        for i in range(1, box.h - 1):
            term.teleport(box.y + i, box.x)
            term.writef("%c", self.leftcol)
            term.teleport(box.y + i, box.x + box.w - 1)
            term.writef("%c", self.rightcol)

        term.teleport(box.y + box.h - 1, box.x)
        term.writef("%c", self.botleftcorner)
        if box.w > 2:
            term.write(self.botrow * (box.w - 2))
        if box.w > 1:
            term.writef("%c", self.botrightcorner)

    def draw_center(self, term: Terminal) -> None:
        """Fill the inside of the panel."""
        box = self.box
        if box.w < 3 or box.h < 3:
            return
        line = self.fill * (box.w - 2)
        for i in range(1, box.h - 1):
            term.teleport(box.y + i, box.x + 1)
            term.write(line)

    def draw(self, term: Terminal) -> None:
        """Draw both the border and the centre."""
        self.draw_border(term)
        self.draw_center(term)


@dataclass
class ProgressBar:
    """A horizontal bar filled according to ``progress`` (0.0 to 1.0).

    An empty ``head`` means the bar has no head character.
    ``before`` runs after moving to the bar and before drawing; ``after`` runs
    once drawing is done.
    """

    box: Box
    fill: str
    head: str = ""
    placeholder: str = " "
    before: Optional[Callable[[], None]] = None
    after: Optional[Callable[[], None]] = None
    progress: float = 0.0

    def draw(self, term: Terminal) -> None:
        self.progress = min(max(0.0, self.progress), 1.0)
        box = self.box
        if box.w + box.h == 0:
            return

        amount = int(box.w * self.progress)
        filled = self.fill * amount
        if amount == box.w or not self.head:
            line = filled
        else:
            line = filled + self.head + self.placeholder * (box.w - amount - 1)

        term.teleport(box.y, box.x)
        if self.before is not None:
            self.before()
        for _ in range(box.h):
            term.write(line)
            term.move(1, -box.w)
        if self.after is not None:
            self.after()


def _add_word(x: int, size: int, maxsize: int, breaks: List[int]) -> int:
    """Place a word of ``size`` on a line at column ``x``; return the new column."""
    if x + size <= maxsize:
        return x + size
    breaks.append(x)
    if size < maxsize:
        return size
    need = size // maxsize
    breaks.extend([maxsize] * need)
    return size - need * maxsize


class TextBox:
    """Multi-line text, broken at newlines and wrapped at the box width."""

    def __init__(self, box: Box, text: str) -> None:
        if text is None:
            raise ValueError("text cannot be None")
        self.box = box
        self.text = text
        self.breaks: List[int] = []
        self.lines = 0
        self.enter = " "
        self.check_breaks()

    def check_breaks(self) -> None:
        """Recompute the line breaks and the number of lines."""
        self.breaks = []
        if self.box.w == 0:
            self.lines = 0
            return

        width = self.box.w
        x = 0
        wordsize = 0
        for ch in self.text:
            wordsize += 1
            if ch == "\n":
                x = _add_word(x, wordsize, width, self.breaks)
                self.breaks.append(x)
                wordsize = 0
                x = 0
                continue
            if ch != " ":
                continue
            x = _add_word(x, wordsize, width, self.breaks)
            wordsize = 0

        if wordsize:
            x = _add_word(x, wordsize, width, self.breaks)

        self.lines = len(self.breaks) + (1 if x else 0)

    def draw(self, term: Terminal, startline: int = 0) -> None:
        """Draw the text from line ``startline`` as far as the box allows."""
        box = self.box
        if box.w == 0 or box.h == 0:
            return
        if startline >= self.lines:
            raise ValueError("The start line is larger than the height of text")

        cur = sum(self.breaks[:startline])
        y = box.y
        for end in self.breaks[startline:]:
            term.teleport(y, box.x)
            y += 1
            for ch in self.text[cur:cur + end]:
                term.writef("%c", self.enter if ch == "\n" else ch)
            cur += end
            if y - box.y > box.h - 1:
                return

        term.teleport(y, box.x)
        term.write(self.text[cur:])


class SelectAction(IntEnum):
    """What a key press did to an ItemSelect."""

    SELECT = 0
    PREVIOUS = 1
    NEXT = 2
    NONE = 255


@dataclass
class ItemSelect:
    """A vertical list of items with one highlighted entry."""

    box: Box
    items: List[str]
    normal_foreground: Color = Color.WHITE
    normal_background: Color = Color.BLACK
    hover_foreground: Color = Color.BLACK
    hover_background: Color = Color.WHITE
    wrapping: bool = True
    current: int = field(default=0)

    def __post_init__(self) -> None:
        if self.items is None:
            raise ValueError("'items' cannot be None")

    def _drawable(self) -> bool:
        if self.items is None:
            raise ValueError("'items' cannot be None")
        return bool(self.box.h and self.box.w and self.items)

    def draw_all(self, term: Terminal) -> None:
        """Draw every item in the normal style."""
        if not self._drawable():
            return
        for i, item in enumerate(self.items):
            term.teleport(self.box.y + i, self.box.x)
            term.write_full(item, " ", self.box.w)

    def _draw_item(self, term: Terminal, idx: int, fg: Color, bg: Color) -> None:
        if not self._drawable():
            return
        if not 0 <= idx < len(self.items):
            raise IndexError("The 'idx' is out of range")
        term.teleport(self.box.y + idx, self.box.x)
        term.set_foreground(fg)
        term.set_background(bg)
        term.write_full(self.items[idx], " ", self.box.w)
        term.reset_foreground()
        term.reset_background()

    def hover(self, term: Terminal, idx: int) -> None:
        """Draw item ``idx`` highlighted."""
        self._draw_item(term, idx, self.hover_foreground, self.hover_background)

    def unhover(self, term: Terminal, idx: int) -> None:
        """Draw item ``idx`` in the normal style."""
        self._draw_item(term, idx, self.normal_foreground, self.normal_background)

    def previous(self, term: Terminal) -> None:
        """Move the highlight up one item."""
        if self.items is None:
            raise ValueError("'items' cannot be None")
        if self.current == 0 and not self.wrapping:
            return
        if len(self.items) < 2:
            return
        self.unhover(term, self.current)
        self.current -= 1
        if self.current < 0:
            self.current = len(self.items) - 1
        self.hover(term, self.current)

    def next(self, term: Terminal) -> None:
        """Move the highlight down one item."""
        if self.items is None:
            raise ValueError("'items' cannot be None")
        if self.current == len(self.items) - 1 and not self.wrapping:
            return
        if len(self.items) < 2:
            return
        self.unhover(term, self.current)
        self.current += 1
        if self.current == len(self.items):
            self.current = 0
        self.hover(term, self.current)

    def refresh(self, term: Terminal, delay: bool = True) -> SelectAction:
        """Read a key and act on it: Enter selects, arrows move."""
        if self.items is None:
            raise ValueError("'items' cannot be None")
        ch = term.getch(delay)
        if ch == 13:
            return SelectAction.SELECT
        if ch != 224:
            return SelectAction.NONE
        ch = term.getch()
        if ch == ord("H"):
            self.previous(term)
            return SelectAction.PREVIOUS
        if ch == ord("P"):
            self.next(term)
            return SelectAction.NEXT
        return SelectAction.NONE