# vibend

A small library for drawing on a terminal with ANSI escape codes. It moves the cursor, sets colours and text formats, reads single key presses, and draws simple widgets: framed panels, progress bars, word-wrapping text boxes and keyboard-driven item lists.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Writing to the terminal

`vibend.terminal.Terminal` wraps a text stream (standard output if none is given) and writes text and escape sequences to it.

```python
import sys
from vibend.terminal import Terminal, Color, Format

term = Terminal(sys.stdout)
term.clear()
term.teleport(2, 4)            # row 2, column 4
term.set_foreground(Color.GREEN)
term.set_format(Format.BOLD)
term.write("Hello")
term.reset_style()
```

Cursor control: `teleport(y, x)`, `move_rows(y)`, `move_cols(x)`, `move(y, x)`, `save_pos()` and `load_pos()`.
Styles: `set_foreground` / `set_background` take a `Color`; `set_foreground_rgb` / `set_background_rgb` take three components from 0 to 255 and raise `ValueError` for anything else; `set_format` takes a `Format` (bold, dim, italic, underline, reverse). `reset_foreground`, `reset_background` and `reset_style` undo them. `clear()` clears the screen and `clear_line()` clears from the cursor to the end of the line.

`write_clamped(text, maxsize)` writes at most `maxsize` characters, and `write_full(text, fill, size)` writes the text clamped to `size` and pads the rest with `fill`.

### Holding output back

Output written through `writef` (a `%`-style format) — and so every cursor move, colour change and clamped write built on it — can be held back and written at once:

```python
with term.reserving():
    term.teleport(1, 1)
    term.writef("%d items", 3)
term.flush_reserved()
```

Plain `write` always goes straight to the stream, even while reserving. The held-back text is available as `term.reserved` and is capped at 65535 characters.

### Reading keys

`getch(delay=True)` reads one key without echo and returns its code. With `delay=False` it returns `0` when no key is waiting. Enter arrives as `13`; arrow keys arrive as `224` followed by a second code (`H` up, `P` down, `M` right, `K` left). The reader can be replaced by setting `term.key_reader` to a callable that takes the `delay` flag and returns a code or `None`.

## Screen size

`vibend.screen.Screen` keeps the terminal width and height and the cursor visibility.

```python
from vibend.screen import Screen

screen = Screen(term)
screen.init()              # OSError if the stream is not a console
half_width = screen.vw(50)
third_height = screen.vh(33)
```

`check_size()` reads the window size again, `set_cursor(visible)` shows or hides the cursor, and `version()` writes the library version number.

## Widgets

`vibend.widgets` holds the widgets. Each one draws onto a `Terminal` passed to it.

```python
from vibend.widgets import Box, Panel, ProgressBar, TextBox, ItemSelect, SelectAction

box = Box(2, 2, 30, 8)            # x, y, width, height
Panel(box).draw(term)             # "+", "-" and "|" border, blank centre

bar = ProgressBar(box.inner(), "#", head=">", placeholder=".")
bar.progress = 0.4
bar.draw(term)

text = TextBox(box.inner(), "Words wrap inside the box.\nNew lines start a line.")
text.draw(term, 0)                # ValueError if the start line is past the end
```

- `Box.inner()` / `Box.outer()` shrink or grow a box by one cell on each side.
- `Panel` has `draw_border`, `draw_center` and `draw`; every border character and the fill can be set.
- `ProgressBar` clamps `progress` to 0.0–1.0; optional `before` and `after` callables run around the drawing, for example to set and reset a colour.
- `TextBox` breaks text at newlines and wraps words at the box width; `lines` holds the line count and `enter` the character drawn in place of a newline.

```python
menu = ItemSelect(Box(4, 4, 20, 3), ["Start", "Options", "Quit"])
menu.draw_all(term)
menu.hover(term, menu.current)
while (action := menu.refresh(term)) is not SelectAction.SELECT:
    pass
print(menu.items[menu.current])
```

`ItemSelect.refresh` reads a key: Enter returns `SelectAction.SELECT`, up and down move the highlight and return `PREVIOUS` or `NEXT`, anything else returns `NONE`. With `wrapping` on (the default) moving past either end jumps to the other.

## What it does not do

This is a library only; it installs no command. `Screen.init` checks that the output is a console but does not switch a Windows console into escape-code mode, so it expects a terminal that already understands ANSI sequences. Text is measured one character per cell, with no handling of wide characters.