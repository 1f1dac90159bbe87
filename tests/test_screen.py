import io
import os
from unittest import mock

import pytest

from vibend.screen import VIBEND_VERSION, Screen
from vibend.terminal import Terminal


class FakeTty(io.StringIO):
    def isatty(self):
        return True

    def fileno(self):
        return 1


@pytest.fixture
def screen():
    return Screen(Terminal(FakeTty()))


def test_version_output():
    s = Screen(Terminal(io.StringIO()))
    s.version()
    assert s.terminal.stream.getvalue() == "Vibend lib %i" % VIBEND_VERSION


def test_init_rejects_non_console():
    s = Screen(Terminal(io.StringIO()))
    with pytest.raises(OSError):
        s.init()


def test_init_reads_size(screen):
    with mock.patch("vibend.screen.os.get_terminal_size", return_value=os.terminal_size((120, 40))):
        screen.init()
    assert (screen.width, screen.height) == (120, 40)
    assert screen.visible is True


def test_check_size_failure_keeps_values():
    s = Screen(Terminal(io.StringIO()))
    s.width, s.height = 7, 9
    s.check_size()
    assert (s.width, s.height) == (7, 9)
    assert s.terminal.stream.getvalue() == ""


def test_set_cursor_toggles(screen):
    screen.set_cursor(False)
    hidden = screen.terminal.stream.getvalue()
    screen.set_cursor(True)
    shown = screen.terminal.stream.getvalue()[len(hidden):]
    assert screen.visible is True
    assert hidden.endswith("l") and shown.endswith("h")
    assert hidden[:-1] == shown[:-1]


def test_viewport_units(screen):
    screen.width, screen.height = 200, 50
    assert screen.vw(100) == screen.width
    assert screen.vh(100) == screen.height
    assert screen.vw(0) == 0
    assert screen.vw(50) * 2 == screen.width


def test_viewport_units_scale_monotonic(screen):
    screen.width, screen.height = 80, 24
    values = [screen.vh(n) for n in range(0, 101, 10)]
    assert values == sorted(values)
    assert values[-1] == 24