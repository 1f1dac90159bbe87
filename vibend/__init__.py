"""ANSI terminal drawing: raw output and input, screen size, and simple widgets."""

__version__ = "0.25.2"
__all__ = ["terminal", "screen", "widgets"]