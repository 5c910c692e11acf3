# theme.py
from collections import namedtuple

# Resolved color, channel values in the 0..1 range like Gdk.RGBA.
Color = namedtuple("Color", ["red", "green", "blue", "alpha"])
Color.__new__.__defaults__ = (1.0,)

WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)


class Theme:
    """
    Default colors handed to every new bar. A widget gets its theme
    explicitly instead of reading it from shared application state.
    """
    def __init__(self, fg=WHITE, bg=BLACK):
        self.fg = fg
        self.bg = bg

    def __repr__(self):
        return f"Theme(fg={self.fg!r}, bg={self.bg!r})"
