"""
Shared pytest fixtures.
"""
import pytest

from progressbar import ProgressBar
from theme import Color, Theme

RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
GREY = Color(0.5, 0.5, 0.5)
WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)

NAMED_COLORS = {
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "grey": GREY,
    "#ff0000": RED,
}


class RecordingContext:
    """Draw context that keeps the commands it is given."""
    def __init__(self):
        self.commands = []

    def draw(self, command):
        self.commands.append(command)


def resolve_named_color(spec):
    return NAMED_COLORS.get(str(spec).lower())


@pytest.fixture
def theme():
    return Theme(fg=WHITE, bg=BLACK)


@pytest.fixture
def recorder():
    return RecordingContext()


@pytest.fixture
def invalidations():
    calls = []
    return calls


@pytest.fixture
def progressbar(theme, invalidations):
    return ProgressBar(theme=theme, color_resolver=resolve_named_color,
                       on_invalidate=lambda: invalidations.append(1))
