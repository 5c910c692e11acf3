"""
Tests for color_utils — resolving color specifications through Gdk.
"""
import pytest

pytest.importorskip("gi")
try:
    import color_utils
except (ImportError, ValueError) as e:
    pytest.skip(f"Gdk 4 is not available: {e}", allow_module_level=True)

from conftest import BLACK, RED, WHITE
from theme import Theme


class TestParseColor:
    def test_hex(self):
        assert color_utils.parse_color("#ff0000") == RED

    def test_rgba(self):
        color = color_utils.parse_color("rgba(0,0,255,0.5)")
        assert color[:3] == (0.0, 0.0, 1.0)
        assert color.alpha == pytest.approx(0.5)

    def test_named(self):
        assert color_utils.parse_color("white") == WHITE

    def test_surrounding_whitespace(self):
        assert color_utils.parse_color("  #000000 ") == BLACK

    @pytest.mark.parametrize("spec", ["not-a-color", "", "#12", None])
    def test_unparseable_gives_none(self, spec):
        assert color_utils.parse_color(spec) is None

    def test_color_passes_through(self):
        assert color_utils.parse_color(RED) is RED


class TestThemeFromStrings:
    def test_both_valid(self):
        theme = color_utils.theme_from_strings("#ff0000", "white")
        assert (theme.fg, theme.bg) == (RED, WHITE)

    def test_bad_strings_keep_fallback(self):
        fallback = Theme(fg=RED, bg=WHITE)
        theme = color_utils.theme_from_strings("nope", None, fallback)
        assert (theme.fg, theme.bg) == (RED, WHITE)
