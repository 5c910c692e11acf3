# color_utils.py
import gi
from theme import Color, Theme

gi.require_version("Gdk", "4.0")
from gi.repository import Gdk


def parse_color(spec):
    """
    Resolves a color specification ("#rrggbb", "rgba(r,g,b,a)", a color
    name, ...) into a Color. Returns None when the string can't be parsed.
    """
    if isinstance(spec, Color):
        return spec
    if spec is None:
        return None
    rgba = Gdk.RGBA()
    if not rgba.parse(str(spec).strip()):
        return None
    return Color(rgba.red, rgba.green, rgba.blue, rgba.alpha)


def theme_from_strings(fg_str, bg_str, fallback=None):
    """Builds a Theme from two color strings, keeping fallback colors for bad ones."""
    fallback = fallback or Theme()
    return Theme(fg=parse_color(fg_str) or fallback.fg,
                 bg=parse_color(bg_str) or fallback.bg)
