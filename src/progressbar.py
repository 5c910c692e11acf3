# progressbar.py
from bar_registry import BarRegistry
from progressbar_layout import Alignment, ProgressBarConfig, compute_layout
from progressbar_render import render_bars
from theme import Color, Theme
from utils import parse_bool, parse_float, parse_int

_BAD_VALUE_ERRORS = (ValueError, TypeError, OverflowError)

# Widget options stored as whole pixels or counts.
_INT_OPTIONS = ("width", "gap", "border_width", "border_padding", "ticks_gap", "ticks_count")

_BAR_COLOR_OPTIONS = ("fg", "bg", "fg_off", "border_color", "fg_center", "fg_end")


def _parse_alignment(value):
    if isinstance(value, Alignment):
        return value
    return Alignment(str(value).strip().lower())


class ProgressBar:
    """
    A widget showing one or more named bars side by side.

    The widget keeps the layout options and the bars; drawing is a pure
    function of both plus the canvas size. Colors are resolved through
    `color_resolver`, a callable turning a color spec into a Color or
    None. Every mutation calls `on_invalidate` so the host can schedule a
    redraw.
    """
    def __init__(self, theme=None, color_resolver=None, on_invalidate=None, config=None):
        self.theme = theme or Theme()
        self.config = config or ProgressBarConfig()
        self.bars = BarRegistry(self.theme)
        self.color_resolver = color_resolver
        self.on_invalidate = on_invalidate

    def invalidate(self):
        if self.on_invalidate:
            self.on_invalidate()

    def configure(self, **props):
        """
        Sets widget options: gap, ticks_count, ticks_gap, border_padding,
        border_width, width, height, vertical and align. Options that are
        not given keep their value.
        """
        config = self.config
        for key, raw in props.items():
            try:
                if key in _INT_OPTIONS:
                    setattr(config, key, max(0, parse_int(raw)))
                elif key == "height":
                    config.height = min(1.0, max(0.0, parse_float(raw)))
                elif key == "vertical":
                    config.vertical = parse_bool(raw)
                elif key == "align":
                    config.align = _parse_alignment(raw)
                else:
                    print(f"[Warning] Unknown progressbar option '{key}' ignored.")
            except _BAD_VALUE_ERRORS:
                print(f"[Warning] Invalid value {raw!r} for progressbar option '{key}' ignored.")
        self.invalidate()

    def configure_bar(self, title, **props):
        """
        Sets properties of the bar called `title`, creating it if needed.
        Colors that can't be resolved leave the current color in place.
        """
        bar = self.bars.upsert(title)

        for key in _BAR_COLOR_OPTIONS:
            if key not in props:
                continue
            color = self._resolve_color(props[key])
            if color is not None:
                setattr(bar, key, color)

        new_min = self._number_option(title, props, "min_value")
        new_max = self._number_option(title, props, "max_value")
        self.bars.set_range(bar, new_min, new_max)

        if "reverse" in props:
            try:
                bar.reverse = parse_bool(props["reverse"])
            except _BAD_VALUE_ERRORS:
                print(f"[Warning] Invalid value {props['reverse']!r} for 'reverse' of bar '{title}' ignored.")

        unknown = set(props) - set(_BAR_COLOR_OPTIONS) - {"min_value", "max_value", "reverse"}
        for key in sorted(unknown):
            print(f"[Warning] Unknown option '{key}' for bar '{title}' ignored.")

        self.invalidate()
        return bar

    def set_value(self, title, value):
        """Moves the bar called `title` to `value`, clamped into its range."""
        bar = self.bars.upsert(title)
        try:
            self.bars.set_value(bar, parse_float(value))
        except _BAD_VALUE_ERRORS:
            print(f"[Warning] Invalid value {value!r} for bar '{title}' ignored.")
        self.invalidate()
        return bar

    def update_values(self, values):
        """Sets several bar values at once from a {title: value} mapping."""
        for title, value in values.items():
            bar = self.bars.upsert(title)
            try:
                self.bars.set_value(bar, parse_float(value))
            except _BAD_VALUE_ERRORS:
                print(f"[Warning] Invalid value {value!r} for bar '{title}' ignored.")
        self.invalidate()

    def layout(self, width, height, offset=0):
        return compute_layout(self.config, len(self.bars), width, height, offset)

    def render(self, width, height, offset=0):
        """Returns (extent, draw commands) for a canvas of the given size."""
        layout = self.layout(width, height, offset)
        if layout is None:
            return 0, []
        return layout.area_width, render_bars(self.bars, layout)

    def draw(self, draw_context, width, height, offset=0):
        """
        Draws all bars through `draw_context` and returns the width the
        widget takes on the host canvas.
        """
        extent, commands = self.render(width, height, offset)
        for command in commands:
            draw_context.draw(command)
        return extent

    def close(self):
        self.bars.wipe()
        self.on_invalidate = None

    def _resolve_color(self, spec):
        if isinstance(spec, Color):
            return spec
        if self.color_resolver is None:
            return None
        try:
            return self.color_resolver(spec)
        except _BAD_VALUE_ERRORS as e:
            print(f"[Warning] Could not resolve color {spec!r}: {e}")
            return None

    def _number_option(self, title, props, key):
        if key not in props:
            return None
        try:
            return parse_float(props[key])
        except _BAD_VALUE_ERRORS:
            print(f"[Warning] Invalid value {props[key]!r} for '{key}' of bar '{title}' ignored.")
            return None
