# /data_displayers/progress_bars.py
import gi
import numbers
from data_displayer import DataDisplayer
from color_utils import parse_color, theme_from_strings
from draw_context import CairoDrawContext
from progressbar import ProgressBar
from progressbar_config import get_config_model, widget_options_from_config
from utils import parse_int

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk


class ProgressBarDisplayer(DataDisplayer):
    """
    Shows a set of named bars in a Gtk.DrawingArea. Bars are defined through
    `bar_configs` (title, properties) and get their values from
    update_display().
    """
    def __init__(self, config, bar_configs=None):
        self.progressbar = None
        self._bar_configs = list(bar_configs or [])
        self.last_extent = 0
        super().__init__(config)
        self.progressbar = ProgressBar(
            theme=theme_from_strings(self.config.get("progressbar_theme_fg"),
                                     self.config.get("progressbar_theme_bg")),
            color_resolver=parse_color,
            on_invalidate=self._queue_draw,
        )
        self.apply_styles()

    def _create_widget(self):
        drawing_area = Gtk.DrawingArea(hexpand=True, vexpand=True)
        drawing_area.set_draw_func(self.on_draw)
        return drawing_area

    @staticmethod
    def get_config_model():
        return get_config_model()

    def apply_styles(self):
        """Pushes the current config and bar definitions into the progress bar."""
        super().apply_styles()
        self.progressbar.configure(**widget_options_from_config(self.config))
        for title, props in self._bar_configs:
            self.progressbar.configure_bar(title, **props)
        # ask the host for the configured widget width
        if self.widget is not None:
            self.widget.set_content_width(self.progressbar.config.width)

    def set_bar_configs(self, bar_configs):
        self._bar_configs = list(bar_configs)
        self.apply_styles()

    def update_display(self, data):
        """
        Accepts either a {title: value} mapping or a single number, which
        goes to the bar named by `progressbar_default_bar`.
        """
        if data is None or self.progressbar is None:
            return
        if isinstance(data, dict):
            self.progressbar.update_values(data)
        elif isinstance(data, numbers.Number):
            title = self.config.get("progressbar_default_bar", "value")
            self.progressbar.set_value(title, data)
        else:
            print(f"[Warning] ProgressBarDisplayer can't show data of type {type(data).__name__}.")

    def reset_state(self):
        self.progressbar.bars.wipe()
        self.apply_styles()

    def on_draw(self, area, ctx, width, height):
        if width <= 0 or height <= 0 or self.progressbar is None:
            return
        try:
            offset = parse_int(self.config.get("progressbar_offset", 0))
        except (ValueError, TypeError, OverflowError):
            offset = 0
        self.last_extent = self.progressbar.draw(CairoDrawContext(ctx), width, height, offset)

    def _queue_draw(self):
        if self.widget is not None:
            self.widget.queue_draw()

    def close(self):
        if self.progressbar is not None:
            self.progressbar.close()
            self.progressbar = None
        super().close()
