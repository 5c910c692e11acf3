# progressbar_config.py
import configparser
import os
from config_model import ConfigOption

CONFIG_PREFIX = "progressbar_"
WIDGET_SECTION = "progressbar"
BAR_SECTION_PREFIX = "bar:"

# Options handed straight to ProgressBar.configure()
WIDGET_OPTION_KEYS = (
    "width", "height", "gap", "border_width", "border_padding",
    "ticks_gap", "ticks_count", "vertical", "align",
)


def get_config_model():
    """Returns the configuration options of a progress bar displayer."""
    align_opts = {"Left": "left", "Right": "right", "Flex": "flex"}
    return {
        "Layout": [
            ConfigOption("progressbar_vertical", "bool", "Vertical Bars:", "False"),
            ConfigOption("progressbar_width", "spinner", "Width (px):", 80, 1, 4000, 1, 0),
            ConfigOption("progressbar_height", "scale", "Height Fraction:", "0.8", 0.05, 1.0, 0.05, 2),
            ConfigOption("progressbar_gap", "spinner", "Gap Between Bars (px):", 2, 0, 100, 1, 0),
            ConfigOption("progressbar_align", "dropdown", "Alignment:", "left", options_dict=align_opts),
            ConfigOption("progressbar_offset", "spinner", "Offset (px):", 0, 0, 4000, 1, 0),
        ],
        "Border": [
            ConfigOption("progressbar_border_width", "spinner", "Border Width (px):", 1, 0, 20, 1, 0),
            ConfigOption("progressbar_border_padding", "spinner", "Border Padding (px):", 0, 0, 20, 1, 0),
        ],
        "Ticks": [
            ConfigOption("progressbar_ticks_count", "spinner", "Tick Count:", 0, 0, 200, 1, 0,
                         tooltip="0 draws a continuous bar."),
            ConfigOption("progressbar_ticks_gap", "spinner", "Gap Between Ticks (px):", 1, 0, 20, 1, 0),
        ],
        "Theme": [
            ConfigOption("progressbar_theme_fg", "color", "Default Foreground:", "rgba(255,255,255,1.0)"),
            ConfigOption("progressbar_theme_bg", "color", "Default Background:", "rgba(0,0,0,1.0)"),
            ConfigOption("progressbar_default_bar", "string", "Bar For Single Values:", "value"),
        ],
    }


def widget_options_from_config(config):
    """
    Picks the widget options out of a flat displayer config, e.g.
    {"progressbar_gap": "2"} -> {"gap": "2"}.
    """
    options = {}
    for key in WIDGET_OPTION_KEYS:
        full_key = CONFIG_PREFIX + key
        if full_key in config:
            options[key] = config[full_key]
    return options


def load_layout(filepath):
    """
    Reads a progress bar layout file. Returns (widget_options, bars), where
    bars is a list of (title, properties) in file order. A missing or
    broken file gives an empty layout.
    """
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str

    if not filepath or not os.path.exists(filepath):
        print(f"Layout file {filepath} not found.")
        return {}, []
    try:
        parser.read(filepath, encoding='utf-8')
    except (configparser.Error, UnicodeDecodeError) as e:
        print(f"Error reading layout file {filepath}: {e}")
        return {}, []

    return layout_from_parser(parser)


def layout_from_parser(parser):
    widget_options = {}
    if parser.has_section(WIDGET_SECTION):
        widget_options = dict(parser.items(WIDGET_SECTION))

    bars = []
    for section_name in parser.sections():
        if section_name.startswith(BAR_SECTION_PREFIX):
            title = section_name[len(BAR_SECTION_PREFIX):].strip()
            if not title:
                print(f"[Warning] Bar section '{section_name}' has no title, skipped.")
                continue
            bars.append((title, dict(parser.items(section_name))))
    return widget_options, bars


def apply_layout(progressbar, widget_options, bars):
    """Configures a ProgressBar from a loaded layout."""
    options = {k: v for k, v in widget_options.items() if k in WIDGET_OPTION_KEYS}
    if options:
        progressbar.configure(**options)
    for title, props in bars:
        progressbar.configure_bar(title, **props)
