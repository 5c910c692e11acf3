import os
from gi.repository import GLib
from progressbar_config import CONFIG_PREFIX, load_layout

config_home = GLib.get_user_config_dir()
if config_home:
    APP_CONFIG_DIR = os.path.join(config_home, "multibar")
else:
    APP_CONFIG_DIR = os.path.expanduser("~/.config/multibar")

DEFAULT_CONFIG_FILE = os.path.join(APP_CONFIG_DIR, "progressbar.ini")


class ConfigManager:
    """
    Loads the progress bar layout file. Only the widget options and the bar
    definitions are read; bar values are never stored.
    """
    def __init__(self, filepath=None):
        self.filepath = filepath or DEFAULT_CONFIG_FILE
        self.widget_options = {}
        self.bars = []

    def load(self, filepath=None):
        load_path = filepath if filepath else self.filepath
        self.widget_options, self.bars = load_layout(load_path)
        if self.widget_options or self.bars:
            print(f"Configuration loaded from {load_path}")
        return bool(self.widget_options or self.bars)

    def get_displayer_config(self):
        """The widget options as flat displayer config keys."""
        return {f"{CONFIG_PREFIX}{key}": str(value) for key, value in self.widget_options.items()}

    def get_bar_configs(self):
        return list(self.bars)
