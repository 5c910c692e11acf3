# main.py
import os
import sys
import signal

sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

import gi
gi.require_version("Gtk", "4.0")
from gi.repository import Gtk, Gio, GLib
import psutil

from config_manager import ConfigManager
from data_displayers.progress_bars import ProgressBarDisplayer

APP_VERSION = "1.0.0"
UPDATE_INTERVAL_MS = 1000

DEFAULT_DISPLAYER_CONFIG = {
    "progressbar_vertical": "True",
    "progressbar_width": "160",
    "progressbar_border_padding": "1",
}


def default_cpu_bars(core_count):
    """One bar per CPU core, green to red as the load rises."""
    return [
        (f"cpu{i}", {"fg": "#2ecc71", "fg_center": "#f1c40f", "fg_end": "#e74c3c",
                     "fg_off": "#1e1e1e", "border_color": "#7f7f7f"})
        for i in range(core_count)
    ]


class MainWindow(Gtk.ApplicationWindow):
    def __init__(self, app, config_manager):
        super().__init__(title="multibar", application=app)
        self.set_default_size(240, 120)

        displayer_config = dict(DEFAULT_DISPLAYER_CONFIG)
        displayer_config.update(config_manager.get_displayer_config())

        bar_configs = config_manager.get_bar_configs()
        if not bar_configs:
            bar_configs = default_cpu_bars(psutil.cpu_count() or 1)

        self.displayer = ProgressBarDisplayer(displayer_config, bar_configs)
        self.set_child(self.displayer.get_widget())

        # prime psutil, the first call always reports 0.0
        psutil.cpu_percent(interval=None, percpu=True)
        self._timer_id = GLib.timeout_add(UPDATE_INTERVAL_MS, self._on_update_tick)
        self.connect("close-request", self._on_close_request)

    def _on_update_tick(self):
        percents = psutil.cpu_percent(interval=None, percpu=True)
        self.displayer.update_display({f"cpu{i}": p for i, p in enumerate(percents)})
        return GLib.SOURCE_CONTINUE

    def _on_close_request(self, *args):
        if self._timer_id is not None:
            GLib.source_remove(self._timer_id)
            self._timer_id = None
        self.displayer.close()
        return False


class MultibarApp(Gtk.Application):
    def __init__(self, **kwargs):
        super().__init__(application_id="io.github.multibar",
                         flags=Gio.ApplicationFlags.HANDLES_COMMAND_LINE | Gio.ApplicationFlags.NON_UNIQUE,
                         **kwargs)
        self.window = None
        self.config_manager = ConfigManager()

        self.add_main_option(
            "config", 0, GLib.OptionFlags.NONE, GLib.OptionArg.STRING,
            "Load a specific layout file", "FILEPATH")
        self.add_main_option(
            "version", ord("v"), GLib.OptionFlags.NONE, GLib.OptionArg.NONE,
            "Show application version and exit", None)

    def do_activate(self):
        if not self.window or not self.window.is_visible():
            self.window = MainWindow(self, self.config_manager)
        self.window.present()

    def do_command_line(self, command_line):
        options = command_line.get_options_dict().end().unpack()

        if 'version' in options:
            print(f"multibar {APP_VERSION}")
            return 0

        if 'config' in options:
            config_path = options['config']
            if not os.path.isfile(config_path):
                print(f"Error: Config file not found: {config_path}. Exiting.")
                return 1
            if not self.config_manager.load(config_path):
                print(f"Error: No progress bar layout in {config_path}. Exiting.")
                return 1
        elif os.path.exists(self.config_manager.filepath):
            self.config_manager.load()

        self.activate()
        return 0

    def do_startup(self):
        Gtk.Application.do_startup(self)

        for sig in [signal.SIGINT, signal.SIGTERM]:
            GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, sig, self.on_signal, sig)

        action = Gio.SimpleAction.new("quit", None)
        action.connect("activate", lambda *args: self.quit())
        self.add_action(action)
        self.set_accels_for_action("app.quit", ["<Control>q"])

    def on_signal(self, signum):
        print(f"Caught signal {signum}, attempting graceful shutdown.")
        self.quit()
        return True


def main():
    app = MultibarApp()
    return app.run(sys.argv)


if __name__ == "__main__":
    sys.exit(main())
