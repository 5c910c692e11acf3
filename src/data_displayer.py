# /data_displayer.py
from abc import ABC, abstractmethod
from utils import populate_defaults_from_model


class DataDisplayer(ABC):
    """
    Base class for widgets that show incoming data. A subclass builds its
    Gtk widget, describes its options through a config model and redraws
    when new data arrives.
    """
    def __init__(self, config):
        self.config = config
        populate_defaults_from_model(self.config, self.get_config_model())
        self.widget = self._create_widget()

    @abstractmethod
    def _create_widget(self):
        pass

    def get_widget(self):
        return self.widget

    def update_display(self, value):
        pass

    @staticmethod
    def get_config_model():
        return {}

    def apply_styles(self):
        pass

    def reset_state(self):
        """Optional method to reset any internal state when config changes."""
        pass

    def close(self):
        self.widget = None
