# config_model.py

class ConfigOption:
    """
    A data class to define a single configuration option.
    """
    def __init__(self, key, option_type, label, default,
                 min_val=None, max_val=None, step=None, digits=0,
                 options_dict=None, tooltip=None):
        self.key = key
        # Valid types: "string", "bool", "color", "scale", "spinner", "dropdown"
        self.type = option_type
        self.label = label
        self.default = default
        self.min_val = min_val
        self.max_val = max_val
        self.step = step
        self.digits = digits
        self.options_dict = options_dict or {}
        self.tooltip = tooltip

    def __repr__(self):
        return f"ConfigOption({self.key!r}, {self.type!r}, default={self.default!r})"
