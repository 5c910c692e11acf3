import math

_TRUE_STRINGS = ("true", "1", "yes", "on")
_FALSE_STRINGS = ("false", "0", "no", "off")


def populate_defaults_from_model(config, model):
    """
    Helper function to populate a configuration dictionary with default values
    from a given configuration model.
    """
    for section in model.values():
        for option in section:
            config.setdefault(option.key, str(option.default))


def parse_bool(value):
    """
    Interprets booleans as they are stored in config files. Raises
    ValueError for anything that isn't recognisably true or false.
    """
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def parse_int(value):
    if isinstance(value, bool):
        raise ValueError(f"not an integer: {value!r}")
    return int(float(value))


def parse_float(value):
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"not a number: {value!r}")
    return number
