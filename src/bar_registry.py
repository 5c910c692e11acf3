# bar_registry.py
import math
from theme import Theme

# Smallest distance kept between min_value and max_value.
RANGE_EPSILON = 0.0001


def _nudge(value, delta):
    nudged = value + delta
    if nudged == value:
        # delta vanished in float precision at this magnitude
        nudged = math.nextafter(value, math.copysign(math.inf, delta))
    return nudged


def _finite(raw):
    number = float(raw)
    if not math.isfinite(number):
        raise ValueError(f"expected a finite number, got {raw!r}")
    return number


class Bar:
    """
    One named bar of a progress bar widget: a value inside a numeric range,
    plus the colors used to paint it.
    """
    def __init__(self, title, theme):
        self.title = title
        self.min_value = 0.0
        self.max_value = 100.0
        self.value = 0.0
        self.reverse = False

        self.fg = theme.fg
        self.fg_off = theme.bg
        self.bg = theme.bg
        self.border_color = theme.fg
        # Optional gradient stops; both unset means a solid fg fill.
        self.fg_center = None
        self.fg_end = None

    @property
    def has_gradient(self):
        return self.fg_center is not None or self.fg_end is not None

    @property
    def fraction(self):
        """Position of the value inside its range, 0.0 to 1.0."""
        return (self.value - self.min_value) / (self.max_value - self.min_value)

    def __repr__(self):
        return (f"Bar({self.title!r}, value={self.value}, "
                f"range=[{self.min_value}, {self.max_value}], reverse={self.reverse})")


class BarRegistry:
    """
    Insertion-ordered collection of bars keyed by title. The order in which
    titles are first seen is the order in which the bars are drawn.
    """
    def __init__(self, theme=None):
        self.theme = theme or Theme()
        self._bars = {}

    def __len__(self):
        return len(self._bars)

    def __iter__(self):
        return iter(list(self._bars.values()))

    def __contains__(self, title):
        return title in self._bars

    def get(self, title):
        return self._bars.get(title)

    def titles(self):
        return list(self._bars)

    def upsert(self, title):
        """Returns the bar called `title`, creating and appending it if needed."""
        bar = self._bars.get(title)
        if bar is None:
            bar = Bar(title, self.theme)
            self._bars[title] = bar
        return bar

    @staticmethod
    def set_range(bar, new_min=None, new_max=None):
        """
        Applies a new range in two phases. The new minimum is reconciled
        against the current maximum before the new maximum is applied, so
        the range can never collapse or invert. Raises ValueError for a
        bound that isn't a finite number, leaving the bar untouched.
        """
        if new_min is not None:
            new_min = _finite(new_min)
        if new_max is not None:
            new_max = _finite(new_max)

        if new_min is not None:
            bar.min_value = new_min
        if bar.max_value <= bar.min_value:
            bar.max_value = _nudge(bar.max_value, RANGE_EPSILON)
        if bar.value < bar.min_value:
            bar.value = bar.min_value

        if new_max is not None:
            bar.max_value = new_max
        if bar.min_value >= bar.max_value:
            bar.min_value = _nudge(bar.max_value, -RANGE_EPSILON)
        if bar.value > bar.max_value:
            bar.value = bar.max_value

    @staticmethod
    def set_value(bar, raw):
        """Clamps `raw` into the bar's range. Non-finite values raise ValueError."""
        bar.value = max(bar.min_value, min(bar.max_value, _finite(raw)))

    def wipe(self):
        self._bars.clear()
