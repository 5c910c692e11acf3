# progressbar_layout.py
from enum import Enum


class Alignment(Enum):
    LEFT = "left"
    RIGHT = "right"
    FLEX = "flex"


class ProgressBarConfig:
    """
    Layout parameters shared by all bars of one progress bar widget.
    """
    def __init__(self, width=80, height=0.80, gap=2, border_width=1,
                 border_padding=0, ticks_gap=1, ticks_count=0,
                 vertical=False, align=Alignment.LEFT):
        self.width = width                    # nominal widget extent (px)
        self.height = height                  # fraction of the canvas height used
        self.gap = gap                        # px between adjacent bars
        self.border_width = border_width
        self.border_padding = border_padding  # px between border and fill area
        self.ticks_gap = ticks_gap            # px between ticks
        self.ticks_count = ticks_count        # 0 disables tick quantization
        self.vertical = vertical
        self.align = align

    @property
    def frame(self):
        """Space taken by border plus padding on one side of a bar."""
        return self.border_width + self.border_padding

    @property
    def has_ticks(self):
        return self.ticks_count > 0 and self.ticks_gap > 0

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"ProgressBarConfig({fields})"


def calculate_offset(canvas_width, widget_width, offset, align):
    """Returns the x position of a widget placed on the host canvas."""
    if align in (Alignment.LEFT, Alignment.FLEX):
        return offset
    return canvas_width - offset - widget_width


def round_half_up(value):
    return int(value + 0.5)


class BarLayout:
    """
    Geometry of one draw call. Coordinates describe the fill area of each
    bar, i.e. the box inside its border and padding.

    `length` runs along the axis in which a bar's value grows, `thickness`
    across it. Bars are placed next to each other `step` pixels apart.
    """
    def __init__(self, vertical, area_x, area_width, thickness, length,
                 unit, ticks_count, ticks_gap, border_width, border_padding,
                 gap, origin_x, origin_y):
        self.vertical = vertical
        self.area_x = area_x
        self.area_width = area_width
        self.thickness = thickness
        self.length = length
        self.unit = unit
        self.ticks_count = ticks_count
        self.ticks_gap = ticks_gap
        self.border_width = border_width
        self.border_padding = border_padding
        self.gap = gap
        self.origin_x = origin_x
        self.origin_y = origin_y

    @property
    def frame(self):
        return self.border_width + self.border_padding

    @property
    def quantized(self):
        return self.unit > 0

    @property
    def step(self):
        return self.thickness + self.gap + 2 * self.frame

    def bar_origin(self, index):
        """Top-left corner of the fill area of the bar at `index`."""
        if self.vertical:
            return self.origin_x + index * self.step, self.origin_y
        return self.origin_x, self.origin_y + index * self.step

    def bar_size(self):
        """(width, height) of every bar's fill area."""
        if self.vertical:
            return self.thickness, self.length
        return self.length, self.thickness

    def progress_length(self, fraction):
        """
        Filled length for a value at `fraction` of its range, snapped to
        whole tick cells when ticks are enabled.
        """
        if self.quantized:
            ticks = round_half_up(self.ticks_count * fraction)
            return ticks * self.unit - self.ticks_gap if ticks else 0
        return round_half_up(self.length * fraction)

    def tick_gap_offsets(self):
        """Offsets of the separators between tick cells, from the fill start edge."""
        if not self.quantized:
            return []
        return list(range(self.unit - self.ticks_gap,
                          self.length - self.ticks_gap + 1,
                          self.unit))


def _quantize(length, config):
    """Returns (unit, length rounded down to whole tick cells)."""
    if not config.has_ticks:
        return 0, length
    # a unit is one tick plus the gap that follows it
    unit = (length + config.ticks_gap) // config.ticks_count
    # a cell no wider than its gap leaves no room for the tick itself
    if unit <= config.ticks_gap:
        return 0, length
    return unit, unit * config.ticks_count - config.ticks_gap


def compute_layout(config, bar_count, canvas_width, canvas_height, offset=0):
    """
    Computes the geometry for drawing `bar_count` bars on a canvas.
    Returns None when there is nothing to lay out.
    """
    if bar_count <= 0:
        return None

    frame = config.frame
    gap = config.gap
    top = int(canvas_height * (1 - config.height)) // 2 + frame

    if config.vertical:
        thickness = (config.width - 2 * frame * bar_count - gap * (bar_count - 1)) // bar_count
        area_width = bar_count * (thickness + 2 * frame + gap) - gap
        length = round_half_up(canvas_height * config.height) - 2 * frame
        unit, length = _quantize(length, config)
    else:
        length = config.width - 2 * frame
        unit, length = _quantize(length, config)
        area_width = length + 2 * frame
        thickness = round_half_up((canvas_height * config.height
                                   - bar_count * 2 * frame
                                   - gap * (bar_count - 1)) / bar_count)

    area_x = calculate_offset(canvas_width, area_width, offset, config.align)

    return BarLayout(
        vertical=config.vertical,
        area_x=area_x,
        area_width=area_width,
        thickness=thickness,
        length=length,
        unit=unit,
        ticks_count=config.ticks_count,
        ticks_gap=config.ticks_gap,
        border_width=config.border_width,
        border_padding=config.border_padding,
        gap=gap,
        origin_x=area_x + frame,
        origin_y=top,
    )
