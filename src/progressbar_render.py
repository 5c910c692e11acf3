# progressbar_render.py
from collections import namedtuple

Rect = namedtuple("Rect", ["x", "y", "width", "height"])

# Draw commands handed to a draw context, in painting order.
FillRect = namedtuple("FillRect", ["rect", "color"])
StrokeRect = namedtuple("StrokeRect", ["rect", "line_width", "color"])
# `axis` is (x0, y0, x1, y1), the line along which the stops are spread.
GradientRect = namedtuple("GradientRect", ["rect", "axis", "stops"])


def gradient_stops(bar):
    """Color stops of a bar's fill as (offset, color) pairs."""
    stops = [(0.0, bar.fg)]
    if bar.fg_center is not None:
        stops.append((0.5, bar.fg_center))
    stops.append((1.0, bar.fg_end if bar.fg_end is not None else bar.fg))
    return stops


def _positive(rect):
    return rect.width > 0 and rect.height > 0


def _fg_fill(rect, bar, axis):
    if not bar.has_gradient:
        return FillRect(rect, bar.fg)
    return GradientRect(rect, axis, gradient_stops(bar))


def _border_commands(bar, layout, x, y):
    if layout.border_width <= 0:
        return []
    width, height = layout.bar_size()
    box = Rect(x - layout.frame, y - layout.frame,
               width + 2 * layout.frame, height + 2 * layout.frame)
    if not _positive(box):
        return []
    commands = []
    if layout.border_padding > 0:
        commands.append(FillRect(box, bar.bg))
    commands.append(StrokeRect(box, layout.border_width, bar.border_color))
    return commands


def _segments(bar, layout, x, y, progress):
    """
    Splits the fill area into the segment at the start of the axis
    (bottom or left) and the remainder. Without reverse the start segment
    holds the foreground fill; with reverse the roles and the gradient
    direction are swapped.
    """
    length, thickness = layout.length, layout.thickness
    if bar.reverse:
        progress = length - progress

    if layout.vertical:
        if bar.reverse:
            axis = (x, y, x, y + length)
        else:
            axis = (x, y + length, x, y)
        start = Rect(x, y + length - progress, thickness, progress)
        rest = Rect(x, y, thickness, length - progress)
    else:
        if bar.reverse:
            axis = (x + length, y, x, y)
        else:
            axis = (x, y, x + length, y)
        start = Rect(x, y, progress, thickness)
        rest = Rect(x + progress, y, length - progress, thickness)

    commands = []
    if _positive(start):
        if bar.reverse:
            commands.append(FillRect(start, bar.fg_off))
        else:
            commands.append(_fg_fill(start, bar, axis))
    if _positive(rest):
        if bar.reverse:
            commands.append(_fg_fill(rest, bar, axis))
        else:
            commands.append(FillRect(rest, bar.fg_off))
    return commands


def _tick_gap_commands(bar, layout, x, y):
    commands = []
    for offset in layout.tick_gap_offsets():
        if layout.vertical:
            rect = Rect(x, y + offset, layout.thickness, layout.ticks_gap)
        else:
            rect = Rect(x + offset, y, layout.ticks_gap, layout.thickness)
        if _positive(rect):
            commands.append(FillRect(rect, bar.bg))
    return commands


def render_bar(bar, layout, index):
    """Draw commands for the bar at position `index`."""
    x, y = layout.bar_origin(index)
    progress = layout.progress_length(bar.fraction)

    commands = _border_commands(bar, layout, x, y)
    commands += _segments(bar, layout, x, y, progress)
    # gaps go last so they show through the fill
    commands += _tick_gap_commands(bar, layout, x, y)
    return commands


def render_bars(bars, layout):
    """Draw commands for all bars, in the order they are given."""
    commands = []
    if layout is None:
        return commands
    for index, bar in enumerate(bars):
        commands.extend(render_bar(bar, layout, index))
    return commands
