# draw_context.py
import cairo
from progressbar_render import FillRect, StrokeRect, GradientRect


class CairoDrawContext:
    """
    Executes progress bar draw commands on a Cairo context.
    """
    def __init__(self, ctx):
        self.ctx = ctx

    def draw(self, command):
        if isinstance(command, GradientRect):
            self.fill_gradient(command.rect, command.axis, command.stops)
        elif isinstance(command, StrokeRect):
            self.stroke_rectangle(command.rect, command.line_width, command.color)
        elif isinstance(command, FillRect):
            self.fill_rectangle(command.rect, command.color)
        else:
            print(f"[Warning] Unknown draw command: {command!r}")

    def fill_rectangle(self, rect, color):
        ctx = self.ctx
        ctx.set_source_rgba(color.red, color.green, color.blue, color.alpha)
        ctx.rectangle(rect.x, rect.y, rect.width, rect.height)
        ctx.fill()

    def stroke_rectangle(self, rect, line_width, color):
        ctx = self.ctx
        ctx.set_source_rgba(color.red, color.green, color.blue, color.alpha)
        ctx.set_line_width(line_width)
        # inset by half the line so the stroke stays inside the box
        ctx.rectangle(rect.x + line_width / 2.0, rect.y + line_width / 2.0,
                      rect.width - line_width, rect.height - line_width)
        ctx.stroke()

    def fill_gradient(self, rect, axis, stops):
        ctx = self.ctx
        pat = cairo.LinearGradient(*axis)
        for offset, color in stops:
            pat.add_color_stop_rgba(offset, color.red, color.green, color.blue, color.alpha)
        ctx.set_source(pat)
        ctx.rectangle(rect.x, rect.y, rect.width, rect.height)
        ctx.fill()
