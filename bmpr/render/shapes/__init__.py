from bmpr.render.shapes.line import bresenham, line, thick_line
from bmpr.render.shapes.circle import circle, fill_circle, fill_inverted_circle
from bmpr.render.shapes.rect import rect, fill_rect
from bmpr.render.shapes.curve import bezier_point, quadratic_bezier, quadratic_bezier_step

__all__ = [
    "bresenham", "line", "thick_line",
    "circle", "fill_circle", "fill_inverted_circle",
    "rect", "fill_rect",
    "bezier_point", "quadratic_bezier", "quadratic_bezier_step",
]
