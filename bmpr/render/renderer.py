import logging
from bmpr.config import GlobalConfig
from bmpr.render.canvas import Canvas
from bmpr.render.drawing_description import (
    DrawingDescription, Shape, Effect,
    LineShape, ThickLineShape, CircleShape, InvertedCircleShape, RectShape, BezierShape,
    InvertEffect, Rotate180Effect, FlipEffect, FlipDirection,
)
from bmpr.render.shapes import (
    line, thick_line, circle, fill_circle, fill_inverted_circle,
    rect, fill_rect, quadratic_bezier, quadratic_bezier_step,
)

logger = logging.getLogger(__name__)


class Renderer:

    def __init__(self, config: GlobalConfig | None = None):
        self.config = config or GlobalConfig()

    def render(self, description: DrawingDescription) -> Canvas:
        """Создает холст, рисует фигуры по порядку, затем применяет эффекты"""
        canvas_cfg = self.config.canvas
        width = description.width if description.width is not None else canvas_cfg.width
        height = description.height if description.height is not None else canvas_cfg.height
        canvas = Canvas(width, height)

        background = description.background
        if background is None:
            background = canvas_cfg.background_color
        canvas.clear(background)

        for shape in description.shapes:
            self._draw_shape(canvas, shape)

        # эффекты применяются к готовому рисунку
        for effect in description.effects:
            self._apply_effect(canvas, effect)

        logger.debug(f"Rendered {width}x{height}: {len(description.shapes)} shapes, "
                     f"{len(description.effects)} effects")
        return canvas

    def _draw_shape(self, canvas: Canvas, shape: Shape) -> None:
        if isinstance(shape, LineShape):
            line(canvas, shape.start.x, shape.start.y, shape.end.x, shape.end.y, shape.color)
        elif isinstance(shape, ThickLineShape):
            thick_line(canvas, shape.start.x, shape.start.y, shape.end.x, shape.end.y,
                       shape.thickness, shape.color)
        elif isinstance(shape, CircleShape):
            draw = fill_circle if shape.filled else circle
            draw(canvas, shape.center.x, shape.center.y, shape.radius, shape.color)
        elif isinstance(shape, InvertedCircleShape):
            fill_inverted_circle(canvas, shape.center.x, shape.center.y, shape.radius, shape.color)
        elif isinstance(shape, RectShape):
            draw = fill_rect if shape.filled else rect
            draw(canvas, shape.x, shape.y, shape.width, shape.height, shape.color)
        elif isinstance(shape, BezierShape):
            if shape.step is not None:
                quadratic_bezier_step(canvas, shape.start, shape.control, shape.end, shape.step, shape.color)
            else:
                quadratic_bezier(canvas, shape.start, shape.control, shape.end, shape.points, shape.color)
        else:
            raise TypeError(f"Unsupported shape: {type(shape).__name__}")

    def _apply_effect(self, canvas: Canvas, effect: Effect) -> None:
        if isinstance(effect, InvertEffect):
            canvas.invert()
        elif isinstance(effect, Rotate180Effect):
            canvas.rotate180()
        elif isinstance(effect, FlipEffect):
            if effect.direction == FlipDirection.HORIZONTAL:
                canvas.flip_horizontal()
            elif effect.direction == FlipDirection.VERTICAL:
                canvas.flip_vertical()
            else:
                raise ValueError(f"Unsupported flip direction: {effect.direction!r}")
        else:
            raise TypeError(f"Unsupported effect: {type(effect).__name__}")
