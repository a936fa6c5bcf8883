from bmpr.render.canvas import Canvas
from bmpr.render.color import Color


def fill_rect(canvas: Canvas, x: int, y: int, width: int, height: int, color: Color) -> None:
    """Закрашивает [x, x + width) x [y, y + height)"""
    for y_idx in range(y, y + height):
        for x_idx in range(x, x + width):
            canvas.set_safe(x_idx, y_idx, color)


def rect(canvas: Canvas, x: int, y: int, width: int, height: int, color: Color) -> None:
    """
    Контур прямоугольника. Границы включают строки y и y + height,
    столбцы x и x + width, то есть контур размером (width + 1) x (height + 1).
    """
    for i in range(width + 1):
        canvas.set_safe(x + i, y, color)
        canvas.set_safe(x + i, y + height, color)
    for j in range(height + 1):
        canvas.set_safe(x, y + j, color)
        canvas.set_safe(x + width, y + j, color)
