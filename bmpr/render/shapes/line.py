from collections.abc import Iterator
from bmpr.render.canvas import Canvas
from bmpr.render.color import Color


def bresenham(x1: int, y1: int, x2: int, y2: int) -> Iterator[tuple[int, int]]:
    """
    Точки цифровой прямой от (x1, y1) до (x2, y2) по алгоритму Брезенхэма.
    Начальная и конечная точки всегда входят, вырожденная линия дает одну точку.
    """
    delta_x = abs(x2 - x1)
    delta_y = abs(y2 - y1)
    sign_x = 1 if x1 < x2 else -1
    sign_y = 1 if y1 < y2 else -1

    error = delta_x - delta_y
    x, y = x1, y1

    while True:
        yield x, y
        if x == x2 and y == y2:
            return

        error2 = error * 2
        if error2 > -delta_y:
            error -= delta_y
            x += sign_x
        if error2 < delta_x:
            error += delta_x
            y += sign_y


def line(canvas: Canvas, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
    for x, y in bresenham(x1, y1, x2, y2):
        canvas.set_safe(x, y, color)


def thick_line(canvas: Canvas, x1: int, y1: int, x2: int, y2: int, thickness: int, color: Color) -> None:
    """Линия, где каждая точка - квадрат thickness x thickness с центром на прямой"""
    if thickness < 1:
        thickness = 1
    offset = thickness // 2

    for x, y in bresenham(x1, y1, x2, y2):
        for i in range(thickness):
            for j in range(thickness):
                canvas.set_safe(x - offset + i, y - offset + j, color)
