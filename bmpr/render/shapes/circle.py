from bmpr.render.canvas import Canvas
from bmpr.render.color import Color


def _in_disc(dx: int, dy: int, radius: int) -> bool:
    # r*r + r вместо r*r - круг получается визуально полнее
    return dx * dx + dy * dy < radius * radius + radius


def fill_circle(canvas: Canvas, cx: int, cy: int, radius: int, color: Color) -> None:
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            if _in_disc(dx, dy, radius):
                canvas.set_safe(cx + dx, cy + dy, color)


def fill_inverted_circle(canvas: Canvas, cx: int, cy: int, radius: int, color: Color) -> None:
    """Закрашивает ограничивающий квадрат круга, кроме самого круга"""
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            if not _in_disc(dx, dy, radius):
                canvas.set_safe(cx + dx, cy + dy, color)


def circle(canvas: Canvas, cx: int, cy: int, radius: int, color: Color) -> None:
    """
    Контур круга по алгоритму средней точки.
    Считается один октант, остальные семь получаются симметрией.
    """
    x = 0
    y = radius
    decision = 3 - 2 * radius

    while x <= y:
        for px, py in ((x, y), (y, x)):
            canvas.set_safe(cx + px, cy + py, color)
            canvas.set_safe(cx - px, cy + py, color)
            canvas.set_safe(cx + px, cy - py, color)
            canvas.set_safe(cx - px, cy - py, color)

        if decision < 0:
            decision += 4 * x + 6
        else:
            decision += 4 * (x - y) + 10
            y -= 1
        x += 1
