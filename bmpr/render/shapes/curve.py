from bmpr.render.canvas import Canvas
from bmpr.render.color import Color, Vector2


def bezier_point(start: Vector2, control: Vector2, end: Vector2, t: float) -> tuple[int, int]:
    """Точка квадратичной кривой Безье при параметре t, координаты отбрасывают дробную часть"""
    u = 1 - t
    x = u * u * start.x + 2 * t * u * control.x + t * t * end.x
    y = u * u * start.y + 2 * t * u * control.y + t * t * end.y
    return int(x), int(y)


def quadratic_bezier(canvas: Canvas, start: Vector2, control: Vector2, end: Vector2,
                     points: int, color: Color) -> None:
    """Рисует points + 1 точек кривой при t = i / points, включая оба конца"""
    if points < 1:
        canvas.set_safe(*bezier_point(start, control, end, 0.0), color)
        return

    for i in range(points + 1):
        canvas.set_safe(*bezier_point(start, control, end, i / points), color)


def quadratic_bezier_step(canvas: Canvas, start: Vector2, control: Vector2, end: Vector2,
                          step: float, color: Color) -> None:
    """
    Рисует точки кривой при t = 0, step, 2 * step, ... пока t <= 1.
    Конечная точка попадает, только если 1 кратно step.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    i = 0
    t = 0.0
    while t <= 1:
        canvas.set_safe(*bezier_point(start, control, end, t), color)
        i += 1
        t = i * step
