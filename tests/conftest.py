import numpy as np
import pytest
from bmpr import Canvas, Color


@pytest.fixture
def painted():
    """Возвращает функцию: множество (x, y) пикселей заданного цвета"""
    def _painted(canvas: Canvas, color: Color) -> set[tuple[int, int]]:
        mask = np.all(canvas.pixels == color.rgb, axis=-1)
        return {(int(x), int(y)) for y, x in np.argwhere(mask)}
    return _painted


@pytest.fixture
def gradient():
    """Холст, где у каждого пикселя свой цвет"""
    def _gradient(width: int, height: int) -> Canvas:
        canvas = Canvas(width, height)
        for y in range(height):
            for x in range(width):
                canvas.set(x, y, Color(x * 10, y * 10, 7))
        return canvas
    return _gradient
