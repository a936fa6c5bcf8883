import numpy as np
from bmpr.errors import InvalidDimensionError
from bmpr.render.color import Color

# холст RGB888 - numpy массив пикселей формы (height, width, 3), порядок каналов R, G, B


class Canvas:

    def __init__(self, width: int, height: int):
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
                raise InvalidDimensionError(f"{name} must be a positive integer, got {value!r}")
        self._width = int(width)
        self._height = int(height)
        # все пиксели изначально черные
        self._pixels = np.zeros((self._height, self._width, 3), dtype=np.uint8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> np.ndarray:
        """Копия пикселей только для чтения, память с холстом не делит"""
        snapshot = self._pixels.copy()
        snapshot.flags.writeable = False
        return snapshot

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _check_bounds(self, x: int, y: int) -> None:
        # отрицательный индекс в numpy тихо берет пиксель с другого края
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside canvas {self._width}x{self._height}")

    def get(self, x: int, y: int) -> Color:
        """Возвращает цвет пикселя, IndexError за пределами холста"""
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return Color(int(r), int(g), int(b))

    def set(self, x: int, y: int, color: Color) -> None:
        """Прямая запись пикселя, IndexError за пределами холста"""
        self._check_bounds(x, y)
        self._pixels[y, x] = color.rgb

    def set_safe(self, x: int, y: int, color: Color) -> None:
        """Записывает пиксель только если он внутри холста, иначе ничего не делает"""
        if 0 <= x < self._width and 0 <= y < self._height:
            self._pixels[y, x] = color.rgb

    def clear(self, color: Color) -> None:
        self._pixels[:, :] = color.rgb

    def invert(self) -> None:
        # для uint8 побитовое НЕ равно 255 - канал
        np.bitwise_not(self._pixels, out=self._pixels)

    def rotate180(self) -> None:
        # разворот построчной последовательности пикселей
        self._pixels[:] = self._pixels[::-1, ::-1]

    def flip_horizontal(self) -> None:
        self._pixels[:] = np.fliplr(self._pixels)

    def flip_vertical(self) -> None:
        self._pixels[:] = np.flipud(self._pixels)

    def to_bytes(self) -> bytes:
        """Возвращает байтовое представление холста (RGB, строки сверху вниз)"""
        return self._pixels.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return (self._width, self._height) == (other._width, other._height) and \
            np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
