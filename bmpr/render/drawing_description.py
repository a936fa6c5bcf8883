from dataclasses import dataclass, field
from enum import Enum
from bmpr.render.color import Color, Vector2

# ------ базовые классы для фигур и эффектов ------
@dataclass
class Shape:
    pass # базовый класс для фигур

@dataclass
class Effect:
    pass # базовый класс для преобразований всего холста

# ------ типы фигур ------
@dataclass
class LineShape(Shape):
    start: Vector2
    end: Vector2
    color: Color

@dataclass
class ThickLineShape(Shape):
    start: Vector2
    end: Vector2
    thickness: int
    color: Color

@dataclass
class CircleShape(Shape):
    center: Vector2
    radius: int
    color: Color
    filled: bool = False  # False - только контур

@dataclass
class InvertedCircleShape(Shape):
    center: Vector2
    radius: int
    color: Color

@dataclass
class RectShape(Shape):
    x: int
    y: int
    width: int
    height: int
    color: Color
    filled: bool = False

@dataclass
class BezierShape(Shape):
    start: Vector2
    control: Vector2
    end: Vector2
    color: Color
    points: int = 32  # число отрезков разбиения по t
    step: float | None = None  # если задан, используется вместо points

# ------ типы эффектов ------
class FlipDirection(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

@dataclass
class InvertEffect(Effect):
    pass

@dataclass
class Rotate180Effect(Effect):
    pass

@dataclass
class FlipEffect(Effect):
    direction: FlipDirection = FlipDirection.HORIZONTAL

    def __post_init__(self):
        # строка "horizontal" / "vertical" приводится к FlipDirection, иначе ValueError
        self.direction = FlipDirection(self.direction)

# ------ описание рисунка ------
@dataclass
class DrawingDescription:
    width: int | None = None  # None - размер из конфига
    height: int | None = None
    background: Color | None = None  # None - фон из конфига
    shapes: list[Shape] = field(default_factory=list)
    effects: list[Effect] = field(default_factory=list)
