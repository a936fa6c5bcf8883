from dataclasses import dataclass
from numbers import Integral


@dataclass(frozen=True)
class Color:
    """Цвет RGB888 - три канала по 8 бит, сравнивается покомпонентно"""
    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self):
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise TypeError(f"Channel {name} must be an integer, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} out of range 0..255: {value}")
            # numpy целые приводятся к int, чтобы равенство и hash не зависели от типа
            object.__setattr__(self, name, int(value))

    @classmethod
    def gray(cls, value: int) -> "Color":
        """Оттенок серого - одно значение во всех трех каналах"""
        return cls(value, value, value)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class Vector2:
    # только хранение, используется для контрольных точек кривых
    x: int = 0
    y: int = 0
