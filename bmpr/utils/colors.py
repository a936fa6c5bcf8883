import string
from types import MappingProxyType
from bmpr.render.color import Color

# таблица именованных цветов, только для чтения
NAMED_COLORS = MappingProxyType({
    "black": Color(0, 0, 0),
    "white": Color(255, 255, 255),
    "red": Color(255, 0, 0),
    "green": Color(0, 255, 0),
    "blue": Color(0, 0, 255),
    "yellow": Color(255, 255, 0),
    "cyan": Color(0, 255, 255),
    "magenta": Color(255, 0, 255),
    "gray": Color(128, 128, 128),
    "orange": Color(255, 165, 0),
    "purple": Color(128, 0, 128),
})


def named_color(name: str) -> Color:
    """Цвет по имени без учета регистра, KeyError для неизвестного имени"""
    key = name.strip().lower()
    if key not in NAMED_COLORS:
        raise KeyError(f"Unknown color name: {name!r}")
    return NAMED_COLORS[key]


def hex_to_rgb(hex_color: str) -> Color:
    """Преобразует цвет из формата HEX (#RRGGBB или #RGB) в Color."""
    hex_color = hex_color.lstrip('#')
    length = len(hex_color)
    # int(..., 16) сам по себе пропускает знаки и пробелы
    if length not in (3, 6) or not all(c in string.hexdigits for c in hex_color):
        raise ValueError(f"Invalid HEX color format: {hex_color!r}")
    if length == 6:
        r, g, b = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16)
    else:
        # короткая запись: каждая цифра повторяется дважды
        r, g, b = (int(digit * 2, 16) for digit in hex_color)
    return Color(r, g, b)


def parse_color(value: str) -> Color:
    """Цвет из строки конфига: имя из таблицы или HEX"""
    if value.strip().lower() in NAMED_COLORS:
        return named_color(value)
    return hex_to_rgb(value)
