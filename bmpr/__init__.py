"""Минимальная библиотека растровых изображений: холст RGB888, примитивы рисования и запись в BMP"""

from bmpr.errors import BmprError, InvalidDimensionError
from bmpr.render.color import Color, Vector2
from bmpr.render.canvas import Canvas
from bmpr.render import shapes
from bmpr.render.renderer import Renderer
from bmpr.encoding.bmp import BitmapHeader, encode, save
from bmpr.config import Config, GlobalConfig
from bmpr.utils.colors import NAMED_COLORS, named_color, hex_to_rgb

__version__ = "0.1.0"

__all__ = [
    "BmprError", "InvalidDimensionError",
    "Color", "Vector2", "Canvas", "shapes", "Renderer",
    "BitmapHeader", "encode", "save",
    "Config", "GlobalConfig",
    "NAMED_COLORS", "named_color", "hex_to_rgb",
]
