# тут модели для конфига в YAML

from pydantic import BaseModel, Field, field_validator
from bmpr.render.color import Color
from bmpr.utils.colors import parse_color


class CanvasConfig(BaseModel):
    width: int = Field(default=64, ge=1)
    height: int = Field(default=32, ge=1)
    background: str = "black"  # имя цвета или HEX

    @field_validator("background")
    @classmethod
    def _check_background(cls, value: str) -> str:
        parse_color(value)
        return value

    @property
    def background_color(self) -> Color:
        return parse_color(self.background)
