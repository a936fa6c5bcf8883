import logging
from pydantic import BaseModel, Field
import yaml
from bmpr.models.config import CanvasConfig

logger = logging.getLogger(__name__)


class GlobalConfig(BaseModel):
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)


class Config:
    def __init__(self, path: str = "bmpr.yaml"):
        self.path = path
        self.model = None

    def load(self) -> GlobalConfig:
        with open(self.path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        self.model = GlobalConfig(**data)
        logger.debug(f"Config loaded from {self.path}")
        return self.model

    def get(self) -> GlobalConfig:
        if self.model is None:
            return self.load()
        return self.model
