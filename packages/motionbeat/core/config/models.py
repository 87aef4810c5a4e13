"""Configuration models for motionbeat."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from motionbeat.core.composition.models import CompositionConfig
from motionbeat.core.layout.models import LayoutConfig


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file; stderr when unset")


class AppConfig(BaseModel):
    """Application-level configuration (shared by every scene and video)."""

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    fps: float = Field(default=30.0, gt=0.0, allow_inf_nan=False)
    canvas: tuple[float, float] = (1920.0, 1080.0)
    layout: LayoutConfig = LayoutConfig()
    composition: CompositionConfig = CompositionConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("motionbeat.yaml")
