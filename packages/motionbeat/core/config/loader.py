"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
import yaml

from motionbeat.core.config.models import AppConfig
from motionbeat.core.errors import InvalidConfigurationError
from motionbeat.core.scene.models import SceneDescriptor, VideoDescriptor
from motionbeat.core.utils.json import read_json
from motionbeat.core.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("scene.json")
        'json'
        >>> detect_format("scene.yaml")
        'yaml'
        >>> detect_format("scene.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return a raw configuration dictionary.

    Format is auto-detected from the file extension.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the format is not supported or the content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            return read_json(path)
        except ValueError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(content).__name__}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    A missing file yields all defaults.

    Raises:
        InvalidConfigurationError: If the file content is invalid
    """
    if path is None:
        path = AppConfig.default_path()

    if not Path(path).exists():
        logger.debug(f"No app config at {path}, using defaults")
        return AppConfig()

    try:
        return AppConfig.model_validate(load_config(path))
    except ValidationError as e:
        raise InvalidConfigurationError.from_validation(f"Invalid app config {path}", e) from e


def load_scene(path: str | Path) -> SceneDescriptor:
    """Load and validate a scene descriptor file.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidConfigurationError: If the descriptor is invalid

    Example:
        >>> scene = load_scene("intro.yaml")
        >>> scene.beats["start"]
    """
    raw = load_config(path)
    try:
        return SceneDescriptor.model_validate(raw)
    except ValidationError as e:
        raise InvalidConfigurationError.from_validation(f"Invalid scene {path}", e) from e


def load_video(path: str | Path) -> VideoDescriptor:
    """Load and validate a multi-scene video descriptor file."""
    raw = load_config(path)
    try:
        return VideoDescriptor.model_validate(raw)
    except ValidationError as e:
        raise InvalidConfigurationError.from_validation(f"Invalid video {path}", e) from e


def configure_logging_from_config(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
