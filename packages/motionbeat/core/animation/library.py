"""Preset registry and evaluation entry point."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import TypeAdapter, ValidationError

from motionbeat.core.animation import presets
from motionbeat.core.animation.models import AnimationConfig, AnimationState, PresetName
from motionbeat.core.errors import InvalidConfigurationError
from motionbeat.core.timing.models import validate_fps

logger = logging.getLogger(__name__)

PresetFn = Callable[[float, float, Any], AnimationState]

_CONFIG_ADAPTER: TypeAdapter[AnimationConfig] = TypeAdapter(AnimationConfig)


@dataclass(frozen=True)
class PresetSpec:
    """Registry entry for one preset."""

    name: PresetName
    evaluator: PresetFn
    category: str
    description: str


class PresetRegistry:
    """Registry of preset evaluators keyed by name."""

    def __init__(self) -> None:
        self._registry: dict[PresetName, PresetSpec] = {}

    def register(self, spec: PresetSpec) -> None:
        if spec.name in self._registry:
            raise ValueError(f"Preset '{spec.name.value}' already registered")
        self._registry[spec.name] = spec

    def get(self, name: str) -> PresetSpec:
        try:
            return self._registry[PresetName(name)]
        except (KeyError, ValueError):
            raise InvalidConfigurationError(f"Preset '{name}' is not registered") from None

    def names(self) -> list[str]:
        return [name.value for name in self._registry]


def _build_registry() -> PresetRegistry:
    registry = PresetRegistry()
    for spec in (
        PresetSpec(PresetName.FADE_UP_IN, presets.fade_up_in, "entrance", "Fade in rising into place"),
        PresetSpec(PresetName.SLIDE_IN_LEFT, presets.slide_in_left, "entrance", "Slide in from the left"),
        PresetSpec(PresetName.SLIDE_IN_RIGHT, presets.slide_in_right, "entrance", "Slide in from the right"),
        PresetSpec(PresetName.POP_IN_SPRING, presets.pop_in_spring, "entrance", "Spring scale pop"),
        PresetSpec(PresetName.PULSE_EMPHASIS, presets.pulse_emphasis, "emphasis", "Scale pulse and return"),
        PresetSpec(PresetName.BREATHE, presets.breathe, "emphasis", "Looping sine scale"),
        PresetSpec(PresetName.FADE_DOWN_OUT, presets.fade_down_out, "exit", "Fade out sinking away"),
        PresetSpec(PresetName.DRAW_ON_PATH, presets.draw_on_path, "complex", "Stroke-dash path reveal"),
        PresetSpec(PresetName.SHRINK_TO_CORNER, presets.shrink_to_corner, "complex", "Scale and move aside"),
        PresetSpec(PresetName.HIGHLIGHT_SWIPE, presets.highlight_swipe, "complex", "Growing highlight clip"),
    ):
        registry.register(spec)
    return registry


PRESET_REGISTRY = _build_registry()


def parse_preset_config(data: Mapping[str, Any] | AnimationConfig) -> AnimationConfig:
    """Validate an authored preset invocation.

    Raises:
        InvalidConfigurationError: Unknown preset, unknown easing, negative
            duration, non-positive loop or any other invalid field.

    Example:
        >>> parse_preset_config({"preset": "fadeUpIn", "start": 1.0, "dur": 0.5}).dist
        50.0
    """
    if not isinstance(data, Mapping):
        return data
    try:
        return _CONFIG_ADAPTER.validate_python(dict(data))
    except ValidationError as e:
        raise InvalidConfigurationError.from_validation(
            f"Invalid preset config {data.get('preset', '<missing preset>')!r}", e
        ) from e


class AnimationPresetLibrary:
    """Evaluates preset configs at a frame.

    Example:
        >>> config = parse_preset_config({"preset": "fadeUpIn", "start": 1.0, "dur": 0.5})
        >>> AnimationPresetLibrary.evaluate(0, 30, config).opacity
        0.0
    """

    registry = PRESET_REGISTRY

    @classmethod
    def names(cls) -> list[str]:
        return cls.registry.names()

    @classmethod
    def evaluate(cls, frame: float, fps: float, config: AnimationConfig | Mapping[str, Any]) -> AnimationState:
        config = parse_preset_config(config)
        fps = validate_fps(fps)
        return cls.registry.get(config.preset).evaluator(frame, fps, config)


def evaluate_preset(frame: float, fps: float, config: AnimationConfig | Mapping[str, Any]) -> AnimationState:
    """Module-level shortcut for :meth:`AnimationPresetLibrary.evaluate`."""
    return AnimationPresetLibrary.evaluate(frame, fps, config)
