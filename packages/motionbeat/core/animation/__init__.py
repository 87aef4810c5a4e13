"""Animation presets, continuous life and style bundles."""

from motionbeat.core.animation.continuous import (
    ContinuousLifeConfig,
    WaveConfig,
    continuous_breathing,
    continuous_floating,
    continuous_life,
    continuous_rotation,
    evaluate_life,
)
from motionbeat.core.animation.library import (
    PRESET_REGISTRY,
    AnimationPresetLibrary,
    PresetRegistry,
    PresetSpec,
    evaluate_preset,
    parse_preset_config,
)
from motionbeat.core.animation.models import (
    AnimationConfig,
    AnimationState,
    BreatheConfig,
    DrawOnPathConfig,
    FadeDownOutConfig,
    FadeUpInConfig,
    HighlightSwipeConfig,
    PopInSpringConfig,
    PresetName,
    PulseEmphasisConfig,
    ShrinkToCornerConfig,
    SlideInLeftConfig,
    SlideInRightConfig,
)
from motionbeat.core.animation.styles import (
    SPRING_CONFIGS,
    STYLE_BUNDLES,
    SpringName,
    StaggerDirection,
    StyleBundle,
    entrance_config,
    exit_config,
    resolve_style,
    stagger_delay,
)

__all__ = [
    "PRESET_REGISTRY",
    "SPRING_CONFIGS",
    "STYLE_BUNDLES",
    "AnimationConfig",
    "AnimationPresetLibrary",
    "AnimationState",
    "BreatheConfig",
    "ContinuousLifeConfig",
    "DrawOnPathConfig",
    "FadeDownOutConfig",
    "FadeUpInConfig",
    "HighlightSwipeConfig",
    "PopInSpringConfig",
    "PresetName",
    "PresetRegistry",
    "PresetSpec",
    "PulseEmphasisConfig",
    "ShrinkToCornerConfig",
    "SlideInLeftConfig",
    "SlideInRightConfig",
    "SpringName",
    "StaggerDirection",
    "StyleBundle",
    "WaveConfig",
    "continuous_breathing",
    "continuous_floating",
    "continuous_life",
    "continuous_rotation",
    "entrance_config",
    "evaluate_life",
    "evaluate_preset",
    "exit_config",
    "parse_preset_config",
    "resolve_style",
    "stagger_delay",
]
