"""Multi-scene timeline composition and transitions."""

from motionbeat.core.composition.composer import ComposedTimeline, SceneComposer, active_at, compose_seconds
from motionbeat.core.composition.models import (
    ActiveScene,
    CompositionConfig,
    Presentation,
    SceneTiming,
    ScheduledScene,
    SlideDirection,
    TransitionEasing,
    TransitionPhase,
    TransitionRole,
    TransitionSpec,
    TransitionStyle,
    WipeAxis,
)
from motionbeat.core.composition.transitions import (
    DEFAULT_TRANSITION,
    DEFAULT_TRANSITION_FRAMES,
    TRANSITION_SPRINGS,
    presentation_for,
    transition_progress,
)

__all__ = [
    "DEFAULT_TRANSITION",
    "DEFAULT_TRANSITION_FRAMES",
    "TRANSITION_SPRINGS",
    "ActiveScene",
    "ComposedTimeline",
    "CompositionConfig",
    "Presentation",
    "SceneComposer",
    "SceneTiming",
    "ScheduledScene",
    "SlideDirection",
    "TransitionEasing",
    "TransitionPhase",
    "TransitionRole",
    "TransitionSpec",
    "TransitionStyle",
    "WipeAxis",
    "active_at",
    "compose_seconds",
    "presentation_for",
    "transition_progress",
]
