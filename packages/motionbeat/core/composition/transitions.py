"""Transition presentations and overlap-window timing."""

from __future__ import annotations

from functools import lru_cache

from motionbeat.core.composition.models import (
    DEFAULT_TRANSITION_FRAMES,
    Presentation,
    SlideDirection,
    TransitionEasing,
    TransitionSpec,
    TransitionStyle,
    WipeAxis,
)
from motionbeat.core.curves.spring import SpringConfig, measure_spring, spring_progress
from motionbeat.core.utils.math import clamp

DEFAULT_TRANSITION = TransitionSpec()

TRANSITION_SPRINGS: dict[TransitionEasing, SpringConfig] = {
    TransitionEasing.SMOOTH: SpringConfig(damping=16, stiffness=140, mass=1),
    TransitionEasing.SNAPPY: SpringConfig(damping=18, stiffness=240, mass=0.7),
}

_REVERSE = {
    SlideDirection.LEFT: SlideDirection.RIGHT,
    SlideDirection.RIGHT: SlideDirection.LEFT,
    SlideDirection.UP: SlideDirection.DOWN,
    SlideDirection.DOWN: SlideDirection.UP,
}

_EDGE = {
    SlideDirection.LEFT: "from-left",
    SlideDirection.RIGHT: "from-right",
    SlideDirection.UP: "from-top",
    SlideDirection.DOWN: "from-bottom",
}


def presentation_for(spec: TransitionSpec) -> Presentation | None:
    """Renderer-facing effect for ``spec``; None for ``style="none"``."""
    style = spec.style
    if style == TransitionStyle.NONE:
        return None
    if style == TransitionStyle.FADE:
        return Presentation(kind="fade")
    if style == TransitionStyle.SLIDE:
        return Presentation(kind="slide", entry_edge=_EDGE[spec.direction])
    if style == TransitionStyle.SLIDE_REVERSE:
        return Presentation(kind="slide", entry_edge=_EDGE[_REVERSE[spec.direction]])
    if style == TransitionStyle.SLIDE_UP:
        return Presentation(kind="slide", entry_edge="from-top")
    if style == TransitionStyle.SLIDE_DOWN:
        return Presentation(kind="slide", entry_edge="from-bottom")
    if style == TransitionStyle.WIPE:
        return Presentation(kind="wipe", entry_edge="from-left" if spec.axis == WipeAxis.HORIZONTAL else "from-top")
    if style == TransitionStyle.WIPE_REVERSE:
        return Presentation(
            kind="wipe", entry_edge="from-right" if spec.axis == WipeAxis.HORIZONTAL else "from-bottom"
        )
    if style == TransitionStyle.CLOCK:
        return Presentation(kind="clock-wipe")
    return Presentation(kind="iris")


@lru_cache(maxsize=64)
def _natural_frames(easing: TransitionEasing, fps: float) -> int:
    spring = TRANSITION_SPRINGS[easing]
    return max(1, measure_spring(fps, spring.mass, spring.stiffness, spring.damping))


def transition_progress(frame: float, duration: int, easing: TransitionEasing, fps: float) -> float:
    """Progress in [0, 1] at ``frame`` frames into a ``duration``-frame overlap.

    Spring easings are time-stretched so the spring's settle point lands
    on the end of the overlap.
    """
    if duration <= 0 or frame >= duration:
        return 1.0
    if frame <= 0:
        return 0.0
    if easing == TransitionEasing.LINEAR:
        return frame / duration

    spring = TRANSITION_SPRINGS[easing]
    scaled = frame * _natural_frames(easing, fps) / duration
    value = spring_progress(scaled, fps, spring.mass, spring.stiffness, spring.damping)
    return clamp(value, 0.0, 1.0)
