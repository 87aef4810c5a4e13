"""Easing curves, interpolation and springs."""

from motionbeat.core.curves.easing import (
    EASING_CURVES,
    CubicBezier,
    EasingFn,
    EasingLibrary,
    EasingName,
    ease,
    get_easing,
    is_easing,
    list_easings,
)
from motionbeat.core.curves.interpolate import Extrapolation, interpolate
from motionbeat.core.curves.models import CurvePoint
from motionbeat.core.curves.sampling import sample_easing, sample_uniform_grid, trace_easing
from motionbeat.core.curves.spring import (
    DEFAULT_SETTLE_THRESHOLD,
    SpringConfig,
    measure_spring,
    spring_progress,
    spring_value,
)

__all__ = [
    "DEFAULT_SETTLE_THRESHOLD",
    "EASING_CURVES",
    "CubicBezier",
    "CurvePoint",
    "EasingFn",
    "EasingLibrary",
    "EasingName",
    "Extrapolation",
    "SpringConfig",
    "ease",
    "get_easing",
    "interpolate",
    "is_easing",
    "list_easings",
    "measure_spring",
    "sample_easing",
    "sample_uniform_grid",
    "spring_progress",
    "spring_value",
    "trace_easing",
]
