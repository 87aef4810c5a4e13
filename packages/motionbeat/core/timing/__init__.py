"""Beat scheduling and frame conversion."""

from motionbeat.core.timing.beats import (
    STANDARD_BEAT_ORDER,
    BeatScheduler,
    ms_to_frames,
    resolve_standard_beats,
    to_frames,
)
from motionbeat.core.timing.models import BeatRef, BeatRefKind, BeatValue, ResolvedBeats, validate_fps

__all__ = [
    "STANDARD_BEAT_ORDER",
    "BeatRef",
    "BeatRefKind",
    "BeatScheduler",
    "BeatValue",
    "ResolvedBeats",
    "ms_to_frames",
    "resolve_standard_beats",
    "to_frames",
    "validate_fps",
]
