"""Stitching independently timed scenes into one timeline."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from motionbeat.core.composition.models import (
    ActiveScene,
    SceneTiming,
    ScheduledScene,
    TransitionPhase,
    TransitionRole,
    TransitionStyle,
)
from motionbeat.core.composition.transitions import presentation_for, transition_progress
from motionbeat.core.errors import InvalidConfigurationError
from motionbeat.core.timing.beats import to_frames
from motionbeat.core.timing.models import validate_fps

logger = logging.getLogger(__name__)


class ComposedTimeline(BaseModel):
    """Scenes laid out on one global frame axis."""

    model_config = ConfigDict(frozen=True)

    fps: float
    total_duration: int
    tail_padding: int = 0
    scenes: tuple[ScheduledScene, ...]

    @property
    def offsets(self) -> list[int]:
        return [scene.offset for scene in self.scenes]

    def active_at(self, frame: int) -> list[ActiveScene]:
        return active_at(self, frame)


def _coerce(scene: SceneTiming | Mapping[str, Any], index: int) -> SceneTiming:
    if isinstance(scene, SceneTiming):
        return scene
    try:
        return SceneTiming.model_validate(dict(scene))
    except ValidationError as e:
        raise InvalidConfigurationError.from_validation(f"Invalid timing for scene {index}", e) from e


class SceneComposer:
    """Lays scenes end to end, overlapping each pair by its transition.

    ``offset(i) = sum(durations[:i]) - sum(overlaps[:i])`` and the total is
    the sum of durations minus all but the last overlap, plus tail padding.

    Example:
        >>> timeline = SceneComposer().compose([
        ...     {"duration": 450, "transition_overlap": 30},
        ...     {"duration": 600, "transition_overlap": 40},
        ...     {"duration": 500},
        ... ])
        >>> timeline.total_duration, timeline.offsets
        (1480, [0, 420, 980])
    """

    def __init__(self, tail_padding: int = 0, fps: float = 30) -> None:
        if tail_padding < 0:
            raise InvalidConfigurationError(f"tail_padding must be >= 0, got {tail_padding}")
        self.tail_padding = tail_padding
        self.fps = validate_fps(fps)

    def compose(self, scenes: Sequence[SceneTiming | Mapping[str, Any]]) -> ComposedTimeline:
        """Compute offsets and total duration.

        Raises:
            InvalidConfigurationError: If an overlap exceeds either adjacent
                scene, or a scene's incoming and outgoing overlaps together
                exceed its duration.
        """
        timings = [_coerce(scene, i) for i, scene in enumerate(scenes)]
        last = len(timings) - 1

        scheduled: list[ScheduledScene] = []
        offset = 0
        for i, timing in enumerate(timings):
            overlap = timing.transition_overlap if i < last else 0
            if i < last:
                following = timings[i + 1].duration
                if overlap > timing.duration or overlap > following:
                    raise InvalidConfigurationError(
                        f"Scene {i}: overlap {overlap} exceeds an adjacent duration "
                        f"({timing.duration}, {following})"
                    )
            incoming = timings[i - 1].transition_overlap if i > 0 else 0
            if incoming + overlap > timing.duration:
                raise InvalidConfigurationError(
                    f"Scene {i}: incoming ({incoming}) and outgoing ({overlap}) transitions "
                    f"exceed its duration {timing.duration}"
                )

            scheduled.append(
                ScheduledScene(
                    index=i,
                    id=timing.id or f"scene-{i}",
                    offset=offset,
                    duration=timing.duration,
                    overlap_out=overlap,
                    transition=timing.transition,
                )
            )
            offset += timing.duration - overlap

        total = offset + self.tail_padding if timings else 0
        logger.debug(f"Composed {len(timings)} scenes into {total} frames")
        return ComposedTimeline(
            fps=self.fps,
            total_duration=total,
            tail_padding=self.tail_padding if timings else 0,
            scenes=tuple(scheduled),
        )

    def compose_seconds(self, scenes: Sequence[Mapping[str, float]]) -> ComposedTimeline:
        """Compose scenes timed in seconds (``duration``, ``transition_overlap``)."""
        return compose_seconds(scenes, self.fps, self.tail_padding)


def compose_seconds(
    scenes: Sequence[Mapping[str, Any]],
    fps: float,
    tail_padding: int = 0,
) -> ComposedTimeline:
    """Convert second-based scene timings to frames and compose them."""
    fps = validate_fps(fps)
    frame_timings = []
    for i, scene in enumerate(scenes):
        data = dict(scene)
        try:
            data["duration"] = to_frames(float(data["duration"]), fps)
            data["transition_overlap"] = to_frames(float(data.get("transition_overlap", 0.0)), fps)
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidConfigurationError(f"Invalid timing for scene {i}: {e}") from e
        frame_timings.append(data)
    return SceneComposer(tail_padding=tail_padding, fps=fps).compose(frame_timings)


def active_at(timeline: ComposedTimeline, frame: int) -> list[ActiveScene]:
    """Scenes visible at global ``frame``, in scene order.

    During an overlap both neighbours are returned, the earlier one as
    ``outgoing`` and the later one as ``incoming``, sharing one progress
    value. Frames in the tail padding keep the last scene active.
    """
    if frame < 0 or frame >= timeline.total_duration or not timeline.scenes:
        return []

    scenes = timeline.scenes
    last = scenes[-1]
    active: list[ActiveScene] = []

    for i, scene in enumerate(scenes):
        in_body = scene.offset <= frame < scene.end
        in_tail = scene is last and frame >= scene.end
        if not (in_body or in_tail):
            continue

        phase = None
        if i < len(scenes) - 1 and scene.overlap_out > 0 and frame >= scenes[i + 1].offset:
            phase = _phase(timeline, scene, frame - scenes[i + 1].offset, TransitionRole.OUTGOING)
        elif i > 0 and scenes[i - 1].overlap_out > 0 and frame < scene.offset + scenes[i - 1].overlap_out:
            phase = _phase(timeline, scenes[i - 1], frame - scene.offset, TransitionRole.INCOMING)

        active.append(ActiveScene(index=scene.index, id=scene.id, local_frame=frame - scene.offset, transition=phase))
    return active


def _phase(timeline: ComposedTimeline, outgoing: ScheduledScene, k: int, role: TransitionRole) -> TransitionPhase:
    spec = outgoing.transition
    duration = outgoing.overlap_out
    if spec.style == TransitionStyle.NONE:
        progress = 1.0 if role == TransitionRole.INCOMING else 0.0
    else:
        progress = transition_progress(k, duration, spec.easing, timeline.fps)
    return TransitionPhase(
        role=role,
        progress=progress,
        frame=k,
        duration=duration,
        style=spec.style,
        presentation=presentation_for(spec),
    )
