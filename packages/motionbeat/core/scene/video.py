"""Multi-scene videos: composition plus per-scene evaluation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from motionbeat.core.composition.composer import ComposedTimeline, SceneComposer
from motionbeat.core.composition.models import CompositionConfig, SceneTiming, TransitionSpec, TransitionStyle
from motionbeat.core.errors import Diagnostic, InvalidConfigurationError
from motionbeat.core.layout.models import LayoutConfig
from motionbeat.core.scene.evaluator import PreparedScene, SceneEvaluator
from motionbeat.core.scene.models import SceneFrame, VideoDescriptor, VideoFrame
from motionbeat.core.timing.models import validate_fps

logger = logging.getLogger(__name__)


@dataclass
class PreparedVideo:
    video: VideoDescriptor
    timeline: ComposedTimeline
    scenes: tuple[PreparedScene, ...]

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(d for scene in self.scenes for d in scene.diagnostics)

    def evaluate(self, frame: int) -> VideoFrame:
        """Every scene visible at global ``frame``, each at its local frame."""
        return VideoFrame(
            frame=frame,
            scenes=tuple(
                SceneFrame(active=active, state=self.scenes[active.index].evaluate(active.local_frame))
                for active in self.timeline.active_at(frame)
            ),
        )


class VideoEvaluator:
    """Prepares every scene of a video and composes their timeline.

    The transition out of each scene is the entry's own, else the video
    default. Its overlap is ``transition_frames`` when given, otherwise the
    default frame count, or 0 for ``style="none"``. Video-level defaults the
    descriptor leaves unset come from ``composition``.
    """

    def __init__(
        self,
        video: VideoDescriptor | dict[str, Any],
        fps: float,
        canvas: tuple[float, float] = (1920.0, 1080.0),
        layout_config: LayoutConfig | None = None,
        composition: CompositionConfig | None = None,
    ) -> None:
        if isinstance(video, VideoDescriptor):
            self.video = video
        else:
            try:
                self.video = VideoDescriptor.model_validate(video)
            except ValidationError as e:
                raise InvalidConfigurationError.from_validation("Invalid video", e) from e
        self.fps = fps
        self.canvas = canvas
        self.layout_config = layout_config
        self.composition = composition or CompositionConfig()

    @property
    def default_transition(self) -> TransitionSpec:
        return self.video.default_transition or self.composition.default_transition

    @property
    def default_transition_frames(self) -> int:
        if self.video.default_transition_frames is not None:
            return self.video.default_transition_frames
        return self.composition.default_transition_frames

    @property
    def tail_padding(self) -> int:
        if self.video.tail_padding is not None:
            return self.video.tail_padding
        return self.composition.tail_padding

    def timings(self) -> list[SceneTiming]:
        fps = validate_fps(self.fps)
        video = self.video
        timings = []
        for entry in video.scenes:
            transition = entry.transition or self.default_transition
            if entry.transition_frames is not None:
                overlap = entry.transition_frames
            elif transition.style == TransitionStyle.NONE:
                overlap = 0
            else:
                overlap = self.default_transition_frames
            timings.append(
                SceneTiming(
                    id=entry.scene.id,
                    duration=SceneEvaluator.duration_frames(entry.scene, fps),
                    transition_overlap=overlap,
                    transition=transition,
                )
            )
        return timings

    def prepare(self) -> PreparedVideo:
        """Validate and prepare every scene, then compose.

        Raises:
            InvalidConfigurationError: If any scene or the composition is
                invalid.
        """
        fps = validate_fps(self.fps)
        scenes = tuple(
            SceneEvaluator(entry.scene, fps, self.canvas, self.layout_config).prepare()
            for entry in self.video.scenes
        )
        timeline = SceneComposer(tail_padding=self.tail_padding, fps=fps).compose(self.timings())
        logger.info(
            f"Prepared video {self.video.id!r}: {len(scenes)} scenes, {timeline.total_duration} frames"
        )
        return PreparedVideo(video=self.video, timeline=timeline, scenes=scenes)
