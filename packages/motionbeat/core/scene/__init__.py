"""Scene descriptors and frame evaluation."""

from motionbeat.core.scene.evaluator import PreparedScene, SceneEvaluator
from motionbeat.core.scene.models import (
    ElementSpec,
    ElementState,
    ElementStyle,
    EmitterSpec,
    EmitterState,
    FrameState,
    LayoutSpec,
    LifeSpec,
    SceneDescriptor,
    SceneFrame,
    TimeRef,
    VideoDescriptor,
    VideoFrame,
    VideoSceneEntry,
    parse_time_ref,
)
from motionbeat.core.scene.video import PreparedVideo, VideoEvaluator

__all__ = [
    "ElementSpec",
    "ElementState",
    "ElementStyle",
    "EmitterSpec",
    "EmitterState",
    "FrameState",
    "LayoutSpec",
    "LifeSpec",
    "PreparedScene",
    "PreparedVideo",
    "SceneDescriptor",
    "SceneEvaluator",
    "SceneFrame",
    "TimeRef",
    "VideoDescriptor",
    "VideoEvaluator",
    "VideoFrame",
    "VideoSceneEntry",
    "parse_time_ref",
]
