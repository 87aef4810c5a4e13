"""Scene and video descriptors, plus evaluated frame records.

Descriptors are what authors write (JSON/YAML). Times are seconds or a
beat reference: ``"title"``, ``"title+0.25"`` or ``"exit-0.5"``.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from motionbeat.core.animation.continuous import ContinuousLifeConfig
from motionbeat.core.animation.models import AnimationState
from motionbeat.core.composition.models import ActiveScene, TransitionSpec
from motionbeat.core.layout.models import (
    BoundingBox,
    Connector,
    LayoutConfig,
    ResolvedPosition,
    RoutedConnector,
    Stage,
)
from motionbeat.core.particles.models import ParticleKind, ParticleState

TimeRef = float | str
AuthoredBeat = float | str | dict[str, float]

_BEAT_REF = re.compile(r"^\s*(?P<name>[A-Za-z_][\w.-]*?)\s*(?:(?P<sign>[+-])\s*(?P<offset>\d+(?:\.\d+)?))?\s*$")


def parse_time_ref(ref: TimeRef) -> tuple[str | None, float]:
    """Split a time reference into (beat name or None, seconds).

    Example:
        >>> parse_time_ref("title+0.25")
        ('title', 0.25)
        >>> parse_time_ref(1.5)
        (None, 1.5)
    """
    if isinstance(ref, (int, float)):
        return None, float(ref)
    match = _BEAT_REF.match(ref)
    if match is None:
        raise ValueError(f"invalid time reference {ref!r}")
    offset = float(match["offset"] or 0.0)
    if match["sign"] == "-":
        offset = -offset
    return match["name"], offset


class _Authored(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class LifeSpec(_Authored):
    """Continuous-life oscillations for an element, from ``start`` on."""

    start: TimeRef = 0.0
    phase_offset: float = 0.0
    config: ContinuousLifeConfig


class ElementStyle(_Authored):
    """Style-bundle driven entrance/exit for an element."""

    name: str = "subtle"
    overrides: dict[str, Any] | None = None
    enter: TimeRef = 0.0
    exit: TimeRef | None = None
    index: int = Field(default=0, ge=0, description="Position within its stagger group")
    group_size: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def _validate_index(self) -> ElementStyle:
        if self.index >= self.group_size:
            raise ValueError(f"index {self.index} out of range for group of {self.group_size}")
        return self


class ElementSpec(_Authored):
    """One animated element.

    ``animations`` are preset invocations (``{"preset": "fadeUpIn", ...}``)
    whose ``start`` may be a time reference.
    """

    id: str
    box: str | None = None
    animations: list[dict[str, Any]] = Field(default_factory=list)
    life: LifeSpec | None = None
    style: ElementStyle | None = None


class EmitterSpec(_Authored):
    """A particle generator invocation.

    ``anchor_box`` takes the confetti origin or sparkle bounds from a
    placed layout box instead of ``origin``/``bounds``.
    """

    id: str
    kind: ParticleKind
    count: int = Field(ge=0)
    seed: int | None = None
    start: TimeRef = 0.0
    origin: tuple[float, float] | None = None
    bounds: tuple[float, float, float, float] | None = None
    anchor_box: str | None = None
    duration: float = Field(default=90, gt=0, description="Confetti lifetime in frames")
    vertical_speed: float = 1.0
    loop_height: float = Field(default=1200, gt=0)


class LayoutSpec(_Authored):
    boxes: list[BoundingBox] = Field(default_factory=list)
    connectors: list[Connector] = Field(default_factory=list)
    stage: Stage | None = None
    config: LayoutConfig | None = None


class SceneDescriptor(_Authored):
    """Declarative description of one scene."""

    id: str
    template: str | None = None
    duration_s: float = Field(ge=0.0, allow_inf_nan=False)
    beats: dict[str, AuthoredBeat] = Field(default_factory=dict)
    beat_order: list[str] = Field(default_factory=list)
    beat_defaults: dict[str, AuthoredBeat] = Field(default_factory=dict)
    elements: list[ElementSpec] = Field(default_factory=list)
    emitters: list[EmitterSpec] = Field(default_factory=list)
    layout: LayoutSpec | None = None


class VideoSceneEntry(_Authored):
    """A scene in a video, with the transition out of it into the next."""

    scene: SceneDescriptor
    transition: TransitionSpec | None = None
    transition_frames: int | None = Field(default=None, ge=0)


class VideoDescriptor(_Authored):
    """An ordered list of scenes.

    Unset defaults come from the app's :class:`CompositionConfig`.
    """

    id: str
    scenes: list[VideoSceneEntry] = Field(min_length=1)
    default_transition: TransitionSpec | None = None
    default_transition_frames: int | None = Field(default=None, ge=0)
    tail_padding: int | None = Field(default=None, ge=0)


# ==================== EVALUATED OUTPUT ====================


class ElementState(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    state: AnimationState
    position: ResolvedPosition | None = None


class EmitterState(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    kind: ParticleKind
    particles: tuple[ParticleState, ...]


class FrameState(BaseModel):
    """Everything the renderer needs for one scene at one local frame."""

    model_config = ConfigDict(frozen=True)

    scene_id: str
    frame: int
    elements: dict[str, ElementState] = Field(default_factory=dict)
    emitters: dict[str, EmitterState] = Field(default_factory=dict)
    connectors: tuple[RoutedConnector, ...] = ()


class SceneFrame(BaseModel):
    model_config = ConfigDict(frozen=True)

    active: ActiveScene
    state: FrameState


class VideoFrame(BaseModel):
    model_config = ConfigDict(frozen=True)

    frame: int
    scenes: tuple[SceneFrame, ...] = ()
