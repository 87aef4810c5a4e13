"""Scene timing and composed-timeline records."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TransitionStyle(str, Enum):
    NONE = "none"
    FADE = "fade"
    SLIDE = "slide"
    SLIDE_REVERSE = "slide-reverse"
    SLIDE_UP = "slide-up"
    SLIDE_DOWN = "slide-down"
    WIPE = "wipe"
    WIPE_REVERSE = "wipe-reverse"
    CLOCK = "clock"
    IRIS = "iris"


class TransitionEasing(str, Enum):
    LINEAR = "linear"
    SMOOTH = "smooth"
    SNAPPY = "snappy"


class SlideDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class WipeAxis(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class TransitionRole(str, Enum):
    OUTGOING = "outgoing"
    INCOMING = "incoming"


class TransitionSpec(BaseModel):
    """How one scene hands over to the next during their overlap."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    style: TransitionStyle = TransitionStyle.FADE
    easing: TransitionEasing = TransitionEasing.SMOOTH
    direction: SlideDirection = SlideDirection.LEFT
    axis: WipeAxis = WipeAxis.HORIZONTAL


DEFAULT_TRANSITION_FRAMES = 18


class CompositionConfig(BaseModel):
    """Video-wide composition defaults.

    Used for any video that leaves the matching field unset.
    """

    model_config = ConfigDict(frozen=True)

    tail_padding: int = Field(default=0, ge=0, description="Frames held after the last scene")
    default_transition: TransitionSpec = TransitionSpec()
    default_transition_frames: int = Field(default=DEFAULT_TRANSITION_FRAMES, ge=0)


class Presentation(BaseModel):
    """Renderer-facing description of a transition effect.

    ``entry_edge`` is the edge the incoming scene enters from
    (``from-left``, ``from-top``...), or None for effects without one.
    """

    model_config = ConfigDict(frozen=True)

    kind: str
    entry_edge: str | None = None


class SceneTiming(BaseModel):
    """Per-scene timing input, in frames.

    ``transition_overlap`` is the number of frames shared with the next
    scene; it is ignored on the last scene.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str | None = None
    duration: int = Field(ge=0)
    transition_overlap: int = Field(default=0, ge=0)
    transition: TransitionSpec = TransitionSpec()


class ScheduledScene(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    id: str
    offset: int
    duration: int
    overlap_out: int
    transition: TransitionSpec

    @property
    def end(self) -> int:
        return self.offset + self.duration


class TransitionPhase(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: TransitionRole
    progress: float = Field(ge=0.0, le=1.0)
    frame: int = Field(ge=0, description="Frames since the overlap began")
    duration: int
    style: TransitionStyle
    presentation: Presentation | None = None


class ActiveScene(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    id: str
    local_frame: int
    transition: TransitionPhase | None = None

