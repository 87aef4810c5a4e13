"""Animation configs and per-frame state records."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from motionbeat.core.curves.easing import is_easing, list_easings


class PresetName(str, Enum):
    FADE_UP_IN = "fadeUpIn"
    SLIDE_IN_LEFT = "slideInLeft"
    SLIDE_IN_RIGHT = "slideInRight"
    POP_IN_SPRING = "popInSpring"
    PULSE_EMPHASIS = "pulseEmphasis"
    BREATHE = "breathe"
    FADE_DOWN_OUT = "fadeDownOut"
    DRAW_ON_PATH = "drawOnPath"
    SHRINK_TO_CORNER = "shrinkToCorner"
    HIGHLIGHT_SWIPE = "highlightSwipe"


class AnimationState(BaseModel):
    """Visual state of one element at one frame.

    ``None`` means the property is not driven; the renderer keeps its own
    value. ``progress``, ``dash_offset`` and ``clip_width`` are only set by
    path-drawing and swipe presets.
    """

    model_config = ConfigDict(frozen=True)

    opacity: float | None = None
    translate_x: float | None = None
    translate_y: float | None = None
    scale: float | None = None
    rotation: float | None = None
    progress: float | None = None
    dash_offset: float | None = None
    clip_width: float | None = None

    def combine(self, other: AnimationState) -> AnimationState:
        """Layer ``other`` on top of this state.

        Opacity and scale multiply, translation and rotation add. Progress
        style fields are replaced by ``other`` when it sets them.
        """

        def _mul(a: float | None, b: float | None) -> float | None:
            if a is None:
                return b
            if b is None:
                return a
            return a * b

        def _add(a: float | None, b: float | None) -> float | None:
            if a is None:
                return b
            if b is None:
                return a
            return a + b

        def _override(a: float | None, b: float | None) -> float | None:
            return a if b is None else b

        return AnimationState(
            opacity=_mul(self.opacity, other.opacity),
            translate_x=_add(self.translate_x, other.translate_x),
            translate_y=_add(self.translate_y, other.translate_y),
            scale=_mul(self.scale, other.scale),
            rotation=_add(self.rotation, other.rotation),
            progress=_override(self.progress, other.progress),
            dash_offset=_override(self.dash_offset, other.dash_offset),
            clip_width=_override(self.clip_width, other.clip_width),
        )

    def driven(self) -> dict[str, float]:
        """Only the properties this state sets."""
        return self.model_dump(exclude_none=True)


class PresetConfigBase(BaseModel):
    """Fields shared by every preset config. Start is in seconds."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    start: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)


class EasedConfig(PresetConfigBase):
    ease: str = "smooth"

    @field_validator("ease")
    @classmethod
    def _validate_ease(cls, value: str) -> str:
        if not is_easing(value):
            raise ValueError(f"unknown easing {value!r}, expected one of {', '.join(list_easings())}")
        return value


class WindowedConfig(EasedConfig):
    dur: float = Field(..., ge=0.0, allow_inf_nan=False)


class FadeUpInConfig(WindowedConfig):
    preset: Literal["fadeUpIn"] = "fadeUpIn"
    dist: float = 50.0


class SlideInLeftConfig(WindowedConfig):
    preset: Literal["slideInLeft"] = "slideInLeft"
    dist: float = 100.0


class SlideInRightConfig(WindowedConfig):
    preset: Literal["slideInRight"] = "slideInRight"
    dist: float = 100.0


class FadeDownOutConfig(WindowedConfig):
    preset: Literal["fadeDownOut"] = "fadeDownOut"
    dist: float = 50.0
    dist_x: float = Field(default=0.0, description="Horizontal drift in px; 0 leaves translate_x undriven")
    ease: str = "power3In"


class PopInSpringConfig(PresetConfigBase):
    preset: Literal["popInSpring"] = "popInSpring"
    mass: float = Field(default=1.0, gt=0.0)
    stiffness: float = Field(default=120.0, gt=0.0)
    damping: float = Field(default=10.0, ge=0.0)


class PulseEmphasisConfig(WindowedConfig):
    preset: Literal["pulseEmphasis"] = "pulseEmphasis"
    dur: float = Field(default=0.5, ge=0.0, allow_inf_nan=False)
    amount: float = 0.05
    ease: str = "backOut"


class BreatheConfig(PresetConfigBase):
    preset: Literal["breathe"] = "breathe"
    loop: float = Field(default=3.0, gt=0.0, allow_inf_nan=False, description="Seconds per cycle")
    amount: float = 0.02


class DrawOnPathConfig(WindowedConfig):
    preset: Literal["drawOnPath"] = "drawOnPath"
    length: float = Field(..., ge=0.0, description="Total path length in px")
    ease: str = "power3InOut"


class ShrinkToCornerConfig(WindowedConfig):
    preset: Literal["shrinkToCorner"] = "shrinkToCorner"
    target_scale: float = Field(default=0.4, ge=0.0)
    target_pos: tuple[float, float] = (600.0, -300.0)
    ease: str = "power2InOut"


class HighlightSwipeConfig(WindowedConfig):
    preset: Literal["highlightSwipe"] = "highlightSwipe"
    width: float = Field(default=800.0, ge=0.0, description="Full highlight width in px")


AnimationConfig = Annotated[
    Union[
        FadeUpInConfig,
        SlideInLeftConfig,
        SlideInRightConfig,
        FadeDownOutConfig,
        PopInSpringConfig,
        PulseEmphasisConfig,
        BreatheConfig,
        DrawOnPathConfig,
        ShrinkToCornerConfig,
        HighlightSwipeConfig,
    ],
    Field(discriminator="preset"),
]
