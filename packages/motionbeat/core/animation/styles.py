"""Style bundles: named entrance/exit/continuous-life/stagger combinations.

A bundle is data, not behaviour. :func:`entrance_config` and
:func:`exit_config` turn a bundle into concrete preset configs for an
element starting at a given time.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from motionbeat.core.animation.continuous import ContinuousLifeConfig, WaveConfig
from motionbeat.core.animation.models import (
    AnimationConfig,
    FadeDownOutConfig,
    FadeUpInConfig,
    PopInSpringConfig,
    ShrinkToCornerConfig,
    SlideInLeftConfig,
    SlideInRightConfig,
)
from motionbeat.core.curves.spring import SpringConfig
from motionbeat.core.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "subtle"
DEFAULT_DISTANCE = 40.0


class SpringName(str, Enum):
    GENTLE = "gentle"
    SMOOTH = "smooth"
    BOUNCY = "bouncy"
    SNAPPY = "snappy"
    WOBBLY = "wobbly"


SPRING_CONFIGS: dict[SpringName, SpringConfig] = {
    SpringName.GENTLE: SpringConfig(damping=15, mass=1, stiffness=100),
    SpringName.SMOOTH: SpringConfig(damping=12, mass=1, stiffness=120),
    SpringName.BOUNCY: SpringConfig(damping=8, mass=1, stiffness=150),
    SpringName.SNAPPY: SpringConfig(damping=20, mass=0.8, stiffness=180),
    SpringName.WOBBLY: SpringConfig(damping=5, mass=1, stiffness=100),
}


class EntranceType(str, Enum):
    FADE_IN = "fadeIn"
    SLIDE_IN = "slideIn"
    SCALE_IN = "scaleIn"
    BOUNCE_IN = "bounceIn"
    FADE_SLIDE = "fadeSlide"
    SPRING = "spring"


class ExitType(str, Enum):
    FADE_OUT = "fadeOut"
    SLIDE_OUT = "slideOut"
    SCALE_OUT = "scaleOut"


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class StaggerDirection(str, Enum):
    FORWARD = "forward"
    REVERSE = "reverse"
    CENTER_OUT = "center-out"


class EntranceSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: EntranceType
    duration: float = Field(ge=0.0, description="Seconds")
    direction: Direction | None = None
    distance: float | None = None
    spring: SpringName | None = None


class ExitSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: ExitType
    duration: float = Field(ge=0.0, description="Seconds")
    direction: Direction | None = None
    distance: float | None = None


class StaggerSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    delay: float = Field(ge=0.0, description="Seconds between consecutive items")
    direction: StaggerDirection = StaggerDirection.FORWARD


class StyleBundle(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    entrance: EntranceSpec
    exit: ExitSpec
    continuous_life: ContinuousLifeConfig | None = None
    stagger: StaggerSpec


STYLE_BUNDLES: dict[str, StyleBundle] = {
    # Clean, professional
    "subtle": StyleBundle(
        entrance=EntranceSpec(type=EntranceType.FADE_IN, duration=0.5),
        exit=ExitSpec(type=ExitType.FADE_OUT, duration=0.3),
        stagger=StaggerSpec(delay=0.15),
    ),
    # Playful, energetic
    "bouncy": StyleBundle(
        entrance=EntranceSpec(type=EntranceType.BOUNCE_IN, duration=0.6, spring=SpringName.BOUNCY),
        exit=ExitSpec(type=ExitType.SCALE_OUT, duration=0.3),
        continuous_life=ContinuousLifeConfig(breathing=WaveConfig(frequency=0.03, amplitude=0.02)),
        stagger=StaggerSpec(delay=0.2),
    ),
    # Bold emphasis moments
    "dramatic": StyleBundle(
        entrance=EntranceSpec(
            type=EntranceType.FADE_SLIDE, duration=0.8, direction=Direction.UP, distance=60
        ),
        exit=ExitSpec(type=ExitType.FADE_OUT, duration=0.4),
        continuous_life=ContinuousLifeConfig(floating=WaveConfig(frequency=0.02, amplitude=8)),
        stagger=StaggerSpec(delay=0.3),
    ),
    # Barely noticeable, for dense content
    "minimal": StyleBundle(
        entrance=EntranceSpec(type=EntranceType.FADE_IN, duration=0.4),
        exit=ExitSpec(type=ExitType.FADE_OUT, duration=0.25),
        stagger=StaggerSpec(delay=0.1),
    ),
    # Clear, methodical
    "educational": StyleBundle(
        entrance=EntranceSpec(
            type=EntranceType.SLIDE_IN, duration=0.5, direction=Direction.LEFT, distance=40
        ),
        exit=ExitSpec(type=ExitType.SLIDE_OUT, duration=0.3, direction=Direction.RIGHT, distance=40),
        stagger=StaggerSpec(delay=0.25),
    ),
}


def _deep_merge(base: dict[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def resolve_style(name: str | None = None, overrides: Mapping[str, Any] | None = None) -> StyleBundle:
    """Resolve a style bundle by name, with optional partial overrides.

    Unknown or missing names fall back to ``subtle``. ``entrance``, ``exit``
    and ``stagger`` overrides merge key by key; a ``continuous_life``
    override replaces the bundle's value outright (``None`` turns it off).

    Raises:
        InvalidConfigurationError: If the merged bundle is invalid.

    Example:
        >>> resolve_style("bouncy", {"entrance": {"duration": 0.4}}).entrance.duration
        0.4
    """
    base = STYLE_BUNDLES.get(name or DEFAULT_STYLE)
    if base is None:
        logger.debug(f"Unknown style {name!r}, falling back to {DEFAULT_STYLE!r}")
        base = STYLE_BUNDLES[DEFAULT_STYLE]
    if not overrides:
        return base

    data = base.model_dump(mode="json")
    sections = {k: v for k, v in overrides.items() if k != "continuous_life"}
    merged = _deep_merge(data, sections)
    if "continuous_life" in overrides:
        merged["continuous_life"] = overrides["continuous_life"]

    try:
        return StyleBundle.model_validate(merged)
    except ValidationError as e:
        raise InvalidConfigurationError.from_validation(f"Invalid overrides for style {name!r}", e) from e


def stagger_delay(
    delay: float,
    index: int,
    total: int,
    direction: StaggerDirection | str = StaggerDirection.FORWARD,
) -> float:
    """Start delay (seconds) for item ``index`` of ``total``.

    Example:
        >>> stagger_delay(0.2, 0, 5, "center-out")
        0.4
    """
    direction = StaggerDirection(direction)
    if direction == StaggerDirection.REVERSE:
        return delay * (total - 1 - index)
    if direction == StaggerDirection.CENTER_OUT:
        center = (total - 1) / 2
        return delay * abs(index - center)
    return delay * index


def entrance_config(bundle: StyleBundle, start: float) -> AnimationConfig:
    """Concrete entrance preset for ``bundle`` starting at ``start`` seconds."""
    entrance = bundle.entrance
    distance = entrance.distance if entrance.distance is not None else DEFAULT_DISTANCE
    direction = entrance.direction or Direction.UP

    if entrance.type in (EntranceType.SCALE_IN, EntranceType.BOUNCE_IN, EntranceType.SPRING):
        spring = SPRING_CONFIGS[entrance.spring or SpringName.SMOOTH]
        return PopInSpringConfig(
            start=start, mass=spring.mass, stiffness=spring.stiffness, damping=spring.damping
        )
    if entrance.type == EntranceType.FADE_IN:
        return FadeUpInConfig(start=start, dur=entrance.duration, dist=0.0)

    # slideIn / fadeSlide
    if direction == Direction.LEFT:
        return SlideInLeftConfig(start=start, dur=entrance.duration, dist=distance)
    if direction == Direction.RIGHT:
        return SlideInRightConfig(start=start, dur=entrance.duration, dist=distance)
    dist = distance if direction == Direction.UP else -distance
    return FadeUpInConfig(start=start, dur=entrance.duration, dist=dist)


def exit_config(bundle: StyleBundle, start: float) -> AnimationConfig:
    """Concrete exit preset for ``bundle`` starting at ``start`` seconds."""
    exit_spec = bundle.exit
    distance = exit_spec.distance if exit_spec.distance is not None else DEFAULT_DISTANCE
    direction = exit_spec.direction or Direction.DOWN

    if exit_spec.type == ExitType.FADE_OUT:
        return FadeDownOutConfig(start=start, dur=exit_spec.duration, dist=0.0)
    if exit_spec.type == ExitType.SCALE_OUT:
        return ShrinkToCornerConfig(
            start=start, dur=exit_spec.duration, target_scale=0.0, target_pos=(0.0, 0.0), ease="power3In"
        )

    # slideOut
    if direction in (Direction.LEFT, Direction.RIGHT):
        dx = distance if direction == Direction.RIGHT else -distance
        return FadeDownOutConfig(start=start, dur=exit_spec.duration, dist=0.0, dist_x=dx)
    dist = distance if direction == Direction.DOWN else -distance
    return FadeDownOutConfig(start=start, dur=exit_spec.duration, dist=dist)
