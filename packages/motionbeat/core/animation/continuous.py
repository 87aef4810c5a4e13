"""Continuous life: small endless oscillations for elements in a hold.

Frequencies around 0.02-0.04 rad/frame and amplitudes of a few px (or a
few percent of scale) keep elements from looking frozen without drawing
attention. All functions are closed-form in the frame number.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from motionbeat.core.animation.models import AnimationState


class WaveConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    frequency: float = Field(gt=0.0, description="Radians per frame")
    amplitude: float


class ContinuousLifeConfig(BaseModel):
    """Which oscillations to layer on an element. Unset means off."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    breathing: WaveConfig | None = None
    floating: WaveConfig | None = None
    rotation: WaveConfig | None = None


def _wave(frame: float, start_frame: float, frequency: float, phase_offset: float) -> float:
    return math.sin((frame - start_frame) * frequency + phase_offset)


def continuous_breathing(
    frame: float,
    start_frame: float = 0,
    frequency: float = 0.03,
    amplitude: float = 0.03,
    phase_offset: float = 0.0,
    enabled: bool = True,
) -> float:
    """Scale multiplier that never dips below 1.

    Returns ``1 + |sin(...) * amplitude / 2|``, so the baseline stays at
    the element's authored size.
    """
    if not enabled or frame < start_frame:
        return 1.0
    return 1.0 + abs(_wave(frame, start_frame, frequency, phase_offset) * amplitude / 2)


def continuous_floating(
    frame: float,
    start_frame: float = 0,
    frequency: float = 0.02,
    amplitude: float = 5.0,
    phase_offset: float = 0.0,
    enabled: bool = True,
) -> float:
    """Vertical offset in px, in [-amplitude, amplitude]."""
    if not enabled or frame < start_frame:
        return 0.0
    return _wave(frame, start_frame, frequency, phase_offset) * amplitude


def continuous_rotation(
    frame: float,
    start_frame: float = 0,
    frequency: float = 0.025,
    amplitude: float = 3.0,
    phase_offset: float = 0.0,
    enabled: bool = True,
) -> float:
    """Rotation in degrees, in [-amplitude, amplitude]."""
    if not enabled or frame < start_frame:
        return 0.0
    return _wave(frame, start_frame, frequency, phase_offset) * amplitude


def continuous_life(
    frame: float,
    start_frame: float = 0,
    breathing_frequency: float = 0.03,
    breathing_amplitude: float = 0.03,
    floating_frequency: float = 0.02,
    floating_amplitude: float = 4.0,
    phase_offset: float = 0.0,
    enabled: bool = True,
) -> AnimationState:
    """Breathing plus floating, with floating a quarter-pi out of phase."""
    scale = continuous_breathing(
        frame, start_frame, breathing_frequency, breathing_amplitude, phase_offset, enabled
    )
    y = continuous_floating(
        frame, start_frame, floating_frequency, floating_amplitude, phase_offset + math.pi / 4, enabled
    )
    return AnimationState(scale=scale, translate_y=y)


def evaluate_life(
    frame: float,
    config: ContinuousLifeConfig,
    start_frame: float = 0,
    phase_offset: float = 0.0,
) -> AnimationState:
    """State for whichever oscillations ``config`` enables."""
    scale = translate_y = rotation = None
    if config.breathing is not None:
        scale = continuous_breathing(
            frame, start_frame, config.breathing.frequency, config.breathing.amplitude, phase_offset
        )
    if config.floating is not None:
        translate_y = continuous_floating(
            frame, start_frame, config.floating.frequency, config.floating.amplitude, phase_offset
        )
    if config.rotation is not None:
        rotation = continuous_rotation(
            frame, start_frame, config.rotation.frequency, config.rotation.amplitude, phase_offset
        )
    return AnimationState(scale=scale, translate_y=translate_y, rotation=rotation)
