"""Closed-form damped spring.

Progress runs from 0 to 1 as a unit mass-spring-damper released from
displacement -1 at rest. Because the solution is analytic, any frame can be
evaluated directly without stepping through the frames before it.
"""

from __future__ import annotations

import logging
import math

from pydantic import BaseModel, ConfigDict, Field

from motionbeat.core.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SETTLE_THRESHOLD = 0.005
_MAX_SETTLE_FRAMES = 100_000


class SpringConfig(BaseModel):
    """Physical parameters of a spring."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    mass: float = Field(default=1.0, gt=0.0)
    stiffness: float = Field(default=100.0, gt=0.0)
    damping: float = Field(default=10.0, ge=0.0)

    @property
    def natural_frequency(self) -> float:
        return math.sqrt(self.stiffness / self.mass)

    @property
    def damping_ratio(self) -> float:
        return self.damping / (2.0 * math.sqrt(self.stiffness * self.mass))


def _displacement(t: float, config: SpringConfig) -> float:
    """Displacement from rest at ``t`` seconds, starting at -1 with zero velocity."""
    omega0 = config.natural_frequency
    zeta = config.damping_ratio

    if zeta < 1.0:
        omega1 = omega0 * math.sqrt(1.0 - zeta * zeta)
        envelope = math.exp(-zeta * omega0 * t)
        return -envelope * (
            math.cos(omega1 * t) + (zeta * omega0 / omega1) * math.sin(omega1 * t)
        )
    if zeta == 1.0:
        return -math.exp(-omega0 * t) * (1.0 + omega0 * t)

    root = math.sqrt(zeta * zeta - 1.0)
    r1 = -omega0 * (zeta - root)
    r2 = -omega0 * (zeta + root)
    # x(0) = -1, x'(0) = 0
    a = r2 / (r1 - r2)
    b = -1.0 - a
    return a * math.exp(r1 * t) + b * math.exp(r2 * t)


def spring_value(seconds: float, config: SpringConfig) -> float:
    """Spring progress after ``seconds``; 0 at or before t=0."""
    if seconds <= 0.0:
        return 0.0
    return 1.0 + _displacement(seconds, config)


def spring_progress(
    frame: float,
    fps: float,
    mass: float = 1.0,
    stiffness: float = 100.0,
    damping: float = 10.0,
) -> float:
    """Spring progress at ``frame`` (frames since release).

    Underdamped springs overshoot 1 before settling.

    Example:
        >>> spring_progress(0, 30)
        0.0
    """
    if fps <= 0:
        raise InvalidConfigurationError(f"fps must be > 0, got {fps}")
    config = SpringConfig(mass=mass, stiffness=stiffness, damping=damping)
    return spring_value(frame / fps, config)


def measure_spring(
    fps: float,
    mass: float = 1.0,
    stiffness: float = 100.0,
    damping: float = 10.0,
    threshold: float = DEFAULT_SETTLE_THRESHOLD,
) -> int:
    """Number of frames until the spring stays within ``threshold`` of 1.

    For underdamped springs the decay envelope bounds the oscillation, so
    the first frame where the envelope drops under the threshold is used.
    Critically and overdamped springs approach 1 monotonically.

    Raises:
        InvalidConfigurationError: If fps <= 0 or the spring never settles.
    """
    if fps <= 0:
        raise InvalidConfigurationError(f"fps must be > 0, got {fps}")
    if damping == 0:
        raise InvalidConfigurationError("An undamped spring never settles")

    config = SpringConfig(mass=mass, stiffness=stiffness, damping=damping)
    omega0 = config.natural_frequency
    zeta = config.damping_ratio

    for frame in range(_MAX_SETTLE_FRAMES):
        t = frame / fps
        if zeta < 1.0:
            omega1 = omega0 * math.sqrt(1.0 - zeta * zeta)
            bound = math.exp(-zeta * omega0 * t) * math.hypot(1.0, zeta * omega0 / omega1)
        else:
            bound = abs(_displacement(t, config))
        if bound < threshold:
            logger.debug(f"Spring {config} settles after {frame} frames at {fps} fps")
            return frame

    raise InvalidConfigurationError(f"Spring {config} does not settle within {_MAX_SETTLE_FRAMES} frames")
