"""Per-frame particle kinematics.

Every function here is O(1) and pure in (particle, frame, anchor): frames
can be evaluated in any order, any number of times, in parallel.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from motionbeat.core.curves.interpolate import interpolate
from motionbeat.core.particles.models import (
    AmbientParticle,
    ConfettiParticle,
    FloatingShape,
    ParticleState,
    SparkleParticle,
)
from motionbeat.core.random.seeded import seeded_random
from motionbeat.core.utils.math import wrap

DEFAULT_PALETTE: tuple[str, ...] = ("#FF6B35", "#9B59B6", "#2E7FE4")
CONFETTI_PALETTE: tuple[str, ...] = ("#FF6B35", "#9B59B6", "#2E7FE4", "#27AE60", "#F39C12")
SPARKLE_COLOR = "#FFD700"

CONFETTI_FADE_PERCENT = 70
SPARKLE_ROTATION_PER_FRAME = 8.0


def animate_ambient(
    particle: AmbientParticle,
    frame: float,
    vertical_speed: float = 1.0,
    loop_height: float = 1200,
) -> ParticleState:
    """Rise at ``vertical_speed`` px/frame, wrapping every ``loop_height`` px."""
    wrapped_y = wrap(particle.y - frame * vertical_speed, loop_height)
    drift_x = math.sin(frame * 0.02 * particle.speed + particle.phase) * particle.amplitude
    size_pulse = 1 + math.sin(frame * 0.03 * particle.speed + particle.phase) * 0.1
    return ParticleState(
        id=particle.id,
        x=particle.x + drift_x,
        y=wrapped_y,
        size=particle.size * size_pulse,
        opacity=particle.opacity,
    )


def animate_confetti(
    particle: ConfettiParticle,
    frame: float,
    start_frame: float,
    duration: float = 90,
) -> ParticleState:
    """Ballistic flight under gravity, fading over the final 30%.

    Example:
        >>> p = ConfettiParticle(id="c", origin_x=960, origin_y=540, angle=0, velocity=5,
        ...                      color_index=0, size=8, rotation=0, rotation_speed=0, gravity=0.1)
        >>> s = animate_confetti(p, 10, 0)
        >>> (s.x, s.y)
        (1010.0, 545.0)
    """
    elapsed = frame - start_frame
    if elapsed < 0 or elapsed > duration:
        return ParticleState.hidden(particle.id)

    vx = math.cos(particle.angle) * particle.velocity
    vy = math.sin(particle.angle) * particle.velocity

    fade_start = duration * CONFETTI_FADE_PERCENT / 100
    opacity = interpolate(elapsed, (fade_start, duration), (1.0, 0.0)) if elapsed > fade_start else 1.0

    return ParticleState(
        id=particle.id,
        x=particle.origin_x + vx * elapsed,
        y=particle.origin_y + vy * elapsed + (particle.gravity * elapsed * elapsed) / 2,
        size=particle.size,
        rotation=particle.rotation + particle.rotation_speed * elapsed,
        opacity=opacity,
        color_index=particle.color_index,
    )


def animate_sparkle(particle: SparkleParticle, frame: float, start_frame: float) -> ParticleState:
    """Twinkle: quick fade-in, slower fade-out, scale burst, steady spin."""
    local = frame - start_frame - particle.delay
    if local < 0 or local > particle.duration:
        return ParticleState.hidden(particle.id)

    mid = particle.duration / 2
    if local < mid:
        scale = interpolate(local, (0.0, mid), (0.0, 1.0))
        opacity = interpolate(local, (0.0, mid * 0.3), (0.0, 1.0))
    else:
        scale = interpolate(local, (mid, particle.duration), (1.0, 0.0))
        opacity = interpolate(local, (mid * 0.7, particle.duration), (1.0, 0.0))

    return ParticleState(
        id=particle.id,
        x=particle.x,
        y=particle.y,
        size=particle.size,
        scale=scale,
        opacity=opacity,
        rotation=local * SPARKLE_ROTATION_PER_FRAME,
    )


def animate_floating_shape(shape: FloatingShape, frame: float) -> ParticleState:
    drift_x = math.sin(frame * 0.01 * shape.speed + shape.phase) * 50
    drift_y = math.cos(frame * 0.008 * shape.speed + shape.phase * 0.7) * 30
    scale = 1 + math.sin(frame * 0.015 * shape.speed + shape.phase) * 0.15
    return ParticleState(
        id=shape.id,
        x=shape.x + drift_x,
        y=shape.y + drift_y,
        size=shape.size * scale,
        opacity=shape.opacity,
        rotation=frame * 0.1 * shape.speed,
        color_index=shape.color_index,
    )


def particle_color(index: int, palette: Sequence[str] = DEFAULT_PALETTE) -> str:
    """Palette lookup that wraps around short palettes."""
    if not palette:
        raise ValueError("palette must not be empty")
    return palette[index % len(palette)]


def ambient_color_index(particle: AmbientParticle, palette_size: int = len(DEFAULT_PALETTE)) -> int:
    """Seeded colour pick for an ambient particle, keyed on its index."""
    number = int(particle.id.rsplit("-", 1)[1])
    return math.floor(seeded_random(number * 777) * palette_size)
