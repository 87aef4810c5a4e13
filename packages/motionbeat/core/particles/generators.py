"""Deterministic particle generators.

Generation is cached per parameter set. Cached results are tuples of frozen
records, so sharing them between frames and threads is safe; regenerating
always produces the same array.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache

from motionbeat.core.errors import InvalidConfigurationError
from motionbeat.core.particles.models import (
    AmbientParticle,
    ConfettiParticle,
    FloatingShape,
    ShapeType,
    SparkleParticle,
)
from motionbeat.core.random.seeded import SeededSequence

logger = logging.getLogger(__name__)

DEFAULT_AMBIENT_SEED = 42
DEFAULT_CONFETTI_SEED = 100
DEFAULT_SPARKLE_SEED = 200
DEFAULT_SHAPES_SEED = 300

AMBIENT_STRIDE = 1000
CONFETTI_STRIDE = 500
SPARKLE_STRIDE = 300
SHAPES_STRIDE = 400

CONFETTI_COLOR_COUNT = 5
SHAPE_COLOR_COUNT = 3
_SHAPE_TYPES = (ShapeType.CIRCLE, ShapeType.BLOB, ShapeType.LINE)

_CACHE_SIZE = 256


def _check_count(count: int) -> None:
    if count < 0:
        raise InvalidConfigurationError(f"particle count must be >= 0, got {count}")


@lru_cache(maxsize=_CACHE_SIZE)
def generate_ambient(
    count: int,
    seed: int = DEFAULT_AMBIENT_SEED,
    width: float = 1920,
    height: float = 1080,
) -> tuple[AmbientParticle, ...]:
    """Slow background motes spread over the canvas."""
    _check_count(count)
    particles = []
    for i in range(count):
        r = SeededSequence(seed + i * AMBIENT_STRIDE)
        particles.append(
            AmbientParticle(
                id=f"ambient-{i}",
                x=r.next(0) * width,
                y=r.next(1) * height,
                size=2 + r.next(2) * 4,
                speed=0.3 + r.next(3) * 0.5,
                phase=r.next(4) * math.pi * 2,
                amplitude=20 + r.next(5) * 30,
                opacity=0.1 + r.next(6) * 0.2,
            )
        )
    logger.debug(f"Generated {count} ambient particles (seed={seed})")
    return tuple(particles)


@lru_cache(maxsize=_CACHE_SIZE)
def generate_confetti(
    count: int,
    origin_x: float,
    origin_y: float,
    seed: int = DEFAULT_CONFETTI_SEED,
) -> tuple[ConfettiParticle, ...]:
    """A radial burst: angles spread evenly with a little seeded jitter."""
    _check_count(count)
    particles = []
    for i in range(count):
        r = SeededSequence(seed + i * CONFETTI_STRIDE)
        particles.append(
            ConfettiParticle(
                id=f"confetti-{i}",
                origin_x=origin_x,
                origin_y=origin_y,
                angle=(i / count) * math.pi * 2 + r.next(0) * 0.5,
                velocity=3 + r.next(1) * 4,
                color_index=r.choice_index(CONFETTI_COLOR_COUNT, 2),
                size=6 + r.next(3) * 8,
                rotation=r.next(4) * 360,
                rotation_speed=(r.next(5) - 0.5) * 10,
                gravity=0.08 + r.next(6) * 0.04,
            )
        )
    logger.debug(f"Generated {count} confetti particles (seed={seed})")
    return tuple(particles)


@lru_cache(maxsize=_CACHE_SIZE)
def generate_sparkles(
    count: int,
    bounds: tuple[float, float, float, float],
    seed: int = DEFAULT_SPARKLE_SEED,
) -> tuple[SparkleParticle, ...]:
    """Twinkles scattered inside ``bounds`` = (x, y, width, height)."""
    _check_count(count)
    x, y, width, height = bounds
    particles = []
    for i in range(count):
        r = SeededSequence(seed + i * SPARKLE_STRIDE)
        particles.append(
            SparkleParticle(
                id=f"sparkle-{i}",
                x=x + r.next(0) * width,
                y=y + r.next(1) * height,
                delay=r.next(2) * 30,
                size=8 + r.next(3) * 12,
                duration=20 + r.next(4) * 20,
            )
        )
    logger.debug(f"Generated {count} sparkles (seed={seed})")
    return tuple(particles)


@lru_cache(maxsize=_CACHE_SIZE)
def generate_floating_shapes(
    count: int,
    seed: int = DEFAULT_SHAPES_SEED,
    width: float = 1920,
    height: float = 1080,
) -> tuple[FloatingShape, ...]:
    """Large, faint background shapes."""
    _check_count(count)
    shapes = []
    for i in range(count):
        r = SeededSequence(seed + i * SHAPES_STRIDE)
        shapes.append(
            FloatingShape(
                id=f"shape-{i}",
                type=_SHAPE_TYPES[r.choice_index(len(_SHAPE_TYPES), 0)],
                x=r.next(1) * width,
                y=r.next(2) * height,
                size=30 + r.next(3) * 80,
                speed=0.2 + r.next(4) * 0.3,
                phase=r.next(5) * math.pi * 2,
                opacity=0.03 + r.next(6) * 0.05,
                color_index=r.choice_index(SHAPE_COLOR_COUNT, 7),
            )
        )
    logger.debug(f"Generated {count} floating shapes (seed={seed})")
    return tuple(shapes)


def clear_particle_cache() -> None:
    """Drop all cached generator output."""
    for fn in (generate_ambient, generate_confetti, generate_sparkles, generate_floating_shapes):
        fn.cache_clear()
