"""Deterministic decorative particles."""

from motionbeat.core.particles.animators import (
    CONFETTI_PALETTE,
    DEFAULT_PALETTE,
    SPARKLE_COLOR,
    ambient_color_index,
    animate_ambient,
    animate_confetti,
    animate_floating_shape,
    animate_sparkle,
    particle_color,
)
from motionbeat.core.particles.generators import (
    clear_particle_cache,
    generate_ambient,
    generate_confetti,
    generate_floating_shapes,
    generate_sparkles,
)
from motionbeat.core.particles.models import (
    AmbientParticle,
    ConfettiParticle,
    FloatingShape,
    Particle,
    ParticleKind,
    ParticleState,
    ShapeType,
    SparkleParticle,
)
from motionbeat.core.particles.system import ParticleSystem

__all__ = [
    "CONFETTI_PALETTE",
    "DEFAULT_PALETTE",
    "SPARKLE_COLOR",
    "AmbientParticle",
    "ConfettiParticle",
    "FloatingShape",
    "Particle",
    "ParticleKind",
    "ParticleState",
    "ParticleSystem",
    "ShapeType",
    "SparkleParticle",
    "ambient_color_index",
    "animate_ambient",
    "animate_confetti",
    "animate_floating_shape",
    "animate_sparkle",
    "clear_particle_cache",
    "generate_ambient",
    "generate_confetti",
    "generate_floating_shapes",
    "generate_sparkles",
    "particle_color",
]
