"""One emitter: generated particles plus their per-frame evaluator."""

from __future__ import annotations

from motionbeat.core.errors import InvalidConfigurationError
from motionbeat.core.particles import animators, generators
from motionbeat.core.particles.models import Particle, ParticleKind, ParticleState


class ParticleSystem:
    """Pairs a generator with its animator.

    Particles are generated (and cached) on construction; :meth:`evaluate`
    is pure in ``frame`` and ``start_frame``.

    Args:
        kind: Which generator/animator pair to use.
        count: Number of particles.
        seed: Base seed. Defaults to the kind's conventional seed.
        origin: Burst origin (confetti).
        bounds: (x, y, width, height) region (sparkles).
        canvas: (width, height) region (ambient, floating shapes).
        duration: Visible frames after the start (confetti).
        vertical_speed: Rise speed in px/frame (ambient).
        loop_height: Wrap distance in px (ambient).

    Example:
        >>> system = ParticleSystem(ParticleKind.CONFETTI, 12, origin=(960, 540))
        >>> len(system.evaluate(frame=5, start_frame=0))
        12
    """

    _DEFAULT_SEEDS = {
        ParticleKind.AMBIENT: generators.DEFAULT_AMBIENT_SEED,
        ParticleKind.CONFETTI: generators.DEFAULT_CONFETTI_SEED,
        ParticleKind.SPARKLE: generators.DEFAULT_SPARKLE_SEED,
        ParticleKind.FLOATING_SHAPE: generators.DEFAULT_SHAPES_SEED,
    }

    def __init__(
        self,
        kind: ParticleKind | str,
        count: int,
        seed: int | None = None,
        *,
        origin: tuple[float, float] = (960.0, 540.0),
        bounds: tuple[float, float, float, float] = (0.0, 0.0, 1920.0, 1080.0),
        canvas: tuple[float, float] = (1920.0, 1080.0),
        duration: float = 90,
        vertical_speed: float = 1.0,
        loop_height: float = 1200,
    ) -> None:
        try:
            self.kind = ParticleKind(kind)
        except ValueError:
            raise InvalidConfigurationError(f"Unknown particle kind {kind!r}") from None
        if loop_height <= 0:
            raise InvalidConfigurationError(f"loop_height must be > 0, got {loop_height}")
        self.seed = self._DEFAULT_SEEDS[self.kind] if seed is None else seed
        self.duration = duration
        self.vertical_speed = vertical_speed
        self.loop_height = loop_height

        if self.kind == ParticleKind.AMBIENT:
            self.particles: tuple[Particle, ...] = generators.generate_ambient(count, self.seed, *canvas)
        elif self.kind == ParticleKind.CONFETTI:
            self.particles = generators.generate_confetti(count, origin[0], origin[1], self.seed)
        elif self.kind == ParticleKind.SPARKLE:
            self.particles = generators.generate_sparkles(count, tuple(bounds), self.seed)
        else:
            self.particles = generators.generate_floating_shapes(count, self.seed, *canvas)

    def __len__(self) -> int:
        return len(self.particles)

    def evaluate(self, frame: float, start_frame: float = 0) -> list[ParticleState]:
        """States for every particle at ``frame``.

        Ambient particles and floating shapes are continuous background
        motion; they ignore ``start_frame`` and are driven by ``frame``.
        """
        if self.kind == ParticleKind.AMBIENT:
            return [
                animators.animate_ambient(p, frame, self.vertical_speed, self.loop_height)
                for p in self.particles
            ]
        if self.kind == ParticleKind.CONFETTI:
            return [animators.animate_confetti(p, frame, start_frame, self.duration) for p in self.particles]
        if self.kind == ParticleKind.SPARKLE:
            return [animators.animate_sparkle(p, frame, start_frame) for p in self.particles]
        return [animators.animate_floating_shape(p, frame) for p in self.particles]
