"""Deterministic pseudo-random values derived from integer seeds.

Every procedural subsystem (particles, jitter, layout variety) draws from
here, so colours, positions and delays are reproducible across runs,
threads and call order. The default algorithm is the sine hash
``frac(sin(seed) * 10000)``; SplitMix64 is available as an opt-in for
callers that need integer-exact reproducibility across platforms.
"""

from __future__ import annotations

import math
from typing import Literal

from motionbeat.core.errors import InvalidConfigurationError
from motionbeat.core.utils.math import frac

SeedAlgorithm = Literal["sine", "splitmix64"]

DEFAULT_STRIDE = 1000

_MASK64 = (1 << 64) - 1


def seeded_random(seed: float) -> float:
    """Return a deterministic value in [0, 1) for ``seed``.

    Args:
        seed: Any finite number. Integers are the normal case.

    Returns:
        ``frac(sin(seed) * 10000)``

    Raises:
        InvalidConfigurationError: If seed is NaN or infinite.

    Example:
        >>> seeded_random(42) == frac(math.sin(42) * 10000)
        True
    """
    if not math.isfinite(seed):
        raise InvalidConfigurationError(f"seed must be finite, got {seed}")
    value = frac(math.sin(seed) * 10000)
    # frac can land on 1.0 through float rounding of x - floor(x) for tiny negatives
    return 0.0 if value >= 1.0 else value


def splitmix64(seed: int) -> float:
    """SplitMix64 hash of ``seed`` mapped to [0, 1) with 53 bits of precision."""
    z = (seed + 0x9E3779B97F4A7C15) & _MASK64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
    z ^= z >> 31
    return (z >> 11) * (1.0 / (1 << 53))


class SeededSequence:
    """A reproducible stream of values in [0, 1).

    ``stream(count)`` draws ``next`` at ``seed + i * stride`` so that
    neighbouring items are decorrelated. Instances hold no mutable state:
    the same call always returns the same value.

    Args:
        seed: Base seed.
        stride: Decorrelation constant K between stream items.
        algorithm: "sine" (reference formula) or "splitmix64".
    """

    def __init__(
        self,
        seed: int,
        stride: int = DEFAULT_STRIDE,
        algorithm: SeedAlgorithm = "sine",
    ) -> None:
        if algorithm not in ("sine", "splitmix64"):
            raise InvalidConfigurationError(f"Unknown seed algorithm: {algorithm!r}")
        if algorithm == "splitmix64" and not isinstance(seed, int):
            raise InvalidConfigurationError("splitmix64 requires an integer seed")
        self.seed = seed
        self.stride = stride
        self.algorithm = algorithm

    def __repr__(self) -> str:
        return f"SeededSequence(seed={self.seed}, stride={self.stride}, algorithm={self.algorithm!r})"

    def _draw(self, seed: float) -> float:
        if self.algorithm == "splitmix64":
            return splitmix64(int(seed))
        return seeded_random(seed)

    def next(self, offset: int = 0) -> float:
        """Value for ``seed + offset``."""
        return self._draw(self.seed + offset)

    def stream(self, count: int) -> list[float]:
        """``count`` values drawn at ``seed + i * stride``."""
        if count < 0:
            raise InvalidConfigurationError(f"count must be >= 0, got {count}")
        return [self._draw(self.seed + i * self.stride) for i in range(count)]

    def uniform(self, low: float, high: float, offset: int = 0) -> float:
        """Value scaled to [low, high)."""
        return low + self.next(offset) * (high - low)

    def choice_index(self, n: int, offset: int = 0) -> int:
        """Integer in [0, n)."""
        return math.floor(self.next(offset) * n)

    def child(self, i: int) -> SeededSequence:
        """Sequence rooted at the i-th stream seed (``seed + i * stride``)."""
        return SeededSequence(self.seed + i * self.stride, self.stride, self.algorithm)


def jitter(seed: float, amount: float = 2.0) -> tuple[float, float]:
    """Deterministic micro-offset for a hand-drawn feel, in [-amount, amount]."""
    return (math.sin(seed * 12.9898) * amount, math.cos(seed * 78.233) * amount)


def wobble(seed: float, degrees: float = 0.5) -> float:
    """Deterministic small rotation in [-degrees, degrees]."""
    return math.sin(seed * 43758.5453) * degrees
