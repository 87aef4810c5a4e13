"""Deterministic seeded randomness."""

from motionbeat.core.random.seeded import (
    SeedAlgorithm,
    SeededSequence,
    jitter,
    seeded_random,
    splitmix64,
    wobble,
)

__all__ = [
    "SeedAlgorithm",
    "SeededSequence",
    "jitter",
    "seeded_random",
    "splitmix64",
    "wobble",
]
