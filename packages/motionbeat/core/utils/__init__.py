"""Shared utilities for motionbeat."""

from motionbeat.core.utils.json import dumps_json, read_json, write_json
from motionbeat.core.utils.math import clamp, frac, lerp, round_half_up, wrap

__all__ = [
    "clamp",
    "dumps_json",
    "frac",
    "lerp",
    "read_json",
    "round_half_up",
    "wrap",
    "write_json",
]
