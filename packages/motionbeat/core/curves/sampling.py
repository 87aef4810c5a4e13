"""Sampling helpers for easing previews."""

from __future__ import annotations

import bezier
import numpy as np

from motionbeat.core.curves.easing import get_easing
from motionbeat.core.curves.models import CurvePoint


def sample_uniform_grid(n: int) -> list[float]:
    """Generate n uniformly spaced points in [0, 1].

    Args:
        n: Number of samples (must be >= 2).

    Returns:
        List of n floats: [0, 1/(n-1), ..., 1]

    Raises:
        ValueError: If n < 2.
    """
    if n < 2:
        raise ValueError(f"n must be >= 2, got {n}")
    return [i / (n - 1) for i in range(n)]


def sample_easing(name: str, n_samples: int = 64) -> list[CurvePoint]:
    """Sample easing ``name`` at n evenly spaced times.

    Example:
        >>> [p.v for p in sample_easing("linear", 3)]
        [0.0, 0.5, 1.0]
    """
    fn = get_easing(name)
    return [CurvePoint(t=t, v=fn(t)) for t in sample_uniform_grid(n_samples)]


def trace_easing(name: str, n_samples: int = 64) -> np.ndarray:
    """Trace the easing's bezier along its curve parameter.

    Unlike :func:`sample_easing`, the x coordinates are not evenly spaced:
    this is the curve geometry itself, useful for drawing the curve and for
    cross-checking the time-warp solver.

    Returns:
        Array of shape (2, n_samples) with x in row 0 and y in row 1.
    """
    if n_samples < 2:
        raise ValueError(f"n_samples must be >= 2, got {n_samples}")
    curve_def = get_easing(name)
    nodes = np.asfortranarray(
        [
            [0.0, curve_def.x1, curve_def.x2, 1.0],
            [0.0, curve_def.y1, curve_def.y2, 1.0],
        ]
    )
    curve = bezier.Curve(nodes, degree=3)
    return curve.evaluate_multi(np.linspace(0.0, 1.0, n_samples))
