"""Named easing curves.

Every easing is a pure time warp ``[0, 1] -> [0, 1]`` defined as a CSS-style
cubic bezier with fixed endpoints (0, 0) and (1, 1). Overshoot curves such
as ``backOut`` exceed [0, 1] mid-flight; the endpoints are always
exact.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from motionbeat.core.errors import InvalidConfigurationError

EasingFn = Callable[[float], float]

_NEWTON_ITERATIONS = 8
_NEWTON_MIN_SLOPE = 1e-6
_PRECISION = 1e-7
_BISECTION_MAX_ITERATIONS = 60


class EasingName(str, Enum):
    """Identifiers for built-in easings."""

    LINEAR = "linear"
    SMOOTH = "smooth"
    POWER2_IN = "power2In"
    POWER2_OUT = "power2Out"
    POWER2_IN_OUT = "power2InOut"
    POWER3_IN = "power3In"
    POWER3_OUT = "power3Out"
    POWER3_IN_OUT = "power3InOut"
    BACK_OUT = "backOut"

    # Bouncy & elastic
    SOFT = "soft"
    BOUNCE = "bounce"
    ELASTIC = "elastic"
    SNAP = "snap"

    # Hand-drawn feel
    PENCIL = "pencil"
    MARKER = "marker"
    CHALK = "chalk"
    BRUSH = "brush"

    # Organic
    WOBBLE = "wobble"
    BREATHE = "breathe"
    SETTLE = "settle"
    FLOAT = "float"


@dataclass(frozen=True)
class CubicBezier:
    """Cubic bezier time warp through (0,0), (x1,y1), (x2,y2), (1,1).

    x1 and x2 must lie in [0, 1] so that x(u) is monotonic and every t maps
    to exactly one curve parameter.
    """

    x1: float
    y1: float
    x2: float
    y2: float

    def __post_init__(self) -> None:
        if not (0.0 <= self.x1 <= 1.0 and 0.0 <= self.x2 <= 1.0):
            raise InvalidConfigurationError(
                f"bezier x control points must be in [0, 1], got x1={self.x1}, x2={self.x2}"
            )

    @property
    def is_linear(self) -> bool:
        return self.x1 == self.y1 and self.x2 == self.y2

    @staticmethod
    def _coord(u: float, a1: float, a2: float) -> float:
        # Horner form of 3(1-u)^2 u a1 + 3(1-u) u^2 a2 + u^3
        a = 1.0 - 3.0 * a2 + 3.0 * a1
        b = 3.0 * a2 - 6.0 * a1
        c = 3.0 * a1
        return ((a * u + b) * u + c) * u

    @staticmethod
    def _slope(u: float, a1: float, a2: float) -> float:
        a = 1.0 - 3.0 * a2 + 3.0 * a1
        b = 3.0 * a2 - 6.0 * a1
        c = 3.0 * a1
        return 3.0 * a * u * u + 2.0 * b * u + c

    def parameter_for(self, x: float) -> float:
        """Solve x(u) = x for the curve parameter u."""
        guess = x
        for _ in range(_NEWTON_ITERATIONS):
            slope = self._slope(guess, self.x1, self.x2)
            if abs(slope) < _NEWTON_MIN_SLOPE:
                break
            error = self._coord(guess, self.x1, self.x2) - x
            if abs(error) < _PRECISION:
                return guess
            guess -= error / slope
        if 0.0 <= guess <= 1.0 and abs(self._coord(guess, self.x1, self.x2) - x) < _PRECISION:
            return guess

        low, high = 0.0, 1.0
        mid = x
        for _ in range(_BISECTION_MAX_ITERATIONS):
            mid = (low + high) / 2.0
            error = self._coord(mid, self.x1, self.x2) - x
            if abs(error) < _PRECISION:
                break
            if error > 0.0:
                high = mid
            else:
                low = mid
        return mid

    def __call__(self, t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        if self.is_linear:
            return t
        return self._coord(self.parameter_for(t), self.y1, self.y2)


EASING_CURVES: dict[EasingName, CubicBezier] = {
    EasingName.LINEAR: CubicBezier(0.0, 0.0, 1.0, 1.0),
    # Default for most things - natural, material-style ease
    EasingName.SMOOTH: CubicBezier(0.4, 0.0, 0.2, 1.0),
    EasingName.POWER2_IN: CubicBezier(0.11, 0.0, 0.5, 0.0),
    # Gentle landings - secondary reveals, UI settles
    EasingName.POWER2_OUT: CubicBezier(0.0, 0.0, 0.2, 1.0),
    # Calm in-out for camera pans and big moves
    EasingName.POWER2_IN_OUT: CubicBezier(0.45, 0.0, 0.55, 1.0),
    # Confident exits / compressions
    EasingName.POWER3_IN: CubicBezier(0.55, 0.0, 1.0, 0.45),
    EasingName.POWER3_OUT: CubicBezier(0.33, 1.0, 0.68, 1.0),
    # Punchier S-curve for hero entrances
    EasingName.POWER3_IN_OUT: CubicBezier(0.65, 0.0, 0.35, 1.0),
    # Tiny overshoot for emphasis pops
    EasingName.BACK_OUT: CubicBezier(0.175, 0.885, 0.32, 1.275),
    EasingName.SOFT: CubicBezier(0.2, 0.8, 0.2, 1.0),
    EasingName.BOUNCE: CubicBezier(0.68, -0.55, 0.265, 1.55),
    EasingName.ELASTIC: CubicBezier(0.1, 0.8, 0.2, 1.4),
    EasingName.SNAP: CubicBezier(0.25, 0.46, 0.45, 1.94),
    EasingName.PENCIL: CubicBezier(0.6, 0.04, 0.2, 1.0),
    EasingName.MARKER: CubicBezier(0.25, 0.1, 0.25, 1.0),
    EasingName.CHALK: CubicBezier(0.33, 1.0, 0.68, 1.0),
    EasingName.BRUSH: CubicBezier(0.42, 0.0, 0.58, 1.0),
    EasingName.WOBBLE: CubicBezier(0.36, 0.07, 0.19, 0.97),
    EasingName.BREATHE: CubicBezier(0.37, 0.0, 0.63, 1.0),
    EasingName.SETTLE: CubicBezier(0.32, 0.94, 0.6, 1.0),
    EasingName.FLOAT: CubicBezier(0.25, 0.46, 0.45, 0.94),
}


def list_easings() -> list[str]:
    """Names of all registered easings."""
    return [name.value for name in EASING_CURVES]


def is_easing(name: str) -> bool:
    try:
        EasingName(name)
    except ValueError:
        return False
    return True


@lru_cache(maxsize=None)
def get_easing(name: str) -> CubicBezier:
    """Look up an easing by name.

    Raises:
        InvalidConfigurationError: If the name is not registered.
    """
    try:
        return EASING_CURVES[EasingName(name)]
    except ValueError:
        raise InvalidConfigurationError(
            f"Unknown easing {name!r}. Available: {', '.join(list_easings())}"
        ) from None


def ease(name: str) -> EasingFn:
    """Return the time-warp function for ``name``.

    Example:
        >>> ease("linear")(0.25)
        0.25
    """
    return get_easing(name)


class EasingLibrary:
    """Facade over the easing registry."""

    names = staticmethod(list_easings)
    get = staticmethod(get_easing)

    @staticmethod
    def evaluate(name: str, t: float) -> float:
        return get_easing(name)(t)
