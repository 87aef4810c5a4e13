"""Frame-to-value mapping used by every windowed preset."""

from __future__ import annotations

from typing import Literal

from motionbeat.core.curves.easing import EasingFn, get_easing
from motionbeat.core.errors import InvalidConfigurationError

Extrapolation = Literal["clamp", "extend"]


def interpolate(
    x: float,
    input_range: tuple[float, float],
    output_range: tuple[float, float],
    easing: str | EasingFn | None = None,
    extrapolate_left: Extrapolation = "clamp",
    extrapolate_right: Extrapolation = "clamp",
) -> float:
    """Map ``x`` from ``input_range`` onto ``output_range``.

    Progress through the input window is warped by ``easing`` (a registered
    easing name or any callable) before being mapped to the output. Outside
    the window the result is clamped to the nearest endpoint by default;
    ``"extend"`` continues the line linearly instead.

    A degenerate window (``start == end``) is a step: the first output
    before the window frame, the last output from it onwards.

    Args:
        x: Input value, usually a frame number.
        input_range: (start, end) with start <= end.
        output_range: (from, to) values.
        easing: Easing name or function applied to progress in [0, 1].
        extrapolate_left: Behaviour for x < start.
        extrapolate_right: Behaviour for x > end.

    Returns:
        Interpolated value.

    Raises:
        InvalidConfigurationError: If the input range is descending.

    Example:
        >>> interpolate(15, (10, 20), (0.0, 1.0))
        0.5
    """
    in_start, in_end = input_range
    out_start, out_end = output_range
    if in_end < in_start:
        raise InvalidConfigurationError(f"input_range must be ascending, got {input_range}")

    if in_end == in_start:
        return out_start if x < in_start else out_end

    progress = (x - in_start) / (in_end - in_start)

    if progress < 0.0:
        if extrapolate_left == "clamp":
            return out_start
        return out_start + progress * (out_end - out_start)
    if progress > 1.0:
        if extrapolate_right == "clamp":
            return out_end
        return out_start + progress * (out_end - out_start)

    if easing is not None:
        fn = get_easing(easing) if isinstance(easing, str) else easing
        progress = fn(progress)

    return out_start + progress * (out_end - out_start)
