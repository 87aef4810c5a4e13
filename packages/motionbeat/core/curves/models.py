"""Curve primitives shared by easing previews and transition timing."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CurvePoint(BaseModel):
    """A single point on a normalized time-warp curve.

    ``t`` is normalized progress in [0, 1]. ``v`` is usually in [0, 1] too,
    but overshoot curves (backOut, bounce) briefly leave that range.

    Example:
        >>> point = CurvePoint(t=0.5, v=0.7)
        >>> point.t
        0.5
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Normalized time [0,1]")
    v: float = Field(..., description="Warped progress (may overshoot)")
