"""Beat timing models.

A beat is authored in seconds, either absolute or relative to the beat
before it in canonical order. These models normalize the accepted authoring
forms into one :class:`BeatRef`.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from motionbeat.core.errors import InvalidConfigurationError

# Authored forms: 2.0, "+1.5", {"delta": 1.5}, {"at": 3.0}
BeatValue = Union[float, int, str, Mapping[str, float]]


class BeatRefKind(str, Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"


class BeatRef(BaseModel):
    """Canonical beat reference.

    Attributes:
        kind: ABSOLUTE (seconds from scene start) or RELATIVE (seconds after
            the previous beat in canonical order).
        seconds: Absolute time or delta, in seconds.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: BeatRefKind
    seconds: float = Field(allow_inf_nan=False)

    @model_validator(mode="after")
    def _validate_absolute_non_negative(self) -> BeatRef:
        if self.kind == BeatRefKind.ABSOLUTE and self.seconds < 0:
            raise ValueError(f"absolute beat must be >= 0 seconds, got {self.seconds}")
        return self

    @classmethod
    def parse(cls, raw: BeatValue | BeatRef, name: str = "<beat>") -> BeatRef:
        """Parse an authored beat value.

        Raises:
            InvalidConfigurationError: If the value is not one of the
                accepted forms or is out of range.
        """
        if isinstance(raw, BeatRef):
            return raw
        try:
            if isinstance(raw, bool):
                raise ValueError("booleans are not beat times")
            if isinstance(raw, (int, float)):
                return cls(kind=BeatRefKind.ABSOLUTE, seconds=float(raw))
            if isinstance(raw, str):
                text = raw.strip()
                if text.startswith(("+", "-")):
                    return cls(kind=BeatRefKind.RELATIVE, seconds=float(text))
                return cls(kind=BeatRefKind.ABSOLUTE, seconds=float(text))
            if isinstance(raw, Mapping):
                return cls._from_mapping(raw)
        except ValueError as e:
            raise InvalidConfigurationError(f"Invalid beat {name!r}={raw!r}: {e}") from None
        raise InvalidConfigurationError(f"Invalid beat {name!r}: unsupported value {raw!r}")

    @classmethod
    def _from_mapping(cls, raw: Mapping[str, Any]) -> BeatRef:
        if set(raw) == {"delta"}:
            return cls(kind=BeatRefKind.RELATIVE, seconds=float(raw["delta"]))
        if set(raw) == {"at"}:
            return cls(kind=BeatRefKind.ABSOLUTE, seconds=float(raw["at"]))
        raise ValueError("mapping must have exactly one key, 'delta' or 'at'")


class ResolvedBeats(BaseModel):
    """Absolute beat times for one scene at one frame rate.

    ``seconds`` and ``frames`` keep canonical beats first, then pass-through
    keys in authored order.
    """

    model_config = ConfigDict(frozen=True)

    fps: float = Field(gt=0)
    seconds: dict[str, float]
    frames: dict[str, int]

    def __contains__(self, name: object) -> bool:
        return name in self.frames

    def frame(self, name: str) -> int:
        """Frame for ``name``.

        Raises:
            KeyError: If the beat was never resolved.
        """
        return self.frames[name]

    def get(self, name: str, default: int | None = None) -> int | None:
        return self.frames.get(name, default)

    def names(self) -> list[str]:
        return list(self.frames)

    def is_monotonic(self, order: list[str] | None = None) -> bool:
        """Whether frames are non-decreasing across ``order`` (default: all keys)."""
        keys = [k for k in (order or list(self.frames)) if k in self.frames]
        values = [self.frames[k] for k in keys]
        return all(a <= b for a, b in zip(values, values[1:], strict=False))


def validate_fps(fps: float) -> float:
    """Reject non-positive or non-finite frame rates."""
    if isinstance(fps, bool) or not isinstance(fps, (int, float)) or not math.isfinite(fps) or fps <= 0:
        raise InvalidConfigurationError(f"fps must be a finite number > 0, got {fps!r}")
    return float(fps)
