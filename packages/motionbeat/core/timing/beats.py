"""Beat resolution: authored seconds to absolute frames."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence

from motionbeat.core.errors import InvalidConfigurationError
from motionbeat.core.timing.models import BeatRef, BeatRefKind, BeatValue, ResolvedBeats, validate_fps
from motionbeat.core.utils.math import round_half_up

logger = logging.getLogger(__name__)

STANDARD_BEAT_ORDER: tuple[str, ...] = ("start", "emphasis", "hold", "exit")


def to_frames(seconds: float, fps: float) -> int:
    """Convert seconds to a frame number, rounding halves up.

    Example:
        >>> to_frames(0.5, 30)
        15
    """
    fps = validate_fps(fps)
    if not math.isfinite(seconds):
        raise InvalidConfigurationError(f"seconds must be finite, got {seconds}")
    return round_half_up(seconds * fps)


def ms_to_frames(ms: float, fps: float) -> int:
    """Convert milliseconds to a frame number."""
    return to_frames(ms / 1000.0, fps)


class BeatScheduler:
    """Resolves a scene's beat map into absolute frames.

    Args:
        order: Canonical beat order. Relative beats resolve against the
            previous beat in this order.
        defaults: Fallback values (same forms as authored beats) for beats
            missing from the authored map.

    Example:
        >>> scheduler = BeatScheduler(["title", "body"], {"title": 0.5})
        >>> scheduler.resolve({"body": "+1.0"}, fps=30).frames
        {'title': 15, 'body': 45}
    """

    def __init__(
        self,
        order: Sequence[str] = (),
        defaults: Mapping[str, BeatValue] | None = None,
    ) -> None:
        if len(set(order)) != len(order):
            raise InvalidConfigurationError(f"Canonical beat order has duplicates: {list(order)}")
        self.order = tuple(order)
        self.defaults = {name: BeatRef.parse(value, name) for name, value in (defaults or {}).items()}

    def resolve(self, beat_map: Mapping[str, BeatValue] | None, fps: float) -> ResolvedBeats:
        """Resolve ``beat_map`` at ``fps``.

        Raises:
            InvalidConfigurationError: If fps <= 0 or a beat value is invalid.
        """
        fps = validate_fps(fps)
        authored = dict(beat_map or {})
        seconds: dict[str, float] = {}
        previous: float | None = None

        for name in self.order:
            if name in authored:
                ref = BeatRef.parse(authored[name], name)
            elif name in self.defaults:
                logger.debug(f"Beat {name!r} missing, using default {self.defaults[name].seconds}s")
                ref = self.defaults[name]
            else:
                logger.debug(f"Beat {name!r} missing with no default, omitted")
                continue
            previous = self._place(name, ref, previous, seconds)

        # Pass-through keys keep their authored times; relative ones chain only
        # among themselves
        previous_extra: float | None = None
        for name, raw in authored.items():
            if name in seconds or name in self.order:
                continue
            previous_extra = self._place(name, BeatRef.parse(raw, name), previous_extra, seconds, clamp=False)

        frames = {name: round_half_up(value * fps) for name, value in seconds.items()}
        logger.debug(f"Resolved {len(frames)} beats at {fps} fps")
        return ResolvedBeats(fps=fps, seconds=seconds, frames=frames)

    @staticmethod
    def _place(
        name: str,
        ref: BeatRef,
        previous: float | None,
        out: dict[str, float],
        clamp: bool = True,
    ) -> float:
        if ref.kind == BeatRefKind.RELATIVE:
            value = (previous or 0.0) + ref.seconds
        else:
            value = ref.seconds

        if clamp and previous is not None and value < previous:
            logger.warning(
                f"Beat {name!r} at {value:.3f}s precedes the previous beat at {previous:.3f}s; clamped"
            )
            value = previous
        elif value < 0:
            raise InvalidConfigurationError(f"Beat {name!r} resolves to negative time {value}s")

        out[name] = value
        return value


def resolve_standard_beats(
    beats: Mapping[str, BeatValue] | None,
    fps: float,
    start: float = 0.5,
    hold_duration: float = 1.6,
    exit_offset: float = 0.3,
    emphasis_offset: float = 0.3,
) -> ResolvedBeats:
    """Resolve the generic start/emphasis/hold/exit beats most templates use.

    Defaults cascade from ``start``: hold ends ``hold_duration`` after it,
    exit begins ``exit_offset`` after hold and emphasis lands
    ``emphasis_offset`` after start. Authored values win over defaults.
    """
    authored = dict(beats or {})
    start_s = BeatRef.parse(authored.get("start", start), "start").seconds
    defaults: dict[str, BeatValue] = {
        "start": start,
        "emphasis": start_s + emphasis_offset,
        "hold": start_s + hold_duration,
        "exit": {"delta": exit_offset},
    }
    return BeatScheduler(STANDARD_BEAT_ORDER, defaults).resolve(authored, fps)
