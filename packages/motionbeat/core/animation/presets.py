"""Preset evaluators.

Each preset is a pure function ``(frame, fps, config) -> AnimationState``.
Windows are converted from seconds to frames with :func:`to_frames`, and
every interpolation clamps on both ends, so frames before ``start`` give
the "before" state and frames after the window hold the final state.
"""

from __future__ import annotations

import math

from motionbeat.core.animation.models import (
    AnimationState,
    BreatheConfig,
    DrawOnPathConfig,
    FadeDownOutConfig,
    FadeUpInConfig,
    HighlightSwipeConfig,
    PopInSpringConfig,
    PulseEmphasisConfig,
    ShrinkToCornerConfig,
    SlideInLeftConfig,
    SlideInRightConfig,
    WindowedConfig,
)
from motionbeat.core.curves.interpolate import interpolate
from motionbeat.core.curves.spring import spring_progress
from motionbeat.core.timing.beats import to_frames


def _window(config: WindowedConfig, fps: float) -> tuple[int, int]:
    return to_frames(config.start, fps), to_frames(config.start + config.dur, fps)


# ==================== ENTRANCES ====================


def fade_up_in(frame: float, fps: float, config: FadeUpInConfig) -> AnimationState:
    """Fade in while rising ``dist`` px into place."""
    window = _window(config, fps)
    return AnimationState(
        opacity=interpolate(frame, window, (0.0, 1.0), config.ease),
        translate_y=interpolate(frame, window, (config.dist, 0.0), config.ease),
    )


def slide_in_left(frame: float, fps: float, config: SlideInLeftConfig) -> AnimationState:
    window = _window(config, fps)
    return AnimationState(
        opacity=interpolate(frame, window, (0.0, 1.0), config.ease),
        translate_x=interpolate(frame, window, (-config.dist, 0.0), config.ease),
    )


def slide_in_right(frame: float, fps: float, config: SlideInRightConfig) -> AnimationState:
    window = _window(config, fps)
    return AnimationState(
        opacity=interpolate(frame, window, (0.0, 1.0), config.ease),
        translate_x=interpolate(frame, window, (config.dist, 0.0), config.ease),
    )


def pop_in_spring(frame: float, fps: float, config: PopInSpringConfig) -> AnimationState:
    """Spring scale 0 -> 1 with overshoot; opacity leads the scale."""
    start_frame = to_frames(config.start, fps)
    if frame < start_frame:
        return AnimationState(opacity=0.0, scale=0.0)

    progress = spring_progress(
        frame - start_frame,
        fps,
        mass=config.mass,
        stiffness=config.stiffness,
        damping=config.damping,
    )
    return AnimationState(opacity=min(progress * 1.5, 1.0), scale=progress)


# ==================== EMPHASIS ====================


def pulse_emphasis(frame: float, fps: float, config: PulseEmphasisConfig) -> AnimationState:
    """Scale up to ``1 + amount`` and back within the window."""
    start_frame, end_frame = _window(config, fps)
    mid_frame = to_frames(config.start + config.dur / 2, fps)
    peak = 1.0 + config.amount

    if frame < start_frame or frame > end_frame:
        return AnimationState(scale=1.0)
    if frame < mid_frame:
        return AnimationState(scale=interpolate(frame, (start_frame, mid_frame), (1.0, peak), config.ease))
    return AnimationState(scale=interpolate(frame, (mid_frame, end_frame), (peak, 1.0), config.ease))


def breathe(frame: float, fps: float, config: BreatheConfig) -> AnimationState:
    """Endless sine scale loop from ``start``."""
    start_frame = to_frames(config.start, fps)
    if frame < start_frame:
        return AnimationState(scale=1.0)

    loop_frames = max(1, to_frames(config.loop, fps))
    progress = ((frame - start_frame) % loop_frames) / loop_frames
    return AnimationState(scale=1.0 + math.sin(progress * math.pi * 2) * config.amount)


# ==================== EXITS ====================


def fade_down_out(frame: float, fps: float, config: FadeDownOutConfig) -> AnimationState:
    """Fade out while sinking ``dist`` px and drifting ``dist_x`` px sideways."""
    window = _window(config, fps)
    translate_x = None
    if config.dist_x:
        translate_x = interpolate(frame, window, (0.0, config.dist_x), config.ease)
    return AnimationState(
        opacity=interpolate(frame, window, (1.0, 0.0), config.ease),
        translate_x=translate_x,
        translate_y=interpolate(frame, window, (0.0, config.dist), config.ease),
    )


# ==================== COMPLEX ====================


def draw_on_path(frame: float, fps: float, config: DrawOnPathConfig) -> AnimationState:
    """Stroke-dash reveal of a path of known ``length``."""
    progress = interpolate(frame, _window(config, fps), (0.0, 1.0), config.ease)
    return AnimationState(progress=progress, dash_offset=config.length * (1.0 - progress))


def shrink_to_corner(frame: float, fps: float, config: ShrinkToCornerConfig) -> AnimationState:
    window = _window(config, fps)
    target_x, target_y = config.target_pos
    return AnimationState(
        scale=interpolate(frame, window, (1.0, config.target_scale), config.ease),
        translate_x=interpolate(frame, window, (0.0, target_x), config.ease),
        translate_y=interpolate(frame, window, (0.0, target_y), config.ease),
    )


def highlight_swipe(frame: float, fps: float, config: HighlightSwipeConfig) -> AnimationState:
    """Growing clip width for a marker-style highlight."""
    progress = interpolate(frame, _window(config, fps), (0.0, 1.0), config.ease)
    return AnimationState(progress=progress, clip_width=config.width * progress)
