"""Shared pytest fixtures for motionbeat tests."""

from __future__ import annotations

from typing import Any

import pytest

from motionbeat.core.particles.generators import clear_particle_cache

# ============================================================================
# Descriptor Fixtures
# ============================================================================


@pytest.fixture
def scene_data() -> dict[str, Any]:
    """A six-second scene touching beats, presets, styles, layout and particles.

    Two elements carry dangling references (an unknown box and an unknown
    beat) so that diagnostics can be checked alongside the happy path.
    """
    return {
        "id": "intro",
        "template": "hook",
        "duration_s": 6.0,
        "beat_order": ["title", "subtitle", "exit"],
        "beats": {"title": 0.5, "subtitle": "+1.0", "exit": 5.0},
        "elements": [
            {
                "id": "title",
                "box": "title-box",
                "animations": [{"preset": "fadeUpIn", "start": "title", "dur": 0.5}],
            },
            {
                "id": "subtitle",
                "animations": [{"preset": "slideInLeft", "start": "subtitle+0.2", "dur": 0.5}],
            },
            {"id": "ghost", "box": "missing-box"},
            {
                "id": "late",
                "animations": [{"preset": "fadeUpIn", "start": "never", "dur": 0.5}],
            },
            {"id": "styled", "style": {"name": "bouncy", "enter": "title", "exit": "exit"}},
        ],
        "emitters": [
            {"id": "burst", "kind": "confetti", "count": 10, "start": "subtitle", "anchor_box": "title-box"},
            {"id": "motes", "kind": "ambient", "count": 5},
        ],
        "layout": {
            "boxes": [{"id": "title-box", "x": 960, "y": 200, "width": 800, "height": 120}],
            "connectors": [],
        },
    }


@pytest.fixture
def video_data() -> dict[str, Any]:
    """Three bare scenes of 15s, 20s and 16.667s at 30 fps."""
    return {
        "id": "explainer",
        "default_transition_frames": 30,
        "scenes": [
            {"scene": {"id": "a", "duration_s": 15}, "transition": {"style": "fade", "easing": "linear"}},
            {"scene": {"id": "b", "duration_s": 20}, "transition_frames": 40},
            {"scene": {"id": "c", "duration_s": 16.667}},
        ],
    }


@pytest.fixture(autouse=True)
def _fresh_particle_cache():
    """Keep generator caches from leaking between tests."""
    clear_particle_cache()
    yield
    clear_particle_cache()
