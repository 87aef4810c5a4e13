"""Tests for transition presentations and timing."""

from __future__ import annotations

import pytest

from motionbeat.core.composition import TransitionEasing, TransitionSpec, presentation_for, transition_progress


@pytest.mark.parametrize(
    "spec,kind,edge",
    [
        ({"style": "fade"}, "fade", None),
        ({"style": "slide", "direction": "up"}, "slide", "from-top"),
        ({"style": "slide-reverse", "direction": "left"}, "slide", "from-right"),
        ({"style": "slide-up"}, "slide", "from-top"),
        ({"style": "slide-down"}, "slide", "from-bottom"),
        ({"style": "wipe", "axis": "vertical"}, "wipe", "from-top"),
        ({"style": "wipe-reverse"}, "wipe", "from-right"),
        ({"style": "clock"}, "clock-wipe", None),
        ({"style": "iris"}, "iris", None),
    ],
)
def test_presentation_for(spec, kind, edge):
    """Each style maps to one renderer-facing effect."""
    presentation = presentation_for(TransitionSpec.model_validate(spec))
    assert (presentation.kind, presentation.entry_edge) == (kind, edge)


def test_none_has_no_presentation():
    """style='none' is a hard cut."""
    assert presentation_for(TransitionSpec(style="none")) is None


def test_linear_progress():
    """Linear timing is k / duration."""
    assert transition_progress(5, 20, TransitionEasing.LINEAR, 30) == 0.25


@pytest.mark.parametrize("easing", list(TransitionEasing))
def test_progress_endpoints(easing):
    """Progress is 0 at the start of the overlap and 1 at its end."""
    assert transition_progress(0, 18, easing, 30) == 0.0
    assert transition_progress(18, 18, easing, 30) == 1.0
    assert transition_progress(0, 0, easing, 30) == 1.0
    for k in range(19):
        assert 0.0 <= transition_progress(k, 18, easing, 30) <= 1.0
