"""Tests for style bundles and stagger."""

from __future__ import annotations

import pytest

from motionbeat.core.animation import (
    STYLE_BUNDLES,
    StaggerDirection,
    entrance_config,
    evaluate_preset,
    exit_config,
    resolve_style,
    stagger_delay,
)
from motionbeat.core.animation.models import (
    FadeDownOutConfig,
    FadeUpInConfig,
    PopInSpringConfig,
    ShrinkToCornerConfig,
    SlideInLeftConfig,
)
from motionbeat.core.errors import InvalidConfigurationError


class TestResolveStyle:
    """Tests for resolve_style()."""

    def test_known_bundles(self):
        """All five bundles exist."""
        assert set(STYLE_BUNDLES) == {"subtle", "bouncy", "dramatic", "minimal", "educational"}

    def test_unknown_falls_back_to_subtle(self):
        """Unknown or missing names give the subtle bundle."""
        assert resolve_style("nope") == STYLE_BUNDLES["subtle"]
        assert resolve_style(None) == STYLE_BUNDLES["subtle"]

    def test_partial_override_merges(self):
        """Overrides change only the keys they name."""
        bundle = resolve_style("dramatic", {"entrance": {"duration": 0.4}})
        assert bundle.entrance.duration == 0.4
        assert bundle.entrance.distance == 60
        assert bundle.exit == STYLE_BUNDLES["dramatic"].exit

    def test_continuous_life_override_replaces(self):
        """A continuous_life override replaces the value, and None turns it off."""
        assert resolve_style("bouncy", {"continuous_life": None}).continuous_life is None
        bundle = resolve_style("bouncy", {"continuous_life": {"floating": {"frequency": 0.02, "amplitude": 3}}})
        assert bundle.continuous_life.breathing is None
        assert bundle.continuous_life.floating.amplitude == 3

    def test_invalid_override_raises(self):
        """Overrides still have to validate."""
        with pytest.raises(InvalidConfigurationError):
            resolve_style("subtle", {"entrance": {"type": "teleport"}})


class TestStagger:
    """Tests for stagger_delay()."""

    def test_forward(self):
        """Delay grows with index."""
        assert [stagger_delay(0.1, i, 4) for i in range(4)] == pytest.approx([0.0, 0.1, 0.2, 0.3])

    def test_reverse(self):
        """The last item starts first."""
        assert [stagger_delay(0.1, i, 4, "reverse") for i in range(4)] == pytest.approx([0.3, 0.2, 0.1, 0.0])

    def test_center_out(self):
        """The middle item starts first, the edges last."""
        delays = [stagger_delay(0.2, i, 5, StaggerDirection.CENTER_OUT) for i in range(5)]
        assert delays == pytest.approx([0.4, 0.2, 0.0, 0.2, 0.4])


class TestBundleConfigs:
    """Tests for bundle to preset conversion."""

    def test_subtle(self):
        """Fade in without travel, fade out without travel."""
        bundle = STYLE_BUNDLES["subtle"]
        entrance = entrance_config(bundle, 1.0)
        assert isinstance(entrance, FadeUpInConfig)
        assert (entrance.start, entrance.dur, entrance.dist) == (1.0, 0.5, 0.0)
        exit_ = exit_config(bundle, 4.0)
        assert isinstance(exit_, FadeDownOutConfig)
        assert (exit_.start, exit_.dur, exit_.dist) == (4.0, 0.3, 0.0)

    def test_bouncy(self):
        """Bounce entrance uses the bouncy spring; scale out shrinks to 0."""
        bundle = STYLE_BUNDLES["bouncy"]
        entrance = entrance_config(bundle, 0.0)
        assert isinstance(entrance, PopInSpringConfig)
        assert (entrance.stiffness, entrance.damping) == (150.0, 8.0)
        exit_ = exit_config(bundle, 2.0)
        assert isinstance(exit_, ShrinkToCornerConfig)
        assert exit_.target_scale == 0.0

    def test_educational(self):
        """Slide in from the left, slide out to the right."""
        bundle = STYLE_BUNDLES["educational"]
        entrance = entrance_config(bundle, 0.0)
        assert isinstance(entrance, SlideInLeftConfig)
        assert entrance.dist == 40
        exit_ = exit_config(bundle, 2.0)
        assert isinstance(exit_, FadeDownOutConfig)
        assert (exit_.dist, exit_.dist_x) == (0.0, 40.0)

    def test_horizontal_slide_out_ends_invisible(self):
        """A sideways slide-out fades to 0 while drifting its full distance."""
        exit_ = exit_config(STYLE_BUNDLES["educational"], 2.0)
        end = evaluate_preset(90, 30, exit_)
        assert (end.opacity, end.translate_x, end.translate_y) == (0.0, 40.0, 0.0)
        before = evaluate_preset(0, 30, exit_)
        assert (before.opacity, before.translate_x) == (1.0, 0.0)

    def test_dramatic(self):
        """Fade-slide up uses the bundle's distance."""
        entrance = entrance_config(STYLE_BUNDLES["dramatic"], 0.5)
        assert isinstance(entrance, FadeUpInConfig)
        assert (entrance.dist, entrance.dur) == (60.0, 0.8)
