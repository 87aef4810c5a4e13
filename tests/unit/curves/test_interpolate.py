"""Tests for frame-to-value interpolation."""

from __future__ import annotations

import pytest

from motionbeat.core.curves import ease, interpolate
from motionbeat.core.errors import InvalidConfigurationError


class TestInterpolate:
    """Tests for interpolate()."""

    def test_midpoint(self):
        """Linear mapping at the window midpoint."""
        assert interpolate(15, (10, 20), (0.0, 1.0)) == 0.5
        assert interpolate(15, (10, 20), (100.0, 0.0)) == 50.0

    def test_clamped_by_default(self):
        """Outside the window the nearest endpoint is returned."""
        assert interpolate(0, (10, 20), (0.0, 1.0)) == 0.0
        assert interpolate(99, (10, 20), (0.0, 1.0)) == 1.0

    def test_extend(self):
        """'extend' continues the line outside the window."""
        assert interpolate(5, (10, 20), (0.0, 1.0), extrapolate_left="extend") == -0.5
        assert interpolate(25, (10, 20), (0.0, 1.0), extrapolate_right="extend") == 1.5

    def test_degenerate_window_is_step(self):
        """start == end gives the first output before, the last from the frame on."""
        assert interpolate(9, (10, 10), (0.0, 1.0)) == 0.0
        assert interpolate(10, (10, 10), (0.0, 1.0)) == 1.0
        assert interpolate(11, (10, 10), (0.0, 1.0)) == 1.0

    def test_descending_range_raises(self):
        """Input ranges must be ascending."""
        with pytest.raises(InvalidConfigurationError):
            interpolate(5, (10, 0), (0.0, 1.0))

    def test_easing_by_name(self):
        """A named easing warps progress before mapping."""
        assert interpolate(15, (10, 20), (0.0, 100.0), "power2In") == pytest.approx(
            100.0 * ease("power2In")(0.5)
        )

    def test_easing_callable(self):
        """Any callable works as easing."""
        assert interpolate(15, (10, 20), (0.0, 1.0), lambda p: p * p) == 0.25

    def test_easing_not_applied_outside_window(self):
        """Extrapolated values are linear, not eased."""
        assert interpolate(
            25, (10, 20), (0.0, 1.0), "power2In", extrapolate_right="extend"
        ) == 1.5

    def test_unknown_easing_raises(self):
        """An unknown easing name raises inside the window."""
        with pytest.raises(InvalidConfigurationError):
            interpolate(15, (10, 20), (0.0, 1.0), "bogus")
