"""Tests for collision-free placement."""

from __future__ import annotations

import itertools

import pytest

from motionbeat.core.errors import InvalidConfigurationError, LayoutOverflow
from motionbeat.core.layout import (
    BoundingBox,
    BoxShape,
    CollisionLayout,
    Constraints,
    LayoutConfig,
    Severity,
    Stage,
    detect_collisions,
)
from motionbeat.core.layout.geometry import Footprint, footprints_overlap


def _box(box_id: str, x: float, y: float, w: float = 100, h: float = 100, **kwargs) -> BoundingBox:
    return BoundingBox(id=box_id, x=x, y=y, width=w, height=h, **kwargs)


def _assert_clear(boxes: list[BoundingBox], result, min_pad: float) -> None:
    by_id = {b.id: b for b in boxes}
    footprints = {
        box_id: Footprint.of(p.shape, p.x, p.y, p.width, p.height, by_id[box_id].padding + min_pad / 2)
        for box_id, p in result.positions.items()
    }
    for a, b in itertools.combinations(footprints, 2):
        assert not footprints_overlap(footprints[a], footprints[b]), (a, b)


class TestPlace:
    """Tests for CollisionLayout.place()."""

    def test_flexible_boxes_spread_without_overlap(self):
        """Crowded flexible requests are nudged apart by at least min_pad."""
        config = LayoutConfig(grid=64, max_nudges=3, min_pad=12)
        boxes = [_box(f"b{i}", 960, 540, flexible=True) for i in range(4)]
        result = CollisionLayout(config).place(boxes)
        assert not result.diagnostics
        _assert_clear(boxes, result, config.min_pad)
        assert result["b0"].moved is False
        assert (result["b1"].x, result["b1"].y) == (1088, 540)

    def test_output_keeps_input_order(self):
        """Positions are keyed in input order regardless of priority."""
        boxes = [_box("low", 100, 100, flexible=True), _box("high", 500, 500, priority=9)]
        assert list(CollisionLayout().place(boxes).positions) == ["low", "high"]

    def test_priority_wins_the_requested_spot(self):
        """The higher-priority box keeps its position even when listed later."""
        boxes = [
            _box("first", 960, 540, flexible=True, priority=0),
            _box("important", 960, 540, flexible=True, priority=5),
        ]
        result = CollisionLayout().place(boxes)
        assert result["important"].moved is False
        assert result["first"].moved is True

    def test_fixed_boxes_never_move(self):
        """Non-flexible boxes are placed as requested, before flexible ones."""
        boxes = [
            _box("flex", 960, 540, flexible=True, priority=100),
            _box("fixed", 960, 540),
        ]
        result = CollisionLayout().place(boxes)
        assert (result["fixed"].x, result["fixed"].y) == (960, 540)
        assert result["flex"].moved is True

    def test_idempotent(self):
        """Re-placing the resolved positions changes nothing."""
        config = LayoutConfig(grid=64, max_nudges=3)
        boxes = [_box(f"b{i}", 960, 540, flexible=True) for i in range(4)]
        layout = CollisionLayout(config)
        first = layout.place(boxes)
        again = layout.place(
            [b.model_copy(update={"x": first[b.id].x, "y": first[b.id].y}) for b in boxes]
        )
        assert again.centres() == first.centres()
        assert not any(p.moved for p in again.positions.values())

    def test_overflow_reports_minimal_overlap(self):
        """Without a clear candidate the least-overlap one is used and reported."""
        config = LayoutConfig(max_nudges=0)
        boxes = [_box("a", 960, 540), _box("b", 960, 540, flexible=True)]
        result = CollisionLayout(config).place(boxes)
        assert len(result.diagnostics) == 1
        diagnostic = result.diagnostics[0]
        assert isinstance(diagnostic, LayoutOverflow)
        assert diagnostic.element_id == "b"
        assert diagnostic.overlapping_ids == ("a",)
        assert diagnostic.overlap_area > 0
        assert result["b"].overlap_area == diagnostic.overlap_area

    def test_alternatives_tried_after_nudges(self):
        """An alternative anchor is used when nudges are exhausted."""
        config = LayoutConfig(max_nudges=0)
        boxes = [_box("a", 960, 540), _box("b", 960, 540, flexible=True, alternatives=((300, 300),))]
        result = CollisionLayout(config).place(boxes)
        assert (result["b"].x, result["b"].y) == (300, 300)
        assert not result.diagnostics

    def test_constraints_filter_candidates(self):
        """Candidates outside the constraint box are skipped."""
        config = LayoutConfig(grid=64, max_nudges=3)
        boxes = [
            _box("a", 960, 540),
            _box("b", 960, 540, flexible=True, constraints=Constraints(max_x=960)),
        ]
        result = CollisionLayout(config).place(boxes)
        assert result["b"].x <= 960

    def test_clamped_to_stage(self):
        """Boxes are pulled fully onto the stage."""
        result = CollisionLayout(stage=Stage(width=800, height=600)).place(
            [_box("edge", 10, 590, flexible=True)]
        )
        assert (result["edge"].x, result["edge"].y) == (50, 550)
        assert result["edge"].moved is True

    def test_disjoint_time_windows_do_not_collide(self):
        """Boxes never on screen together may share a position."""
        boxes = [
            _box("early", 960, 540, start_frame=0, end_frame=30),
            _box("late", 960, 540, flexible=True, start_frame=30, end_frame=60),
        ]
        result = CollisionLayout().place(boxes)
        assert result["late"].moved is False

    def test_duplicate_ids_rejected(self):
        """Box ids must be unique."""
        with pytest.raises(InvalidConfigurationError):
            CollisionLayout().place([_box("a", 0, 0), _box("a", 500, 500)])

    def test_ellipses_pack_closer_than_rects(self):
        """A circle tucked against a rect corner does not count as overlap."""
        config = LayoutConfig(min_pad=0, max_nudges=0)
        boxes = [
            _box("rect", 100, 100, w=100, h=100),
            _box("circle", 190, 190, w=100, h=100, shape=BoxShape.ELLIPSE, flexible=True),
        ]
        result = CollisionLayout(config).place(boxes)
        assert result["circle"].moved is False
        assert not result.diagnostics


class TestDetectCollisions:
    """Tests for pairwise collision reporting."""

    def test_severity_levels(self):
        """Overlap share of the smaller box decides the severity."""
        boxes = [_box("a", 500, 500), _box("b", 500, 500), _box("c", 590, 800), _box("d", 500, 800)]
        collisions = {(c.element_a, c.element_b): c for c in detect_collisions(boxes)}
        assert collisions[("a", "b")].severity == Severity.CRITICAL
        assert collisions[("a", "b")].overlap_percentage == 100.0
        assert collisions[("c", "d")].severity == Severity.MINOR
        assert collisions[("c", "d")].overlap_area == pytest.approx(1000.0)

    def test_min_severity_filter(self):
        """Collisions below min_severity are dropped."""
        boxes = [_box("c", 590, 800), _box("d", 500, 800)]
        assert detect_collisions(boxes, min_severity="warning") == []

    def test_timing_check(self):
        """Boxes with disjoint windows only collide when timing is ignored."""
        boxes = [_box("a", 0, 0, start_frame=0, end_frame=10), _box("b", 0, 0, start_frame=10, end_frame=20)]
        assert detect_collisions(boxes) == []
        assert len(detect_collisions(boxes, check_timing=False)) == 1
