"""Tests for connector routing."""

from __future__ import annotations

from motionbeat.core.errors import UnresolvedReference
from motionbeat.core.layout import (
    BoundingBox,
    CollisionLayout,
    Connector,
    LayoutConfig,
    RouteKind,
    Stage,
    route_connectors,
)
from motionbeat.core.layout.connectors import grid_path, rect_anchors
from motionbeat.core.layout.geometry import Rect, polyline_hits_rect


def _layout(*boxes: BoundingBox):
    return CollisionLayout().place(list(boxes))


def test_rect_anchors_order():
    """Edge midpoints first, then corners."""
    anchors = rect_anchors(Rect(0, 0, 10, 20))
    assert anchors[:4] == [(5, 0), (10, 10), (5, 20), (0, 10)]
    assert anchors[4:] == [(10, 0), (10, 20), (0, 20), (0, 0)]


def test_unobstructed_connector_is_an_elbow():
    """Two boxes with nothing between them connect with an elbow."""
    layout = _layout(
        BoundingBox(id="a", x=300, y=300, width=100, height=100),
        BoundingBox(id="b", x=900, y=700, width=100, height=100),
    )
    result = route_connectors(layout, [Connector(id="c", from_id="a", to_id="b")])
    routed = result.connectors[0]
    assert routed.route == RouteKind.ELBOW
    assert routed.polyline[0] in rect_anchors(Rect(250, 250, 100, 100))
    assert routed.polyline[-1] in rect_anchors(Rect(850, 650, 100, 100))


def test_routes_avoid_other_boxes():
    """Non-straight routes keep clear of every other (inflated) box."""
    config = LayoutConfig()
    layout = _layout(
        BoundingBox(id="a", x=200, y=540, width=100, height=100),
        BoundingBox(id="wall", x=960, y=540, width=120, height=900),
        BoundingBox(id="b", x=1700, y=540, width=100, height=100),
    )
    result = route_connectors(layout, [Connector(id="c", from_id="a", to_id="b")], config)
    routed = result.connectors[0]
    assert routed.route != RouteKind.STRAIGHT
    wall = layout["wall"]
    clearance = config.min_pad + config.stroke / 2
    obstacle = Rect(wall.left, wall.top, wall.width, wall.height).inflate(clearance)
    assert not polyline_hits_rect(list(routed.polyline), obstacle)


def test_unknown_box_is_reported_and_skipped():
    """A dangling connector is a diagnostic; the others still route."""
    layout = _layout(
        BoundingBox(id="a", x=300, y=300, width=100, height=100),
        BoundingBox(id="b", x=900, y=300, width=100, height=100),
    )
    result = route_connectors(
        layout,
        [Connector(id="bad", from_id="a", to_id="ghost"), Connector(id="ok", from_id="a", to_id="b")],
    )
    assert [c.id for c in result.connectors] == ["ok"]
    assert len(result.diagnostics) == 1
    diagnostic = result.diagnostics[0]
    assert isinstance(diagnostic, UnresolvedReference)
    assert (diagnostic.element_id, diagnostic.reference) == ("bad", "ghost")


def test_grid_path_goes_around_obstacle():
    """A* finds a path that never enters the obstacle."""
    obstacle = Rect(250, 0, 100, 300)
    path = grid_path((50, 50), (550, 50), Stage(width=1000, height=1000), 50, [obstacle])
    assert path is not None
    assert path[0] == (50, 50)
    assert path[-1] == (550, 50)
    assert not polyline_hits_rect(path, obstacle)


def test_grid_path_none_when_blocked():
    """No path exists when everything is blocked."""
    stage = Stage(width=500, height=500)
    assert grid_path((25, 25), (475, 475), stage, 50, [Rect(0, 0, 500, 500)]) is None
