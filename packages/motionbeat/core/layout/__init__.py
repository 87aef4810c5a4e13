"""Bounding-box placement and connector routing."""

from motionbeat.core.layout.collision import (
    NUDGE_DIRECTIONS,
    CollisionLayout,
    check_overlap,
    detect_collisions,
)
from motionbeat.core.layout.connectors import rect_anchors, route_connectors
from motionbeat.core.layout.geometry import Footprint, Rect, footprints_overlap, overlap_area
from motionbeat.core.layout.models import (
    BoundingBox,
    BoxShape,
    Collision,
    Connector,
    Constraints,
    LayoutConfig,
    LayoutResult,
    Point,
    ResolvedPosition,
    RoutedConnector,
    RouteKind,
    RoutingResult,
    Severity,
    Stage,
)

__all__ = [
    "NUDGE_DIRECTIONS",
    "BoundingBox",
    "BoxShape",
    "Collision",
    "CollisionLayout",
    "Connector",
    "Constraints",
    "Footprint",
    "LayoutConfig",
    "LayoutResult",
    "Point",
    "Rect",
    "ResolvedPosition",
    "RouteKind",
    "RoutedConnector",
    "RoutingResult",
    "Severity",
    "Stage",
    "check_overlap",
    "detect_collisions",
    "footprints_overlap",
    "overlap_area",
    "rect_anchors",
    "route_connectors",
]
