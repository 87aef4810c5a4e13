"""Connector routing between placed boxes.

Routes are tried from cheapest to most general: an elbow between any pair
of box anchors, a dogleg around the nearest obstacle, a coarse grid A*
search, and finally a straight line.
"""

from __future__ import annotations

import heapq
import logging
import math
from collections.abc import Sequence

import numpy as np

from motionbeat.core.errors import UnresolvedReference
from motionbeat.core.layout.geometry import Rect, polyline_hits_rect, simplify_collinear
from motionbeat.core.layout.models import (
    Connector,
    LayoutConfig,
    LayoutResult,
    Point,
    ResolvedPosition,
    RoutedConnector,
    RouteKind,
    RoutingResult,
    Stage,
)

logger = logging.getLogger(__name__)


def _rect_of(position: ResolvedPosition) -> Rect:
    return Rect(position.left, position.top, position.width, position.height)


def rect_anchors(r: Rect) -> list[Point]:
    """Edge midpoints N, E, S, W, then corners NE, SE, SW, NW."""
    cx, cy = r.center
    return [
        (cx, r.y),
        (r.right, cy),
        (cx, r.bottom),
        (r.x, cy),
        (r.right, r.y),
        (r.right, r.bottom),
        (r.x, r.bottom),
        (r.x, r.y),
    ]


def _clear(poly: list[Point], obstacles: Sequence[Rect]) -> bool:
    return not any(polyline_hits_rect(poly, o) for o in obstacles)


def elbow_path(a: Point, b: Point, horizontal_first: bool) -> list[Point]:
    if horizontal_first:
        return [a, (b[0], a[1]), b]
    return [a, (a[0], b[1]), b]


def dogleg_path(a: Point, b: Point, obstacles: Sequence[Rect], grid: float) -> list[Point] | None:
    """Offset the middle run one grid step away from the nearest obstacle."""
    if not obstacles:
        return None
    mid_x = (a[0] + b[0]) / 2
    mid_y = (a[1] + b[1]) / 2
    nearest = min(
        obstacles,
        key=lambda o: (o.center[0] - mid_x) ** 2 + (o.center[1] - mid_y) ** 2,
    )
    direction = -1 if mid_y < nearest.y else 1
    offset = grid * direction
    return [a, (a[0], mid_y + offset), (b[0], mid_y + offset), b]


def grid_path(
    start: Point,
    goal: Point,
    stage: Stage,
    grid: float,
    obstacles: Sequence[Rect],
) -> list[Point] | None:
    """4-connected A* over ``grid``-sized cells, avoiding ``obstacles``."""
    cols = math.ceil(stage.width / grid) + 1
    rows = math.ceil(stage.height / grid) + 1
    blocked = np.zeros((rows, cols), dtype=bool)
    for o in obstacles:
        x0 = max(0, math.floor(o.x / grid))
        x1 = min(cols, math.ceil(o.right / grid))
        y0 = max(0, math.floor(o.y / grid))
        y1 = min(rows, math.ceil(o.bottom / grid))
        if x0 < x1 and y0 < y1:
            blocked[y0:y1, x0:x1] = True

    def cell(p: Point) -> tuple[int, int]:
        cx = min(max(math.floor(p[0] / grid), 0), cols - 1)
        cy = min(max(math.floor(p[1] / grid), 0), rows - 1)
        return (cx, cy)

    start_cell = cell(start)
    goal_cell = cell(goal)

    def h(c: tuple[int, int]) -> int:
        return abs(c[0] - goal_cell[0]) + abs(c[1] - goal_cell[1])

    open_heap: list[tuple[int, int, tuple[int, int]]] = [(h(start_cell), 0, start_cell)]
    came_from: dict[tuple[int, int], tuple[int, int] | None] = {start_cell: None}
    g_score = {start_cell: 0}

    while open_heap:
        _, g, current = heapq.heappop(open_heap)
        if g > g_score.get(current, math.inf):
            continue
        if current == goal_cell:
            cells = []
            node: tuple[int, int] | None = current
            while node is not None:
                cells.append(node)
                node = came_from[node]
            cells.reverse()
            path = [(cx * grid + grid / 2, cy * grid + grid / 2) for cx, cy in cells]
            return simplify_collinear([start, *path, goal])

        x, y = current
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if not (0 <= nx < cols and 0 <= ny < rows) or blocked[ny, nx]:
                continue
            tentative = g + 1
            if tentative < g_score.get((nx, ny), math.inf):
                g_score[(nx, ny)] = tentative
                came_from[(nx, ny)] = current
                heapq.heappush(open_heap, (tentative + h((nx, ny)), tentative, (nx, ny)))

    return None


def route_connectors(
    layout: LayoutResult,
    connectors: Sequence[Connector],
    config: LayoutConfig | None = None,
    stage: Stage | None = None,
) -> RoutingResult:
    """Route each connector between its two placed boxes.

    A connector naming a box that is not in ``layout`` is skipped and
    reported as an :class:`UnresolvedReference`; the rest still route.
    """
    config = config or LayoutConfig()
    stage = stage or Stage()
    clearance = config.min_pad + config.stroke / 2
    rects = {box_id: _rect_of(position) for box_id, position in layout.positions.items()}

    routed: list[RoutedConnector] = []
    diagnostics: list[UnresolvedReference] = []

    for connector in connectors:
        missing = next((ref for ref in (connector.from_id, connector.to_id) if ref not in rects), None)
        if missing is not None:
            diagnostic = UnresolvedReference(
                element_id=connector.id,
                reference=missing,
                message=f"Connector {connector.id!r} references unknown box {missing!r}; skipped",
            )
            logger.warning(diagnostic.message)
            diagnostics.append(diagnostic)
            continue

        from_rect = rects[connector.from_id]
        to_rect = rects[connector.to_id]
        obstacles = [
            r.inflate(clearance)
            for box_id, r in rects.items()
            if box_id not in (connector.from_id, connector.to_id)
        ]
        route, poly = _route_one(from_rect, to_rect, obstacles, config, stage)
        routed.append(
            RoutedConnector(
                id=connector.id,
                from_id=connector.from_id,
                to_id=connector.to_id,
                route=route,
                polyline=tuple(simplify_collinear(poly)),
            )
        )
        logger.debug(f"Connector {connector.id!r} routed as {route.value}")

    return RoutingResult(connectors=tuple(routed), diagnostics=tuple(diagnostics))


def _route_one(
    from_rect: Rect,
    to_rect: Rect,
    obstacles: list[Rect],
    config: LayoutConfig,
    stage: Stage,
) -> tuple[RouteKind, list[Point]]:
    from_anchors = rect_anchors(from_rect)
    to_anchors = rect_anchors(to_rect)

    for start in from_anchors:
        for end in to_anchors:
            for horizontal_first in (True, False):
                poly = elbow_path(start, end, horizontal_first)
                if _clear(poly, obstacles):
                    return RouteKind.ELBOW, poly

    start, end = from_anchors[0], to_anchors[0]
    dog = dogleg_path(start, end, obstacles, config.grid)
    if dog is not None and _clear(dog, obstacles):
        return RouteKind.DOGLEG, dog

    path = grid_path(start, end, stage, config.grid, obstacles)
    if path is not None:
        return RouteKind.GRID, path

    return RouteKind.STRAIGHT, [start, end]
