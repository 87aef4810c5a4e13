"""Shape geometry for placement tests.

Rectangles are tested exactly. Ellipses are tested by scaling space so the
ellipse becomes a unit circle, which is exact against axis-aligned
rectangles; ellipse pairs fall back to boundary sampling.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from motionbeat.core.layout.models import BoxShape, Point

ELLIPSE_SAMPLES = 64
_AREA_GRID = 48


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle, top-left origin."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def area(self) -> float:
        return self.w * self.h

    @property
    def center(self) -> Point:
        return (self.x + self.w / 2, self.y + self.h / 2)

    def inflate(self, pad: float) -> Rect:
        return Rect(self.x - pad, self.y - pad, self.w + pad * 2, self.h + pad * 2)

    def overlaps(self, other: Rect) -> bool:
        """Strict overlap; touching edges do not count."""
        return not (
            self.right <= other.x or other.right <= self.x or self.bottom <= other.y or other.bottom <= self.y
        )

    def intersection(self, other: Rect) -> Rect | None:
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right <= left or bottom <= top:
            return None
        return Rect(left, top, right - left, bottom - top)

    def contains_point(self, p: Point) -> bool:
        return self.x <= p[0] <= self.right and self.y <= p[1] <= self.bottom


@dataclass(frozen=True)
class Footprint:
    """A placed shape: centre plus half extents."""

    shape: BoxShape
    cx: float
    cy: float
    rx: float
    ry: float

    @classmethod
    def of(cls, shape: BoxShape, x: float, y: float, width: float, height: float, pad: float = 0.0) -> Footprint:
        return cls(shape, x, y, width / 2 + pad, height / 2 + pad)

    @property
    def bounds(self) -> Rect:
        return Rect(self.cx - self.rx, self.cy - self.ry, self.rx * 2, self.ry * 2)

    def contains(self, points: np.ndarray) -> np.ndarray:
        """Boolean mask of which (N, 2) points fall inside (boundary excluded)."""
        dx = (points[:, 0] - self.cx) / self.rx
        dy = (points[:, 1] - self.cy) / self.ry
        if self.shape == BoxShape.ELLIPSE:
            return dx * dx + dy * dy < 1.0
        return (np.abs(dx) < 1.0) & (np.abs(dy) < 1.0)

    def boundary(self, n: int = ELLIPSE_SAMPLES) -> np.ndarray:
        theta = np.linspace(0.0, 2.0 * math.pi, n, endpoint=False)
        return np.column_stack((self.cx + self.rx * np.cos(theta), self.cy + self.ry * np.sin(theta)))


def _ellipse_hits_rect(ellipse: Footprint, rect: Rect) -> bool:
    # Scale so the ellipse is a unit circle at the origin; the rect stays axis-aligned.
    left = (rect.x - ellipse.cx) / ellipse.rx
    right = (rect.right - ellipse.cx) / ellipse.rx
    top = (rect.y - ellipse.cy) / ellipse.ry
    bottom = (rect.bottom - ellipse.cy) / ellipse.ry
    nearest_x = min(max(0.0, left), right)
    nearest_y = min(max(0.0, top), bottom)
    return nearest_x * nearest_x + nearest_y * nearest_y < 1.0


def footprints_overlap(a: Footprint, b: Footprint) -> bool:
    if not a.bounds.overlaps(b.bounds):
        return False
    if a.shape == BoxShape.RECT and b.shape == BoxShape.RECT:
        return True
    if a.shape == BoxShape.ELLIPSE and b.shape == BoxShape.RECT:
        return _ellipse_hits_rect(a, b.bounds)
    if a.shape == BoxShape.RECT and b.shape == BoxShape.ELLIPSE:
        return _ellipse_hits_rect(b, a.bounds)

    centres = np.array([[a.cx, a.cy], [b.cx, b.cy]])
    if b.contains(centres[:1]).any() or a.contains(centres[1:]).any():
        return True
    return bool(b.contains(a.boundary()).any() or a.contains(b.boundary()).any())


def overlap_area(a: Footprint, b: Footprint) -> float:
    """Overlap area in px^2: exact for rect pairs, grid-sampled otherwise."""
    box = a.bounds.intersection(b.bounds)
    if box is None:
        return 0.0
    if a.shape == BoxShape.RECT and b.shape == BoxShape.RECT:
        return box.area

    xs = box.x + (np.arange(_AREA_GRID) + 0.5) * (box.w / _AREA_GRID)
    ys = box.y + (np.arange(_AREA_GRID) + 0.5) * (box.h / _AREA_GRID)
    gx, gy = np.meshgrid(xs, ys)
    points = np.column_stack((gx.ravel(), gy.ravel()))
    inside = a.contains(points) & b.contains(points)
    return float(inside.sum()) * box.area / (_AREA_GRID * _AREA_GRID)


def clamp_center(x: float, y: float, width: float, height: float, stage_w: float, stage_h: float) -> Point:
    """Keep a box of the given size on stage; oversized boxes are centred."""
    cx = stage_w / 2 if width >= stage_w else min(max(x, width / 2), stage_w - width / 2)
    cy = stage_h / 2 if height >= stage_h else min(max(y, height / 2), stage_h - height / 2)
    return (cx, cy)


# ==================== SEGMENTS ====================


def _orientation(a: Point, b: Point, c: Point) -> int:
    val = (b[1] - a[1]) * (c[0] - b[0]) - (b[0] - a[0]) * (c[1] - b[1])
    if val == 0:
        return 0
    return 1 if val > 0 else 2


def _on_segment(a: Point, b: Point, c: Point) -> bool:
    return min(a[0], c[0]) <= b[0] <= max(a[0], c[0]) and min(a[1], c[1]) <= b[1] <= max(a[1], c[1])


def segments_intersect(p1: Point, p2: Point, q1: Point, q2: Point) -> bool:
    o1 = _orientation(p1, p2, q1)
    o2 = _orientation(p1, p2, q2)
    o3 = _orientation(q1, q2, p1)
    o4 = _orientation(q1, q2, p2)

    if o1 != o2 and o3 != o4:
        return True
    return (
        (o1 == 0 and _on_segment(p1, q1, p2))
        or (o2 == 0 and _on_segment(p1, q2, p2))
        or (o3 == 0 and _on_segment(q1, p1, q2))
        or (o4 == 0 and _on_segment(q1, p2, q2))
    )


def segment_hits_rect(p1: Point, p2: Point, r: Rect) -> bool:
    if r.contains_point(p1) or r.contains_point(p2):
        return True
    corners = [(r.x, r.y), (r.right, r.y), (r.right, r.bottom), (r.x, r.bottom)]
    return any(segments_intersect(p1, p2, corners[i], corners[(i + 1) % 4]) for i in range(4))


def polyline_hits_rect(poly: list[Point], r: Rect) -> bool:
    return any(segment_hits_rect(poly[i], poly[i + 1], r) for i in range(len(poly) - 1))


def simplify_collinear(poly: list[Point]) -> list[Point]:
    """Drop interior points that continue straight in the same direction."""
    if len(poly) <= 2:
        return list(poly)
    out = [poly[0]]
    for i in range(1, len(poly) - 1):
        a, b, c = out[-1], poly[i], poly[i + 1]
        abx, aby = b[0] - a[0], b[1] - a[1]
        bcx, bcy = c[0] - b[0], c[1] - b[1]
        if abx * bcy - aby * bcx == 0:
            same_dir = _sign(abx) == _sign(bcx) and _sign(aby) == _sign(bcy)
            if same_dir:
                continue
        out.append(b)
    out.append(poly[-1])
    return out


def _sign(v: float) -> int:
    return (v > 0) - (v < 0)
