"""Priority-ordered, overlap-avoiding placement of bounding boxes."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from motionbeat.core.errors import InvalidConfigurationError, LayoutOverflow
from motionbeat.core.layout.geometry import Footprint, clamp_center, footprints_overlap, overlap_area
from motionbeat.core.layout.models import (
    BoundingBox,
    Collision,
    LayoutConfig,
    LayoutResult,
    Point,
    ResolvedPosition,
    Severity,
    Stage,
)

logger = logging.getLogger(__name__)

# right, left, down, up
NUDGE_DIRECTIONS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _check_unique_ids(boxes: Sequence[BoundingBox]) -> None:
    seen: set[str] = set()
    for box in boxes:
        if box.id in seen:
            raise InvalidConfigurationError(f"Duplicate bounding box id {box.id!r}")
        seen.add(box.id)


class CollisionLayout:
    """Resolves non-overlapping positions for bounding-box requests.

    Boxes are processed by descending priority (ties keep input order).
    Fixed boxes are placed as requested before any flexible box. Each
    flexible box then tries, in order: its requested position, grid nudges
    around it, and each alternative anchor followed by that anchor's nudges.
    Every candidate is clamped to the stage and must satisfy the box's
    constraints. The first candidate that clears every placed box (by
    ``min_pad``) wins; if none does, the candidate with the least total
    overlap is used and a :class:`LayoutOverflow` is reported.

    Args:
        config: Grid, nudge and padding settings.
        stage: Stage size used for clamping.

    Example:
        >>> layout = CollisionLayout(LayoutConfig(min_pad=0))
        >>> result = layout.place([
        ...     BoundingBox(id="title", x=960, y=100, width=800, height=80, priority=10),
        ...     BoundingBox(id="badge", x=960, y=150, width=100, height=100, flexible=True),
        ... ])
        >>> result["title"].moved, result["badge"].moved
        (False, True)
    """

    def __init__(self, config: LayoutConfig | None = None, stage: Stage | None = None) -> None:
        self.config = config or LayoutConfig()
        self.stage = stage or Stage()

    def _footprint(self, box: BoundingBox, x: float, y: float) -> Footprint:
        # Half the minimum gap on each side keeps neighbours min_pad apart
        pad = box.padding + self.config.min_pad / 2
        return Footprint.of(box.shape, x, y, box.width, box.height, pad)

    def _nudges(self, x: float, y: float) -> list[Point]:
        grid = self.config.grid
        return [
            (x + dx * grid * step, y + dy * grid * step)
            for step in range(1, self.config.max_nudges + 1)
            for dx, dy in NUDGE_DIRECTIONS
        ]

    def candidates(self, box: BoundingBox) -> list[Point]:
        """Candidate centres for a flexible box, in preference order."""
        raw: list[Point] = [(box.x, box.y), *self._nudges(box.x, box.y)]
        for ax, ay in box.alternatives:
            raw.append((ax, ay))
            raw.extend(self._nudges(ax, ay))

        out: list[Point] = []
        for x, y in raw:
            point = clamp_center(x, y, box.width, box.height, self.stage.width, self.stage.height)
            if box.constraints is not None and not box.constraints.allows(*point):
                continue
            out.append(point)
        return out

    def place(self, boxes: Sequence[BoundingBox]) -> LayoutResult:
        """Resolve positions for ``boxes``.

        Raises:
            InvalidConfigurationError: If two boxes share an id.
        """
        _check_unique_ids(boxes)
        ordered = sorted(enumerate(boxes), key=lambda item: (-item[1].priority, item[0]))
        fixed = [box for _, box in ordered if not box.flexible]
        flexible = [box for _, box in ordered if box.flexible]

        placed: list[tuple[BoundingBox, Footprint]] = []
        positions: dict[str, ResolvedPosition] = {}
        diagnostics: list[LayoutOverflow] = []

        for box in fixed:
            placed.append((box, self._footprint(box, box.x, box.y)))
            positions[box.id] = ResolvedPosition(
                id=box.id, shape=box.shape, x=box.x, y=box.y, width=box.width, height=box.height
            )

        for box in flexible:
            obstacles = [(other, fp) for other, fp in placed if box.coexists_with(other)]
            best: tuple[float, Point, list[str]] | None = None

            for x, y in self.candidates(box):
                candidate = self._footprint(box, x, y)
                hits = [(other, fp) for other, fp in obstacles if footprints_overlap(candidate, fp)]
                if not hits:
                    best = (0.0, (x, y), [])
                    break
                area = sum(overlap_area(candidate, fp) for _, fp in hits)
                if best is None or area < best[0]:
                    best = (area, (x, y), [other.id for other, _ in hits])

            if best is None:
                # Every candidate violated the constraints; keep the request.
                logger.warning(f"Box {box.id!r}: no candidate satisfies its constraints, keeping request")
                best = (0.0, (box.x, box.y), [])

            area, (x, y), hit_ids = best
            if hit_ids:
                diagnostic = LayoutOverflow(
                    element_id=box.id,
                    message=f"No overlap-free position for {box.id!r}; accepting {area:.1f}px² overlap",
                    overlap_area=area,
                    overlapping_ids=tuple(hit_ids),
                )
                logger.warning(diagnostic.message)
                diagnostics.append(diagnostic)

            placed.append((box, self._footprint(box, x, y)))
            positions[box.id] = ResolvedPosition(
                id=box.id,
                shape=box.shape,
                x=x,
                y=y,
                width=box.width,
                height=box.height,
                moved=(x, y) != (box.x, box.y),
                overlap_area=area,
            )

        logger.debug(f"Placed {len(positions)} boxes ({len(diagnostics)} overflow)")
        ordered_positions = {box.id: positions[box.id] for box in boxes}
        return LayoutResult(positions=ordered_positions, diagnostics=tuple(diagnostics))


def _severity(percentage: float) -> Severity:
    if percentage > 50:
        return Severity.CRITICAL
    if percentage > 20:
        return Severity.WARNING
    return Severity.MINOR


def check_overlap(a: BoundingBox, b: BoundingBox) -> Collision | None:
    """Collision record for two boxes as authored (padding included)."""
    fa = Footprint.of(a.shape, a.x, a.y, a.width, a.height, a.padding)
    fb = Footprint.of(b.shape, b.x, b.y, b.width, b.height, b.padding)
    if not footprints_overlap(fa, fb):
        return None

    inter = fa.bounds.intersection(fb.bounds)
    area = overlap_area(fa, fb)
    smaller = min(fa.bounds.area, fb.bounds.area)
    percentage = area / smaller * 100 if smaller > 0 else 0.0
    return Collision(
        element_a=a.id,
        element_b=b.id,
        overlap_area=area,
        overlap_x=inter.w if inter else 0.0,
        overlap_y=inter.h if inter else 0.0,
        overlap_percentage=round(percentage, 1),
        severity=_severity(percentage),
    )


def detect_collisions(
    boxes: Sequence[BoundingBox],
    check_timing: bool = True,
    min_severity: Severity | str = Severity.MINOR,
) -> list[Collision]:
    """All pairwise overlaps at or above ``min_severity``, in input pair order.

    Severity is the overlap as a share of the smaller box: over 50% is
    critical, over 20% a warning, anything else minor.
    """
    threshold = Severity(min_severity).level
    collisions = []
    for i, a in enumerate(boxes):
        for b in boxes[i + 1 :]:
            if check_timing and not a.coexists_with(b):
                continue
            collision = check_overlap(a, b)
            if collision is not None and collision.severity.level >= threshold:
                collisions.append(collision)
    return collisions
