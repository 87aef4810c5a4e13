"""Layout requests, resolved placements and connector routes."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from motionbeat.core.errors import LayoutOverflow, UnresolvedReference

Point = tuple[float, float]


class BoxShape(str, Enum):
    RECT = "rect"
    ELLIPSE = "ellipse"


class Severity(str, Enum):
    MINOR = "minor"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def level(self) -> int:
        return _SEVERITY_LEVELS[self]


_SEVERITY_LEVELS = {Severity.MINOR: 0, Severity.WARNING: 1, Severity.CRITICAL: 2}


class RouteKind(str, Enum):
    ELBOW = "elbow"
    DOGLEG = "dogleg"
    GRID = "grid"
    STRAIGHT = "straight"


class LayoutConfig(BaseModel):
    """Placement and routing tunables.

    Attributes:
        grid: Nudge step and routing grid cell size in px.
        max_nudges: Grid steps tried in each direction around an anchor.
        min_pad: Minimum clear gap between placed boxes in px.
        stroke: Connector stroke width; routes keep half of it clear too.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    grid: float = Field(default=32.0, gt=0.0)
    max_nudges: int = Field(default=3, ge=0)
    min_pad: float = Field(default=12.0, ge=0.0)
    stroke: float = Field(default=6.0, ge=0.0)


class Stage(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    width: float = Field(default=1920.0, gt=0.0)
    height: float = Field(default=1080.0, gt=0.0)


class Constraints(BaseModel):
    """Allowed range for a flexible box's centre."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    min_x: float | None = None
    max_x: float | None = None
    min_y: float | None = None
    max_y: float | None = None

    def allows(self, x: float, y: float) -> bool:
        return not (
            (self.min_x is not None and x < self.min_x)
            or (self.max_x is not None and x > self.max_x)
            or (self.min_y is not None and y < self.min_y)
            or (self.max_y is not None and y > self.max_y)
        )


class BoundingBox(BaseModel):
    """A region reserved for one visual element.

    ``x``/``y`` are the centre. Boxes with a frame window only collide with
    boxes whose windows intersect theirs.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    shape: BoxShape = BoxShape.RECT
    x: float
    y: float
    width: float = Field(gt=0.0)
    height: float = Field(gt=0.0)
    priority: int = 0
    flexible: bool = False
    padding: float = Field(default=0.0, ge=0.0)
    alternatives: tuple[Point, ...] = ()
    constraints: Constraints | None = None
    start_frame: int | None = None
    end_frame: int | None = None

    @model_validator(mode="after")
    def _validate_window(self) -> BoundingBox:
        if self.start_frame is not None and self.end_frame is not None and self.end_frame < self.start_frame:
            raise ValueError(f"end_frame {self.end_frame} precedes start_frame {self.start_frame}")
        return self

    def coexists_with(self, other: BoundingBox) -> bool:
        """Whether both boxes are on screen at some common frame."""
        a_start = self.start_frame if self.start_frame is not None else float("-inf")
        a_end = self.end_frame if self.end_frame is not None else float("inf")
        b_start = other.start_frame if other.start_frame is not None else float("-inf")
        b_end = other.end_frame if other.end_frame is not None else float("inf")
        return a_start < b_end and b_start < a_end


class ResolvedPosition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    shape: BoxShape
    x: float
    y: float
    width: float
    height: float
    moved: bool = False
    overlap_area: float = 0.0

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def top(self) -> float:
        return self.y - self.height / 2


class LayoutResult(BaseModel):
    """Placements keyed by id (input order) plus any overflow diagnostics."""

    model_config = ConfigDict(frozen=True)

    positions: dict[str, ResolvedPosition]
    diagnostics: tuple[LayoutOverflow, ...] = ()

    def __getitem__(self, box_id: str) -> ResolvedPosition:
        return self.positions[box_id]

    def __contains__(self, box_id: object) -> bool:
        return box_id in self.positions

    def centres(self) -> dict[str, Point]:
        return {box_id: (p.x, p.y) for box_id, p in self.positions.items()}


class Collision(BaseModel):
    model_config = ConfigDict(frozen=True)

    element_a: str
    element_b: str
    overlap_area: float
    overlap_x: float
    overlap_y: float
    overlap_percentage: float
    severity: Severity


class Connector(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    from_id: str
    to_id: str


class RoutedConnector(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    from_id: str
    to_id: str
    route: RouteKind
    polyline: tuple[Point, ...]


class RoutingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    connectors: tuple[RoutedConnector, ...] = ()
    diagnostics: tuple[UnresolvedReference, ...] = ()
