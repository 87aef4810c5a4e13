"""Engine error types and recoverable diagnostics.

Fatal problems are raised as exceptions while a scene is being prepared.
Recoverable problems are reported as frozen diagnostic records so that
rendering can continue for every other element.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class MotionbeatError(Exception):
    """Base class for all engine errors."""


class InvalidConfigurationError(MotionbeatError, ValueError):
    """Scene configuration cannot be rendered.

    Raised at setup time only (beat resolution, config parsing, layout
    validation). Callers must not render a scene that raised this.
    """

    @classmethod
    def from_validation(cls, context: str, exc: ValidationError) -> InvalidConfigurationError:
        """Wrap a pydantic ValidationError with a short, readable message."""
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        )
        return cls(f"{context}: {details}")


class DiagnosticKind(str, Enum):
    UNRESOLVED_REFERENCE = "unresolved_reference"
    LAYOUT_OVERFLOW = "layout_overflow"


class Diagnostic(BaseModel):
    """A recovered, non-fatal problem surfaced to the caller."""

    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind
    element_id: str
    message: str


class UnresolvedReference(Diagnostic):
    """An element referenced an id (box, beat, node) that does not exist.

    The offending element is skipped; all others keep rendering.
    """

    kind: DiagnosticKind = DiagnosticKind.UNRESOLVED_REFERENCE
    reference: str


class LayoutOverflow(Diagnostic):
    """No overlap-free placement was found within the fallback budget.

    The box is placed at the candidate with the least overlap instead.
    """

    kind: DiagnosticKind = DiagnosticKind.LAYOUT_OVERFLOW
    overlap_area: float = Field(ge=0.0)
    overlapping_ids: tuple[str, ...] = ()
