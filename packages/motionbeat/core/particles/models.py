"""Particle descriptors and per-frame particle states.

Descriptors are generated once per emitter and never change. States are
computed from a descriptor and a frame number.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ParticleKind(str, Enum):
    AMBIENT = "ambient"
    CONFETTI = "confetti"
    SPARKLE = "sparkle"
    FLOATING_SHAPE = "floating_shape"


class ShapeType(str, Enum):
    CIRCLE = "circle"
    BLOB = "blob"
    LINE = "line"


class _Particle(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str


class AmbientParticle(_Particle):
    x: float
    y: float
    size: float = Field(ge=2.0, le=6.0)
    speed: float = Field(ge=0.3, le=0.8)
    phase: float
    amplitude: float = Field(ge=20.0, le=50.0)
    opacity: float = Field(ge=0.1, le=0.3)


class ConfettiParticle(_Particle):
    origin_x: float
    origin_y: float
    angle: float = Field(description="Radians; 0 points right, +pi/2 points down")
    velocity: float = Field(description="px per frame")
    color_index: int = Field(ge=0)
    size: float
    rotation: float = Field(description="Initial rotation in degrees")
    rotation_speed: float = Field(description="Degrees per frame")
    gravity: float = Field(description="px per frame^2")


class SparkleParticle(_Particle):
    x: float
    y: float
    delay: float = Field(ge=0.0, le=30.0, description="Frames after the emitter start")
    size: float = Field(ge=8.0, le=20.0)
    duration: float = Field(ge=20.0, le=40.0, description="Frames")


class FloatingShape(_Particle):
    type: ShapeType
    x: float
    y: float
    size: float = Field(ge=30.0, le=110.0)
    speed: float = Field(ge=0.2, le=0.5)
    phase: float
    opacity: float = Field(ge=0.03, le=0.08)
    color_index: int = Field(ge=0, le=2)


Particle = AmbientParticle | ConfettiParticle | SparkleParticle | FloatingShape


class ParticleState(BaseModel):
    """Where and how to draw one particle at one frame.

    An invisible particle carries only its id; the renderer skips it.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    visible: bool = True
    x: float | None = None
    y: float | None = None
    size: float | None = None
    scale: float | None = None
    rotation: float | None = None
    opacity: float | None = None
    color_index: int | None = None

    @classmethod
    def hidden(cls, particle_id: str) -> ParticleState:
        return cls(id=particle_id, visible=False)
