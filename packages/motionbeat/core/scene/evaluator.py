"""Scene preparation and per-frame evaluation.

:meth:`SceneEvaluator.prepare` does every check that can fail: fps, beat
resolution, preset configs, layout. What it returns can be evaluated at
any frame without raising. References that cannot be resolved (an unknown
beat or box) drop the element that made them and are reported as
diagnostics instead of failing the scene.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from motionbeat.core.animation.continuous import ContinuousLifeConfig, evaluate_life
from motionbeat.core.animation.library import AnimationPresetLibrary, parse_preset_config
from motionbeat.core.animation.models import AnimationConfig, AnimationState
from motionbeat.core.animation.styles import entrance_config, exit_config, resolve_style, stagger_delay
from motionbeat.core.errors import Diagnostic, InvalidConfigurationError, UnresolvedReference
from motionbeat.core.layout.collision import CollisionLayout
from motionbeat.core.layout.connectors import route_connectors
from motionbeat.core.layout.models import LayoutConfig, LayoutResult, ResolvedPosition, RoutingResult, Stage
from motionbeat.core.particles.models import ParticleKind
from motionbeat.core.particles.system import ParticleSystem
from motionbeat.core.scene.models import (
    ElementSpec,
    ElementState,
    EmitterSpec,
    EmitterState,
    FrameState,
    SceneDescriptor,
    TimeRef,
    parse_time_ref,
)
from motionbeat.core.timing.beats import BeatScheduler, to_frames
from motionbeat.core.timing.models import ResolvedBeats, validate_fps
from motionbeat.core.utils.logging import get_logger, log_performance


class _Unresolved(Exception):
    """A beat or box reference that does not exist in this scene."""

    def __init__(self, reference: str, what: str) -> None:
        super().__init__(f"unknown {what} {reference!r}")
        self.reference = reference


@dataclass(frozen=True)
class _PreparedElement:
    id: str
    configs: tuple[AnimationConfig, ...]
    position: ResolvedPosition | None = None
    life: ContinuousLifeConfig | None = None
    life_start_frame: int = 0
    life_phase: float = 0.0


@dataclass(frozen=True)
class _PreparedEmitter:
    id: str
    kind: ParticleKind
    system: ParticleSystem
    start_frame: int


@dataclass
class PreparedScene:
    """A validated scene, ready to evaluate at any frame."""

    scene: SceneDescriptor
    fps: float
    duration_frames: int
    beats: ResolvedBeats
    layout: LayoutResult | None = None
    routes: RoutingResult | None = None
    diagnostics: tuple[Diagnostic, ...] = ()
    elements: tuple[_PreparedElement, ...] = field(default=(), repr=False)
    emitters: tuple[_PreparedEmitter, ...] = field(default=(), repr=False)

    @property
    def id(self) -> str:
        return self.scene.id

    def evaluate(self, frame: int) -> FrameState:
        """Visual state of every surviving element and emitter at ``frame``."""
        elements = {}
        for element in self.elements:
            state = AnimationState()
            for config in element.configs:
                state = state.combine(AnimationPresetLibrary.evaluate(frame, self.fps, config))
            if element.life is not None:
                state = state.combine(
                    evaluate_life(frame, element.life, element.life_start_frame, element.life_phase)
                )
            elements[element.id] = ElementState(id=element.id, state=state, position=element.position)

        emitters = {
            emitter.id: EmitterState(
                id=emitter.id,
                kind=emitter.kind,
                particles=tuple(emitter.system.evaluate(frame, emitter.start_frame)),
            )
            for emitter in self.emitters
        }

        return FrameState(
            scene_id=self.scene.id,
            frame=frame,
            elements=elements,
            emitters=emitters,
            connectors=self.routes.connectors if self.routes else (),
        )


class SceneEvaluator:
    """Prepares a :class:`SceneDescriptor` for frame evaluation.

    Args:
        scene: The descriptor (or its mapping form).
        fps: Frame rate. Never inferred.
        canvas: (width, height) used for background emitters and as the
            layout stage when the scene does not set one.
        layout_config: Defaults for scenes without their own layout config.
    """

    def __init__(
        self,
        scene: SceneDescriptor | dict[str, Any],
        fps: float,
        canvas: tuple[float, float] = (1920.0, 1080.0),
        layout_config: LayoutConfig | None = None,
    ) -> None:
        self.scene = scene if isinstance(scene, SceneDescriptor) else _validate_scene(scene)
        self.fps = fps
        self.canvas = canvas
        self.layout_config = layout_config or LayoutConfig()

    @log_performance
    def prepare(self) -> PreparedScene:
        """Run all setup checks and return an evaluable scene.

        Raises:
            InvalidConfigurationError: Bad fps, beats, preset configs or
                layout (duplicate ids); duplicate element or emitter ids.
        """
        scene = self.scene
        log = get_logger(__name__, scene_id=scene.id)
        fps = validate_fps(self.fps)
        _check_unique([e.id for e in scene.elements], "element")
        _check_unique([e.id for e in scene.emitters], "emitter")

        beats = BeatScheduler(scene.beat_order, scene.beat_defaults).resolve(scene.beats, fps)
        diagnostics: list[Diagnostic] = []

        layout = routes = None
        if scene.layout is not None:
            stage = scene.layout.stage or Stage(width=self.canvas[0], height=self.canvas[1])
            config = scene.layout.config or self.layout_config
            layout = CollisionLayout(config, stage).place(scene.layout.boxes)
            routes = route_connectors(layout, scene.layout.connectors, config, stage)
            diagnostics.extend(layout.diagnostics)
            diagnostics.extend(routes.diagnostics)

        elements = []
        for spec in scene.elements:
            try:
                elements.append(self._prepare_element(spec, beats, layout, fps))
            except _Unresolved as e:
                diagnostics.append(self._unresolved(spec.id, e, log))

        emitters = []
        for spec in scene.emitters:
            try:
                emitters.append(self._prepare_emitter(spec, beats, layout, fps))
            except _Unresolved as e:
                diagnostics.append(self._unresolved(spec.id, e, log))

        log.info(
            f"Prepared scene {scene.id!r}: {len(elements)} elements, {len(emitters)} emitters, "
            f"{len(diagnostics)} diagnostics"
        )
        return PreparedScene(
            scene=scene,
            fps=fps,
            duration_frames=self.duration_frames(scene, fps),
            beats=beats,
            layout=layout,
            routes=routes,
            diagnostics=tuple(diagnostics),
            elements=tuple(elements),
            emitters=tuple(emitters),
        )

    @staticmethod
    def duration_frames(scene: SceneDescriptor, fps: float) -> int:
        return to_frames(scene.duration_s, fps)

    @staticmethod
    def _unresolved(
        element_id: str, error: _Unresolved, log: logging.Logger | logging.LoggerAdapter
    ) -> UnresolvedReference:
        diagnostic = UnresolvedReference(
            element_id=element_id,
            reference=error.reference,
            message=f"{element_id!r} skipped: {error}",
        )
        log.warning(diagnostic.message)
        return diagnostic

    @staticmethod
    def _seconds(ref: TimeRef, beats: ResolvedBeats) -> float:
        try:
            name, offset = parse_time_ref(ref)
        except ValueError as e:
            raise InvalidConfigurationError(str(e)) from None
        if name is None:
            return offset
        if name not in beats.seconds:
            raise _Unresolved(name, "beat")
        return max(0.0, beats.seconds[name] + offset)

    def _prepare_element(
        self,
        spec: ElementSpec,
        beats: ResolvedBeats,
        layout: LayoutResult | None,
        fps: float,
    ) -> _PreparedElement:
        position = None
        if spec.box is not None:
            if layout is None or spec.box not in layout:
                raise _Unresolved(spec.box, "box")
            position = layout[spec.box]

        configs: list[AnimationConfig] = []
        for raw in spec.animations:
            data = dict(raw)
            if "start" in data:
                data["start"] = self._seconds(data["start"], beats)
            configs.append(parse_preset_config(data))

        life = life_start = None
        life_phase = 0.0
        if spec.style is not None:
            bundle = resolve_style(spec.style.name, spec.style.overrides)
            delay = stagger_delay(
                bundle.stagger.delay, spec.style.index, spec.style.group_size, bundle.stagger.direction
            )
            enter_s = self._seconds(spec.style.enter, beats) + delay
            configs.insert(0, entrance_config(bundle, enter_s))
            if spec.style.exit is not None:
                configs.append(exit_config(bundle, self._seconds(spec.style.exit, beats)))
            if bundle.continuous_life is not None:
                life = bundle.continuous_life
                life_start = to_frames(enter_s + bundle.entrance.duration, fps)

        if spec.life is not None:
            life = spec.life.config
            life_start = to_frames(self._seconds(spec.life.start, beats), fps)
            life_phase = spec.life.phase_offset

        return _PreparedElement(
            id=spec.id,
            configs=tuple(configs),
            position=position,
            life=life,
            life_start_frame=life_start or 0,
            life_phase=life_phase,
        )

    def _prepare_emitter(
        self,
        spec: EmitterSpec,
        beats: ResolvedBeats,
        layout: LayoutResult | None,
        fps: float,
    ) -> _PreparedEmitter:
        origin = spec.origin or (self.canvas[0] / 2, self.canvas[1] / 2)
        bounds = spec.bounds or (0.0, 0.0, self.canvas[0], self.canvas[1])
        if spec.anchor_box is not None:
            if layout is None or spec.anchor_box not in layout:
                raise _Unresolved(spec.anchor_box, "box")
            anchor = layout[spec.anchor_box]
            origin = (anchor.x, anchor.y)
            bounds = (anchor.left, anchor.top, anchor.width, anchor.height)

        system = ParticleSystem(
            spec.kind,
            spec.count,
            spec.seed,
            origin=origin,
            bounds=bounds,
            canvas=self.canvas,
            duration=spec.duration,
            vertical_speed=spec.vertical_speed,
            loop_height=spec.loop_height,
        )
        start_frame = to_frames(self._seconds(spec.start, beats), fps)
        return _PreparedEmitter(id=spec.id, kind=system.kind, system=system, start_frame=start_frame)


def _check_unique(ids: list[str], what: str) -> None:
    seen: set[str] = set()
    for item in ids:
        if item in seen:
            raise InvalidConfigurationError(f"Duplicate {what} id {item!r}")
        seen.add(item)


def _validate_scene(data: dict[str, Any]) -> SceneDescriptor:
    try:
        return SceneDescriptor.model_validate(data)
    except ValidationError as e:
        raise InvalidConfigurationError.from_validation("Invalid scene", e) from e
