"""Command-line interface for motionbeat.

Evaluates scene and video descriptors frame by frame and prints the
resulting state as JSON, or summarises composed timelines.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from motionbeat.core.config.loader import (
    configure_logging_from_config,
    load_app_config,
    load_scene,
    load_video,
)
from motionbeat.core.config.models import AppConfig
from motionbeat.core.errors import InvalidConfigurationError
from motionbeat.core.scene.evaluator import PreparedScene, SceneEvaluator
from motionbeat.core.scene.video import PreparedVideo, VideoEvaluator
from motionbeat.core.utils.json import dumps_json

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _app_config(args: argparse.Namespace) -> AppConfig:
    config = load_app_config(args.app_config)
    if args.fps is not None:
        config = config.model_copy(update={"fps": args.fps})
    configure_logging_from_config(config)
    return config


def _prepare_scene(path: Path, config: AppConfig) -> PreparedScene:
    scene = load_scene(path)
    return SceneEvaluator(scene, config.fps, config.canvas, config.layout).prepare()


def _prepare_video(path: Path, config: AppConfig) -> PreparedVideo:
    video = load_video(path)
    return VideoEvaluator(video, config.fps, config.canvas, config.layout, config.composition).prepare()


def _frame_range(args: argparse.Namespace, default_end: int) -> range:
    if args.frame is not None:
        return range(args.frame, args.frame + 1)
    end = default_end if args.end is None else args.end
    if args.step <= 0:
        raise InvalidConfigurationError(f"--step must be positive, got {args.step}")
    return range(args.start, end, args.step)


def _emit(payload: object, out: str | None) -> None:
    text = dumps_json(payload)
    if out:
        Path(out).write_text(text, encoding="utf-8")
        err_console.print(f"[green]Wrote[/green] {out}")
    else:
        # Plain print keeps stdout machine-readable
        print(text)


def cmd_frame(args: argparse.Namespace) -> int:
    """Evaluate one frame, or a frame range, of a scene."""
    prepared = _prepare_scene(Path(args.scene), _app_config(args))
    frames = [prepared.evaluate(f) for f in _frame_range(args, prepared.duration_frames)]
    _emit(frames[0] if args.frame is not None else frames, args.out)
    return 0


def cmd_video_frame(args: argparse.Namespace) -> int:
    """Evaluate one global frame, or a range, of a multi-scene video."""
    prepared = _prepare_video(Path(args.video), _app_config(args))
    frames = [prepared.evaluate(f) for f in _frame_range(args, prepared.timeline.total_duration)]
    _emit(frames[0] if args.frame is not None else frames, args.out)
    return 0


def cmd_timeline(args: argparse.Namespace) -> int:
    """Print the composed schedule of a video."""
    config = _app_config(args)
    prepared = _prepare_video(Path(args.video), config)
    timeline = prepared.timeline

    table = Table(title=f"{prepared.video.id} @ {timeline.fps:g} fps")
    table.add_column("#", justify="right")
    table.add_column("Scene")
    table.add_column("Offset", justify="right")
    table.add_column("Duration", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Overlap out", justify="right")
    table.add_column("Transition")
    for scheduled in timeline.scenes:
        table.add_row(
            str(scheduled.index),
            scheduled.id,
            str(scheduled.offset),
            str(scheduled.duration),
            str(scheduled.end),
            str(scheduled.overlap_out),
            f"{scheduled.transition.style.value}/{scheduled.transition.easing.value}",
        )
    console.print(table)
    console.print(
        f"Total: [bold]{timeline.total_duration}[/bold] frames "
        f"({timeline.total_duration / timeline.fps:.2f}s, tail padding {timeline.tail_padding})"
    )
    _print_diagnostics(prepared.diagnostics)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Prepare a scene and report its diagnostics."""
    prepared = _prepare_scene(Path(args.scene), _app_config(args))
    console.print(
        f"[green]Scene {prepared.id!r} is valid[/green]: "
        f"{prepared.duration_frames} frames, beats {dict(prepared.beats.frames)}"
    )
    _print_diagnostics(prepared.diagnostics)
    return 1 if (args.strict and prepared.diagnostics) else 0


def _print_diagnostics(diagnostics) -> None:
    if not diagnostics:
        return
    console.print(f"[yellow]{len(diagnostics)} diagnostic(s):[/yellow]")
    for d in diagnostics:
        console.print(f"   - [{d.kind.value}] {d.element_id}: {d.message}", markup=False)


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--app-config",
        default=None,
        help="Path to app config (default: motionbeat.yaml if present)",
    )
    p.add_argument("--fps", type=float, default=None, help="Override the configured frame rate")


def _add_range(p: argparse.ArgumentParser) -> None:
    p.add_argument("--frame", type=int, default=None, help="Single frame to evaluate")
    p.add_argument("--start", type=int, default=0, help="First frame of a range (default: 0)")
    p.add_argument("--end", type=int, default=None, help="End of a range, exclusive (default: duration)")
    p.add_argument("--step", type=int, default=1, help="Range step (default: 1)")
    p.add_argument("--out", default=None, help="Write JSON here instead of stdout")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="motionbeat",
        description="motionbeat - deterministic, frame-addressable motion graphics",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    frame = sub.add_parser("frame", help="Evaluate scene frames to JSON")
    frame.add_argument("scene", help="Path to scene descriptor (.json/.yaml)")
    _add_range(frame)
    _add_common(frame)
    frame.set_defaults(func=cmd_frame)

    video_frame = sub.add_parser("video-frame", help="Evaluate video frames to JSON")
    video_frame.add_argument("video", help="Path to video descriptor (.json/.yaml)")
    _add_range(video_frame)
    _add_common(video_frame)
    video_frame.set_defaults(func=cmd_video_frame)

    timeline = sub.add_parser("timeline", help="Show the composed schedule of a video")
    timeline.add_argument("video", help="Path to video descriptor (.json/.yaml)")
    _add_common(timeline)
    timeline.set_defaults(func=cmd_timeline)

    validate = sub.add_parser("validate", help="Validate a scene descriptor")
    validate.add_argument("scene", help="Path to scene descriptor (.json/.yaml)")
    validate.add_argument("--strict", action="store_true", help="Exit 1 when diagnostics exist")
    _add_common(validate)
    validate.set_defaults(func=cmd_validate)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    args = build_arg_parser().parse_args(argv)

    try:
        return args.func(args)
    except (FileNotFoundError, ValueError) as e:
        # InvalidConfigurationError is a ValueError
        err_console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
