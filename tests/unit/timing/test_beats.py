"""Tests for beat resolution and frame conversion."""

from __future__ import annotations

import logging

import pytest

from motionbeat.core.errors import InvalidConfigurationError
from motionbeat.core.timing import (
    STANDARD_BEAT_ORDER,
    BeatRef,
    BeatRefKind,
    BeatScheduler,
    ms_to_frames,
    resolve_standard_beats,
    to_frames,
    validate_fps,
)


class TestFrameConversion:
    """Tests for to_frames() and ms_to_frames()."""

    def test_rounds_half_up(self):
        """0.5s at 29 fps is 14.5 frames, which rounds to 15."""
        assert to_frames(0.5, 30) == 15
        assert to_frames(0.5, 29) == 15
        assert to_frames(0.0, 30) == 0

    def test_ms(self):
        """Milliseconds convert through seconds."""
        assert ms_to_frames(500, 30) == 15
        assert ms_to_frames(1000, 24) == 24

    @pytest.mark.parametrize("fps", [0, -30, float("nan"), float("inf")])
    def test_invalid_fps(self, fps):
        """fps must be finite and positive."""
        with pytest.raises(InvalidConfigurationError):
            to_frames(1.0, fps)
        with pytest.raises(InvalidConfigurationError):
            validate_fps(fps)

    def test_non_finite_seconds(self):
        """NaN seconds are rejected."""
        with pytest.raises(InvalidConfigurationError):
            to_frames(float("nan"), 30)


class TestBeatRefParse:
    """Tests for the accepted beat authoring forms."""

    @pytest.mark.parametrize(
        "raw,kind,seconds",
        [
            (2.0, BeatRefKind.ABSOLUTE, 2.0),
            (3, BeatRefKind.ABSOLUTE, 3.0),
            ("1.25", BeatRefKind.ABSOLUTE, 1.25),
            ("+1.5", BeatRefKind.RELATIVE, 1.5),
            ("-0.5", BeatRefKind.RELATIVE, -0.5),
            ({"delta": 0.3}, BeatRefKind.RELATIVE, 0.3),
            ({"at": 4.0}, BeatRefKind.ABSOLUTE, 4.0),
        ],
    )
    def test_forms(self, raw, kind, seconds):
        """Each authoring form maps to one canonical BeatRef."""
        ref = BeatRef.parse(raw, "x")
        assert ref.kind == kind
        assert ref.seconds == seconds

    @pytest.mark.parametrize("raw", ["soon", {"delta": 1, "at": 2}, {"when": 1}, True, None, -1.0])
    def test_invalid_forms(self, raw):
        """Unknown forms and negative absolute times are configuration errors."""
        with pytest.raises(InvalidConfigurationError):
            BeatRef.parse(raw, "x")


class TestBeatScheduler:
    """Tests for BeatScheduler.resolve()."""

    def test_relative_and_absolute_agree(self):
        """Relative beats give the same frames as their absolute equivalents."""
        order = ["title", "subtitle", "list", "exit"]
        absolute = BeatScheduler(order).resolve(
            {"title": 0.5, "subtitle": 1.5, "list": 2.7, "exit": 6.0}, fps=30
        )
        relative = BeatScheduler(order).resolve(
            {"title": 0.5, "subtitle": "+1.0", "list": {"delta": 1.2}, "exit": "+3.3"}, fps=30
        )
        assert absolute.frames == relative.frames
        assert relative.frames == {"title": 15, "subtitle": 45, "list": 81, "exit": 180}

    def test_first_relative_beat_is_from_zero(self):
        """A leading relative beat resolves against time 0."""
        beats = BeatScheduler(["a"]).resolve({"a": "+1.0"}, fps=30)
        assert beats.frame("a") == 30

    def test_canonical_order_then_passthrough(self):
        """Unknown keys keep authored order after canonical beats."""
        beats = BeatScheduler(["a", "b"]).resolve({"z": 5.0, "b": 2.0, "a": 1.0, "y": "+1"}, fps=10)
        assert beats.names() == ["a", "b", "z", "y"]
        assert beats.frames == {"a": 10, "b": 20, "z": 50, "y": 60}

    def test_passthrough_beats_are_not_clamped(self):
        """A pass-through beat before the last canonical beat keeps its authored time."""
        beats = BeatScheduler(["title", "exit"]).resolve({"title": 1.0, "exit": 5.0, "sparkle": 2.0}, fps=30)
        assert beats.frame("sparkle") == 60
        assert beats.frame("exit") == 150

    def test_relative_passthrough_chains_from_zero(self):
        """Relative pass-through beats resolve against the previous pass-through key, not canonical beats."""
        beats = BeatScheduler(["a"]).resolve({"a": 4.0, "x": "+1.0", "y": "+0.5"}, fps=10)
        assert beats.frames == {"a": 40, "x": 10, "y": 15}

    def test_defaults_fill_missing(self):
        """Missing canonical beats use their defaults; others are omitted."""
        scheduler = BeatScheduler(["a", "b", "c"], {"b": "+0.5"})
        beats = scheduler.resolve({"a": 1.0}, fps=30)
        assert beats.frames == {"a": 30, "b": 45}
        assert "c" not in beats
        assert beats.get("c") is None
        with pytest.raises(KeyError):
            beats.frame("c")

    def test_out_of_order_beat_is_clamped(self, caplog):
        """A beat earlier than its predecessor is clamped with a warning."""
        with caplog.at_level(logging.WARNING, logger="motionbeat.core.timing.beats"):
            beats = BeatScheduler(["a", "b"]).resolve({"a": 2.0, "b": 1.0}, fps=30)
        assert beats.frames == {"a": 60, "b": 60}
        assert "clamped" in caplog.text
        assert beats.is_monotonic(["a", "b"])

    def test_negative_relative_clamps_to_previous(self):
        """A negative delta cannot move a beat before its predecessor."""
        beats = BeatScheduler(["a", "b"]).resolve({"a": 2.0, "b": "-5"}, fps=30)
        assert beats.frame("b") == 60

    def test_negative_time_raises(self):
        """A first beat resolving before 0 is an error."""
        with pytest.raises(InvalidConfigurationError):
            BeatScheduler(["a"]).resolve({"a": "-1"}, fps=30)

    def test_monotonic_property(self):
        """Resolved canonical beats never decrease."""
        order = ["a", "b", "c", "d"]
        beats = BeatScheduler(order).resolve({"a": 3.0, "b": 1.0, "c": "+0.1", "d": 2.0}, fps=24)
        assert beats.is_monotonic(order)

    def test_duplicate_order_rejected(self):
        """The canonical order must not repeat names."""
        with pytest.raises(InvalidConfigurationError):
            BeatScheduler(["a", "a"])

    def test_invalid_fps(self):
        """Resolution requires fps > 0."""
        with pytest.raises(InvalidConfigurationError):
            BeatScheduler(["a"]).resolve({"a": 1.0}, fps=0)

    def test_fps_changes_frames_not_seconds(self):
        """The same beats at two frame rates keep their seconds."""
        at30 = BeatScheduler(["a"]).resolve({"a": 1.5}, fps=30)
        at60 = BeatScheduler(["a"]).resolve({"a": 1.5}, fps=60)
        assert at30.seconds == at60.seconds
        assert (at30.frame("a"), at60.frame("a")) == (45, 90)


class TestStandardBeats:
    """Tests for the start/emphasis/hold/exit helper."""

    def test_defaults(self):
        """Defaults cascade from start."""
        beats = resolve_standard_beats({}, fps=30)
        assert beats.names() == list(STANDARD_BEAT_ORDER)
        assert beats.frames == {"start": 15, "emphasis": 24, "hold": 63, "exit": 72}

    def test_defaults_follow_authored_start(self):
        """Moving start moves the derived defaults with it."""
        beats = resolve_standard_beats({"start": 1.0}, fps=30)
        assert beats.frames == {"start": 30, "emphasis": 39, "hold": 78, "exit": 87}

    def test_authored_values_win(self):
        """Authored beats override defaults."""
        beats = resolve_standard_beats({"start": 0.0, "exit": 5.0}, fps=30)
        assert beats.frame("exit") == 150
