"""Tests for multi-scene video evaluation."""

from __future__ import annotations

import pytest

from motionbeat.core.composition import CompositionConfig, TransitionRole
from motionbeat.core.errors import InvalidConfigurationError
from motionbeat.core.scene import VideoEvaluator


class TestVideoEvaluator:
    """Tests for VideoEvaluator."""

    def test_composed_timeline(self, video_data):
        """Scene durations and transition frames compose into one axis."""
        prepared = VideoEvaluator(video_data, fps=30).prepare()
        assert prepared.timeline.total_duration == 1480
        assert prepared.timeline.offsets == [0, 420, 980]
        assert [s.id for s in prepared.scenes] == ["a", "b", "c"]

    def test_none_transition_has_no_overlap(self, video_data):
        """Scenes cut with style 'none' do not overlap unless frames are given."""
        video_data["default_transition"] = {"style": "none"}
        video_data["scenes"][0].pop("transition")
        prepared = VideoEvaluator(video_data, fps=30).prepare()
        assert prepared.timeline.offsets == [0, 450, 1010]

    def test_overlap_frame_evaluates_both_scenes(self, video_data):
        """During a transition both scenes are evaluated at their local frames."""
        frame = VideoEvaluator(video_data, fps=30).prepare().evaluate(435)
        assert [s.state.scene_id for s in frame.scenes] == ["a", "b"]
        assert [s.state.frame for s in frame.scenes] == [435, 15]
        assert frame.scenes[0].active.transition.role == TransitionRole.OUTGOING
        assert frame.scenes[1].active.transition.progress == pytest.approx(0.5)

    def test_invalid_video(self):
        """A video needs at least one scene."""
        with pytest.raises(InvalidConfigurationError):
            VideoEvaluator({"id": "empty", "scenes": []}, fps=30)

    def test_overlap_longer_than_scene(self, video_data):
        """Transition frames longer than a scene fail composition."""
        video_data["scenes"][0]["transition_frames"] = 1000
        with pytest.raises(InvalidConfigurationError):
            VideoEvaluator(video_data, fps=30).prepare()


class TestCompositionDefaults:
    """Video fields left unset fall back to the app's composition config."""

    TWO_SCENES = {
        "id": "pair",
        "scenes": [
            {"scene": {"id": "a", "duration_s": 2}},
            {"scene": {"id": "b", "duration_s": 2}},
        ],
    }

    def test_config_defaults_apply(self):
        """Overlap and tail padding come from CompositionConfig."""
        composition = CompositionConfig(default_transition_frames=5, tail_padding=10)
        timeline = VideoEvaluator(self.TWO_SCENES, fps=30, composition=composition).prepare().timeline
        assert timeline.offsets == [0, 55]
        assert timeline.total_duration == 125

    def test_builtin_defaults(self):
        """Without a config the 18-frame fade is used."""
        timeline = VideoEvaluator(self.TWO_SCENES, fps=30).prepare().timeline
        assert timeline.offsets == [0, 42]
        assert timeline.tail_padding == 0

    def test_video_values_win(self):
        """Values set on the video override the config."""
        video = {**self.TWO_SCENES, "default_transition_frames": 20, "tail_padding": 0}
        composition = CompositionConfig(default_transition_frames=5, tail_padding=10)
        timeline = VideoEvaluator(video, fps=30, composition=composition).prepare().timeline
        assert timeline.offsets == [0, 40]
        assert timeline.total_duration == 100

    def test_config_transition_style(self):
        """A configured 'none' default removes the overlap."""
        composition = CompositionConfig(default_transition={"style": "none"})
        timeline = VideoEvaluator(self.TWO_SCENES, fps=30, composition=composition).prepare().timeline
        assert timeline.offsets == [0, 60]
