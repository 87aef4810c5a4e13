"""Tests for the motionbeat command line."""

from __future__ import annotations

import json

import pytest

from motionbeat.cli import main as cli


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    """Keep the CLI from replacing the root logging handlers during tests."""
    calls = []
    monkeypatch.setattr(cli, "configure_logging_from_config", calls.append)
    return calls


@pytest.fixture
def scene_file(tmp_path, scene_data):
    path = tmp_path / "intro.json"
    path.write_text(json.dumps(scene_data))
    return path


@pytest.fixture
def video_file(tmp_path, video_data):
    path = tmp_path / "video.json"
    path.write_text(json.dumps(video_data))
    return path


@pytest.fixture
def app_config(tmp_path):
    """Point every command at a config that does not exist (all defaults)."""
    return ["--app-config", str(tmp_path / "motionbeat.yaml")]


class TestArgParser:
    def test_requires_subcommand(self):
        with pytest.raises(SystemExit):
            cli.build_arg_parser().parse_args([])

    def test_frame_defaults(self):
        """Range options default to the whole scene at step 1."""
        args = cli.build_arg_parser().parse_args(["frame", "intro.json"])
        assert (args.frame, args.start, args.end, args.step) == (None, 0, None, 1)
        assert args.func is cli.cmd_frame


class TestFrameCommand:
    """Tests for `motionbeat frame`."""

    def test_single_frame(self, scene_file, app_config, capsys):
        """A single frame prints one FrameState object."""
        assert cli.main(["frame", str(scene_file), "--frame", "30", *app_config]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["scene_id"] == "intro"
        assert payload["frame"] == 30
        assert payload["elements"]["title"]["state"]["opacity"] == 1.0

    def test_range_to_file(self, scene_file, app_config, tmp_path):
        """Ranges are end-exclusive and can be written to a file."""
        out = tmp_path / "frames.json"
        code = cli.main(
            ["frame", str(scene_file), "--start", "0", "--end", "10", "--step", "5", "--out", str(out), *app_config]
        )
        assert code == 0
        assert [f["frame"] for f in json.loads(out.read_text())] == [0, 5]

    def test_fps_override(self, scene_file, app_config, capsys):
        """--fps changes beat frames."""
        assert cli.main(["frame", str(scene_file), "--frame", "0", "--fps", "60", *app_config]) == 0
        assert json.loads(capsys.readouterr().out)["frame"] == 0

    def test_bad_step(self, scene_file, app_config, capsys):
        assert cli.main(["frame", str(scene_file), "--step", "0", *app_config]) == 1
        assert "--step must be positive" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, app_config, capsys):
        """Errors print to stderr and exit 1."""
        assert cli.main(["frame", str(tmp_path / "nope.json"), *app_config]) == 1
        assert "ERROR" in capsys.readouterr().err


class TestVideoCommands:
    """Tests for `motionbeat video-frame` and `motionbeat timeline`."""

    def test_video_frame_during_transition(self, video_file, app_config, capsys):
        """Both scenes are reported during an overlap."""
        assert cli.main(["video-frame", str(video_file), "--frame", "435", *app_config]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert [s["state"]["scene_id"] for s in payload["scenes"]] == ["a", "b"]

    def test_timeline(self, video_file, app_config, capsys):
        """The schedule table ends with the total frame count."""
        assert cli.main(["timeline", str(video_file), *app_config]) == 0
        out = capsys.readouterr().out
        assert "1480" in out
        assert "explainer" in out


class TestValidateCommand:
    """Tests for `motionbeat validate`."""

    def test_reports_diagnostics(self, scene_file, app_config, capsys, _no_logging_setup):
        """Diagnostics are listed but do not fail without --strict."""
        assert cli.main(["validate", str(scene_file), *app_config]) == 0
        out = capsys.readouterr().out
        assert "is valid" in out
        assert "missing-box" in out
        assert len(_no_logging_setup) == 1

    def test_strict(self, scene_file, app_config):
        """--strict turns diagnostics into a failing exit code."""
        assert cli.main(["validate", str(scene_file), "--strict", *app_config]) == 1

    def test_invalid_scene(self, tmp_path, app_config, capsys):
        path = tmp_path / "bad.yaml"
        path.write_text("id: bad\n")
        assert cli.main(["validate", str(path), *app_config]) == 1
        assert "Invalid scene" in capsys.readouterr().err


class TestAppConfigComposition:
    def test_timeline_uses_config_defaults(self, tmp_path, capsys):
        """Composition defaults in the app config reach the timeline."""
        video = tmp_path / "pair.json"
        video.write_text(
            json.dumps(
                {
                    "id": "pair",
                    "scenes": [
                        {"scene": {"id": "a", "duration_s": 2}},
                        {"scene": {"id": "b", "duration_s": 2}},
                    ],
                }
            )
        )
        config = tmp_path / "motionbeat.yaml"
        config.write_text("composition:\n  default_transition_frames: 5\n  tail_padding: 10\n")
        assert cli.main(["video-frame", str(video), "--frame", "60", "--app-config", str(config)]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert [s["state"]["scene_id"] for s in payload["scenes"]] == ["b"]
        assert payload["scenes"][0]["state"]["frame"] == 5
