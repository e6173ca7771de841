"""Unit tests for the tweenr command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tweenr.cli.main import build_arg_parser, main

APP_CONFIG = """\
animations:
  window-open:
    duration: 0.25
    curve: {p1: [0.25, 0.1], p2: [0.25, 1.0]}
  workspace-switch:
    curve: {initial-velocity: 0, clamp: false, mass: 1, damping-ratio: 1.0, stiffness: 100}
  wobble:
    curve: {initial-velocity: 0, clamp: false, mass: 1, damping-ratio: 0.0, stiffness: 100}
"""


@pytest.fixture
def app_config(tmp_path: Path) -> Path:
    path = tmp_path / "tweenr.yaml"
    path.write_text(APP_CONFIG, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _restore_logging(reset_root_logger):
    yield


def test_parser_defaults() -> None:
    """Preview defaults to 11 samples and WARNING logging."""
    args = build_arg_parser().parse_args(["preview", "curve.yaml"])
    assert args.cmd == "preview"
    assert args.samples == 11
    assert args.name is None
    assert args.log_level == "WARNING"


def test_parser_requires_command() -> None:
    """A subcommand is required."""
    with pytest.raises(SystemExit):
        build_arg_parser().parse_args([])


def test_preview_curve_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Previewing a single-curve file prints the sampled table."""
    path = tmp_path / "curve.json"
    path.write_text(json.dumps("ease-in-quad"), encoding="utf-8")

    assert main(["preview", str(path), "--samples", "3"]) == 0

    out = capsys.readouterr().out
    assert "ease-in-quad" in out
    assert "0.2500" in out
    assert "1.0000" in out


def test_preview_named_animation(app_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Named animations are read from the app config."""
    assert main(["preview", str(app_config), "--name", "window-open", "--samples", "5"]) == 0

    out = capsys.readouterr().out
    assert "window-open" in out
    assert "0.2500s" in out


def test_duration_of_spring(app_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Spring durations come from the spring itself."""
    assert main(["duration", str(app_config), "--name", "workspace-switch"]) == 0
    assert "0.9210s" in capsys.readouterr().out


def test_duration_never_settles(app_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Undamped springs are reported as never settling."""
    assert main(["duration", str(app_config), "--name", "wobble"]) == 0
    assert "never settles" in capsys.readouterr().out


def test_debug_logging(app_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """--log-level DEBUG reports which file the animation is loaded from."""
    argv = ["--log-level", "DEBUG", "duration", str(app_config), "--name", "window-open"]
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert "Loading animation from" in out
    assert "tweenr.cli.main" in out


def test_unknown_animation(app_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Unknown animation names exit with status 1."""
    assert main(["duration", str(app_config), "--name", "slide"]) == 1
    assert "Unknown animation" in capsys.readouterr().out


def test_missing_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Missing files exit with status 1."""
    assert main(["preview", str(tmp_path / "missing.yaml")]) == 1
    assert "ERROR" in capsys.readouterr().out


def test_invalid_curve(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Invalid curve data exits with status 1."""
    path = tmp_path / "curve.yaml"
    path.write_text("wobbly\n", encoding="utf-8")
    assert main(["duration", str(path)]) == 1
    assert "Could not load config" in capsys.readouterr().out


def test_unhashable_yaml_key(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Unhashable YAML keys are reported as config errors."""
    path = tmp_path / "bad.yaml"
    path.write_text("? [1, 2]\n: 3\n", encoding="utf-8")
    assert main(["duration", str(path)]) == 1
    assert "Could not load config" in capsys.readouterr().out


def test_too_few_samples(app_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """At least two samples are required."""
    assert main(["preview", str(app_config), "--name", "window-open", "--samples", "1"]) == 1
    assert "--samples" in capsys.readouterr().out
