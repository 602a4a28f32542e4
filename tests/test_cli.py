"""Tests for the vid2gif command line."""

import json
from pathlib import Path

from typer.testing import CliRunner

from vid2gif.cli import app

runner = CliRunner()


def _write_config(tmp_path: Path) -> Path:
    config = tmp_path / "pipeline.yaml"
    config.write_text(f"workspace_dir: '{tmp_path / 'workspace'}'\n")
    return config


def test_convert(source_video: Path, tmp_path: Path, fake_ffmpeg, fake_gifski):
    config = _write_config(tmp_path)
    result = runner.invoke(app, ["convert", str(source_video), "out", "-q", "80", "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert (source_video.parent / "out.gif").exists()
    cmd = fake_gifski[0]
    assert cmd[cmd.index("--quality") + 1] == "80"
    assert cmd[cmd.index("--fps") + 1] == "30"
    assert not (tmp_path / "workspace").exists()


def test_convert_explicit_fps(source_video: Path, tmp_path: Path, fake_ffmpeg, fake_gifski):
    config = _write_config(tmp_path)
    result = runner.invoke(app, ["convert", str(source_video), "--fps", "12.5", "-v", "--config", str(config)])

    assert result.exit_code == 0, result.output
    cmd = fake_gifski[0]
    assert cmd[cmd.index("--fps") + 1] == "12.5"
    assert (source_video.parent / "clip-gifski.gif").exists()


def test_convert_missing_input(tmp_path: Path, fake_ffmpeg):
    config = _write_config(tmp_path)
    result = runner.invoke(app, ["convert", str(tmp_path / "missing.mp4"), "--config", str(config)])

    assert result.exit_code == 1
    assert fake_ffmpeg == []


def test_convert_missing_config(source_video: Path, tmp_path: Path):
    result = runner.invoke(app, ["convert", str(source_video), "--config", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 1


def test_info(tmp_path: Path):
    config = _write_config(tmp_path)
    result = runner.invoke(app, ["info", "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert "ffmpeg" in result.output
    assert "gifski" in result.output


def test_schema():
    result = runner.invoke(app, ["schema", "encode_gif"])

    assert result.exit_code == 0, result.output
    schemas = json.loads(result.output)
    assert set(schemas) == {"input", "output", "config"}
    assert "output_path" in schemas["input"]["properties"]
    assert schemas["config"]["properties"]["max_fps"]["maximum"] == 50


def test_schema_extract_frames():
    result = runner.invoke(app, ["schema", "extract_frames"])

    assert result.exit_code == 0, result.output
    assert "diagnostics" in json.loads(result.output)["output"]["properties"]


def test_schema_unknown_step():
    result = runner.invoke(app, ["schema", "resize"])
    assert result.exit_code == 1
