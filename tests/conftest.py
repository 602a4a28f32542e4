"""Shared pytest fixtures for vid2gif tests."""

import subprocess
from pathlib import Path

import pytest

from vid2gif.core.contracts import PipelineConfig
from vid2gif.steps.s02_encode_gif.config import EncodeGifConfig

FFMPEG_STDERR = """\
ffmpeg version 6.1 Copyright (c) 2000-2023 the FFmpeg developers
Input #0, mov,mp4,m4a,3gp,3g2,mj2, from 'clip.mp4':
  Duration: 00:00:10.00, start: 0.000000, bitrate: 1205 kb/s
  Stream #0:0[0x1](und): Video: h264 (High), yuv420p, 640x360, 1071 kb/s, 30 fps, 30 tbr, 15360 tbn (default)
Output #0, image2, to 'frames/frame%04d.png':
frame=  300 fps=120 q=-0.0 Lsize=N/A time=00:00:10.00 bitrate=N/A speed=4.01x
"""


@pytest.fixture
def source_video(tmp_path: Path) -> Path:
    """A placeholder video file; the tools are faked in unit tests."""
    videos = tmp_path / "videos"
    videos.mkdir()
    video = videos / "clip.mp4"
    video.write_bytes(b"\x00" * 64)
    return video


@pytest.fixture
def pipeline_config(tmp_path: Path) -> PipelineConfig:
    """Pipeline config with a per-test workspace."""
    return PipelineConfig(workspace_dir=tmp_path / "workspace", encode=EncodeGifConfig(pass_glob=False))


@pytest.fixture
def fake_ffmpeg(monkeypatch):
    """Replace the ffmpeg call with one that writes frames and reports 30 fps."""
    calls = []

    def _run(cmd, tool=None, cwd=None, timeout=None, verbose=False):
        calls.append(cmd)
        pattern = Path(cmd[-1])
        for i in range(1, 6):
            (pattern.parent / (pattern.name % i)).write_bytes(b"png")
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr=FFMPEG_STDERR)

    monkeypatch.setattr("vid2gif.steps.s01_extract_frames.step.run_command", _run)
    return calls


@pytest.fixture
def fake_gifski(monkeypatch):
    """Replace the gifski call with one that writes the output file."""
    calls = []

    def _run(cmd, tool=None, cwd=None, timeout=None, verbose=False):
        calls.append(cmd)
        Path(cmd[cmd.index("-o") + 1]).write_bytes(b"GIF89a")
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

    monkeypatch.setattr("vid2gif.steps.s02_encode_gif.step.run_command", _run)
    return calls
