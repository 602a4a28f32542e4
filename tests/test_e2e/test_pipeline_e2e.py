"""End-to-end run with the real ffmpeg and gifski binaries."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import pytest

from vid2gif.core.contracts import PipelineConfig, RunConfig
from vid2gif.core.pipeline_runner import run_pipeline
from vid2gif.core.workspace import Workspace

logger = logging.getLogger(__name__)

needs_tools = pytest.mark.skipif(
    shutil.which("ffmpeg") is None or shutil.which("gifski") is None,
    reason="ffmpeg and gifski must be on PATH",
)


@pytest.mark.e2e
@needs_tools
def test_pipeline_e2e(synthetic_video: Path, tmp_path: Path, monkeypatch):
    workspace_dir = tmp_path / "workspace"
    seen_frames: list[int] = []
    teardown = Workspace.teardown

    def _count_then_teardown(self):
        seen_frames.append(len(list(self.path.glob("frame*.png"))))
        return teardown(self)

    monkeypatch.setattr(Workspace, "teardown", _count_then_teardown)

    result = run_pipeline(RunConfig(source_path=synthetic_video), PipelineConfig(workspace_dir=workspace_dir))

    logger.info(f"Encoded {result.frame_count} frames to {result.output_path}")
    assert seen_frames and seen_frames[0] > 0
    assert result.fps == pytest.approx(30.0)
    assert result.output_path == synthetic_video.parent / "synthetic_test_video-gifski.gif"
    assert result.output_path.stat().st_size > 0
    assert result.output_path.read_bytes()[:3] == b"GIF"
    assert not workspace_dir.exists()

