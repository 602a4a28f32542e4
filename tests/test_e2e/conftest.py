"""Fixtures for E2E pipeline tests."""

from __future__ import annotations

from pathlib import Path

import pytest


def create_synthetic_video(
    output_dir: Path,
    num_frames: int = 300,
    resolution: tuple[int, int] = (160, 120),
    fps: float = 30.0,
) -> Path:
    """
    Create a synthetic test video with a moving gradient.

    Args:
        output_dir: Directory to save the video
        num_frames: Number of frames to generate
        resolution: Video resolution as (width, height)
        fps: Frames per second

    Returns:
        Path to the created video file
    """
    cv2 = pytest.importorskip("cv2")
    np = pytest.importorskip("numpy")

    output_dir.mkdir(parents=True, exist_ok=True)
    video_path = output_dir / "synthetic_test_video.mp4"

    width, height = resolution
    fourcc = cv2.VideoWriter_fourcc(*"mp4v")
    writer = cv2.VideoWriter(str(video_path), fourcc, fps, (width, height))

    gradient = np.linspace(0, 255, width, dtype=np.uint8)
    for i in range(num_frames):
        frame = np.zeros((height, width, 3), dtype=np.uint8)
        frame[:, :, 0] = np.roll(gradient, i)
        cv2.putText(frame, f"F:{i:03d}", (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
        writer.write(frame)

    writer.release()
    return video_path


@pytest.fixture
def synthetic_video(tmp_path: Path) -> Path:
    """A 10 second, 30 fps, 160x120 video."""
    return create_synthetic_video(output_dir=tmp_path / "videos", num_frames=300, fps=30.0)
