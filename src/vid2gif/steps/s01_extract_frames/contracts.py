"""I/O contracts for Step 01: Video to Frames extraction."""

from pathlib import Path
from pydantic import BaseModel, Field


class ExtractFramesInput(BaseModel):
    video_path: Path = Field(..., description="Path to input video file")
    frames_dir: Path = Field(..., description="Workspace directory to write frames into")


class ExtractFramesOutput(BaseModel):
    frames_dir: Path = Field(..., description="Directory containing extracted frames")
    frame_count: int = Field(..., description="Number of frames extracted")
    frame_list: list[str] = Field(default_factory=list, description="List of frame filenames")
    diagnostics: str = Field("", description="ffmpeg stderr, which reports the source frame rate")
