"""I/O contracts for Step 02: Frames to GIF encoding."""

from pathlib import Path
from pydantic import BaseModel, Field


class EncodeGifInput(BaseModel):
    frames_dir: Path = Field(..., description="Directory containing extracted frames")
    output_path: Path = Field(..., description="Animation file to write")
    fps: float = Field(..., description="Frame rate, clamped before use")
    quality: int = Field(100, description="Quality, clamped before use")


class EncodeGifOutput(BaseModel):
    output_path: Path = Field(..., description="Written animation file")
    fps_used: float = Field(..., description="Clamped frame rate passed to gifski")
    quality_used: int = Field(..., description="Clamped quality passed to gifski")
    frame_count: int = Field(..., description="Number of frames encoded")
    size_bytes: int = Field(0, description="Size of the written file")
