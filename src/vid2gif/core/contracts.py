"""Common Pydantic models shared across the pipeline."""

from __future__ import annotations

import tempfile
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from vid2gif.steps.s01_extract_frames.config import ExtractFramesConfig
from vid2gif.steps.s02_encode_gif.config import EncodeGifConfig

DEFAULT_WORKSPACE = Path(tempfile.gettempdir()) / "vid2gif_frames"


class PipelineStage(str, Enum):
    """Stages of one conversion run, in the order they are reached."""

    INIT = "init"
    WORKSPACE_READY = "workspace_ready"
    FRAMES_EXTRACTED = "frames_extracted"
    RATE_RESOLVED = "rate_resolved"
    OUTPUT_RESOLVED = "output_resolved"
    ENCODED = "encoded"
    CLEANED_UP = "cleaned_up"
    FAILED = "failed"


class RunConfig(BaseModel):
    """Per-run options supplied by the CLI. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    source_path: Path = Field(..., description="Video file to convert")
    output: str | None = Field(
        None, description="Output name or path (bare name, relative/absolute path, name without extension)"
    )
    quality: int = Field(100, description="gifski quality, clamped to [0, 100] before use")
    fps: float | None = Field(None, description="Explicit frame rate; parsed from ffmpeg output when omitted")
    verbose: bool = Field(False, description="Log external tool output")


class PipelineConfig(BaseModel):
    """Tool locations and naming, loaded from pipeline.yaml."""

    project_name: str = "vid2gif"
    workspace_dir: Path = Field(DEFAULT_WORKSPACE, description="Temporary frames directory")
    output_suffix: str = Field("gifski", description="Suffix of the default output name")
    output_extension: str = Field(".gif", description="Extension of the animation")
    extract: ExtractFramesConfig = Field(default_factory=ExtractFramesConfig)
    encode: EncodeGifConfig = Field(default_factory=EncodeGifConfig)


class PipelineResult(BaseModel):
    """Outcome of a successful run."""

    output_path: Path
    fps: float = Field(..., description="Resolved frame rate before clamping")
    fps_used: float
    quality_used: int
    frame_count: int
    stages: list[PipelineStage] = Field(default_factory=list)
    elapsed_seconds: float = 0.0
    cleanup_warning: str | None = None
