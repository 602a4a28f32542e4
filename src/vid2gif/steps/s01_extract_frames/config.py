"""Configuration for Step 01: Video to Frames."""

from pydantic import BaseModel, Field


class ExtractFramesConfig(BaseModel):
    ffmpeg: str = Field("ffmpeg", description="ffmpeg command name (looked up on PATH) or path")
    frame_pattern: str = Field("frame%04d", description="Zero-padded frame name pattern, without extension")
    image_format: str = Field("png", description="Frame image format")
    timeout: float | None = Field(None, description="Seconds before ffmpeg is killed (None = no limit)")
