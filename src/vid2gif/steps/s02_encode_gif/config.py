"""Configuration for Step 02: Frames to GIF."""

import os

from pydantic import BaseModel, Field

from vid2gif.utils.clamping import MAX_FPS, MAX_QUALITY


class EncodeGifConfig(BaseModel):
    gifski: str = Field("gifski", description="gifski command name (looked up on PATH) or path")
    frame_glob: str = Field("frame*.png", description="Glob selecting the staged frames")
    pass_glob: bool = Field(
        default_factory=lambda: os.name == "nt",
        description="Hand gifski the glob itself instead of the frame names (gifski expands it on Windows)",
    )
    max_quality: int = Field(MAX_QUALITY, ge=0, le=MAX_QUALITY, description="Upper bound for --quality")
    max_fps: float = Field(MAX_FPS, ge=0, le=MAX_FPS, description="Upper bound for --fps")
    timeout: float | None = Field(None, description="Seconds before gifski is killed (None = no limit)")
