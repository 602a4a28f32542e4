"""Step 01: Split a video into numbered frame images with ffmpeg."""

from __future__ import annotations

import logging
from typing import ClassVar

from vid2gif.core.errors import ConfigurationError, Vid2GifError
from vid2gif.core.step_base import BaseStep
from vid2gif.utils.subprocess_utils import run_command
from .config import ExtractFramesConfig
from .contracts import ExtractFramesInput, ExtractFramesOutput

logger = logging.getLogger(__name__)


class ExtractFramesStep(BaseStep[ExtractFramesInput, ExtractFramesOutput, ExtractFramesConfig]):
    name: ClassVar[str] = "extract_frames"
    input_type: ClassVar = ExtractFramesInput
    output_type: ClassVar = ExtractFramesOutput
    config_type: ClassVar = ExtractFramesConfig
    validation_error: ClassVar[type[Vid2GifError]] = ConfigurationError

    def validate_inputs(self, inputs: ExtractFramesInput) -> bool:
        if not inputs.video_path.is_file():
            logger.error(f"Video not found: {inputs.video_path}")
            return False
        if not inputs.frames_dir.is_dir():
            logger.error(f"Frames directory not found: {inputs.frames_dir}")
            return False
        return True

    def build_command(self, inputs: ExtractFramesInput) -> list[str]:
        """ffmpeg -i video.mp4 <frames_dir>/frame%04d.png"""
        pattern = inputs.frames_dir / f"{self.config.frame_pattern}.{self.config.image_format}"
        return [self.config.ffmpeg, "-i", str(inputs.video_path), str(pattern)]

    def run(self, inputs: ExtractFramesInput) -> ExtractFramesOutput:
        logger.info("Splitting video into frames")
        result = run_command(
            self.build_command(inputs),
            tool="ffmpeg",
            timeout=self.config.timeout,
            verbose=self.verbose,
        )

        frames = sorted(p.name for p in inputs.frames_dir.glob(f"*.{self.config.image_format}"))
        logger.info(f"Frame conversion complete: {len(frames)} frames")
        return ExtractFramesOutput(
            frames_dir=inputs.frames_dir,
            frame_count=len(frames),
            frame_list=frames,
            diagnostics=result.stderr or "",
        )
