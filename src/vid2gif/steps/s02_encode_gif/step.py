"""Step 02: Assemble the staged frames into a GIF with gifski."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar

from vid2gif.core.errors import Vid2GifError, WorkspaceError
from vid2gif.core.step_base import BaseStep
from vid2gif.utils.clamping import clamp_fps, clamp_quality
from vid2gif.utils.subprocess_utils import run_command
from .config import EncodeGifConfig
from .contracts import EncodeGifInput, EncodeGifOutput

logger = logging.getLogger(__name__)


class EncodeGifStep(BaseStep[EncodeGifInput, EncodeGifOutput, EncodeGifConfig]):
    name: ClassVar[str] = "encode_gif"
    input_type: ClassVar = EncodeGifInput
    output_type: ClassVar = EncodeGifOutput
    config_type: ClassVar = EncodeGifConfig
    validation_error: ClassVar[type[Vid2GifError]] = WorkspaceError

    def _frames(self, frames_dir: Path) -> list[Path]:
        return sorted(frames_dir.glob(self.config.frame_glob))

    def validate_inputs(self, inputs: EncodeGifInput) -> bool:
        if not inputs.frames_dir.is_dir():
            logger.error(f"Frames directory not found: {inputs.frames_dir}")
            return False
        if not self._frames(inputs.frames_dir):
            logger.error(f"No frames matching '{self.config.frame_glob}' in {inputs.frames_dir}")
            return False
        return True

    def build_command(self, inputs: EncodeGifInput, frames: list[Path]) -> list[str]:
        """gifski --fps N --quality Q -o file.gif frame*.png

        Runs inside the frames dir, so frames are passed by name only and the
        command line stays short for long videos.
        """
        fps = clamp_fps(inputs.fps, self.config.max_fps)
        quality = clamp_quality(inputs.quality, self.config.max_quality)
        return [
            self.config.gifski,
            "--fps", f"{fps:g}",
            "--quality", str(quality),
            "-o", str(inputs.output_path.absolute()),
            *self._frame_args(frames),
        ]

    def _frame_args(self, frames: list[Path]) -> list[str]:
        if self.config.pass_glob:
            return [self.config.frame_glob]
        return [f.name for f in frames]

    def run(self, inputs: EncodeGifInput) -> EncodeGifOutput:
        fps = clamp_fps(inputs.fps, self.config.max_fps)
        quality = clamp_quality(inputs.quality, self.config.max_quality)
        if fps != inputs.fps or quality != inputs.quality:
            logger.warning(f"Clamped fps {inputs.fps:g} -> {fps:g}, quality {inputs.quality} -> {quality}")

        frames = self._frames(inputs.frames_dir)
        logger.info(f"Running gifski on {len(frames)} frames. This might take a while.")
        run_command(
            self.build_command(inputs, frames),
            tool="gifski",
            cwd=inputs.frames_dir,
            timeout=self.config.timeout,
            verbose=self.verbose,
        )

        size = inputs.output_path.stat().st_size if inputs.output_path.exists() else 0
        logger.info(f"gifski complete: {inputs.output_path} ({size} bytes)")
        return EncodeGifOutput(
            output_path=inputs.output_path,
            fps_used=fps,
            quality_used=quality,
            frame_count=len(frames),
            size_bytes=size,
        )
