"""Recover the source frame rate from ffmpeg's diagnostic output."""

from __future__ import annotations

import logging
import re

from vid2gif.core.errors import FrameRateParseError

logger = logging.getLogger(__name__)

# ffmpeg reports the input stream as e.g. "Video: h264 ..., 29.97 fps, 29.97 tbr".
# Progress lines use "fps=" and come later, so the first match is the stream rate.
FPS_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s+fps\b")


def parse_frame_rate(diagnostics: str) -> float:
    """Return the first '<number> fps' value found in ``diagnostics``."""
    match = FPS_PATTERN.search(diagnostics or "")
    if match is None:
        raise FrameRateParseError("Could not find the frame rate in ffmpeg output. Pass --fps explicitly")
    try:
        return float(match.group(1))
    except ValueError as e:
        raise FrameRateParseError(f"Invalid frame rate '{match.group(1)}' in ffmpeg output") from e


def resolve_frame_rate(explicit_fps: float | None, diagnostics: str) -> float:
    """Frame rate to encode at: the explicit value if given, else parsed.

    The explicit value is returned unclamped; clamping happens right before
    the encoder is invoked.
    """
    if explicit_fps is not None:
        logger.debug(f"Using explicit frame rate {explicit_fps}")
        return explicit_fps
    fps = parse_frame_rate(diagnostics)
    logger.info(f"Detected source frame rate: {fps:g} fps")
    return fps
