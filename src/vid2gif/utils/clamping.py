"""Keep encoder arguments inside the ranges gifski accepts."""

from __future__ import annotations

MAX_QUALITY = 100
MAX_FPS = 50.0


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def clamp_quality(quality: int, high: int = MAX_QUALITY) -> int:
    return int(clamp(quality, 0, min(high, MAX_QUALITY)))


def clamp_fps(fps: float, high: float = MAX_FPS) -> float:
    return float(clamp(fps, 0.0, min(high, MAX_FPS)))
