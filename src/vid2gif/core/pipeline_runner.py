"""Pipeline orchestrator: video -> frames -> frame rate -> GIF, then cleanup."""

from __future__ import annotations

import logging
import threading
import time
from pathlib import Path

import yaml
from pydantic import ValidationError

from vid2gif.steps.s01_extract_frames.contracts import ExtractFramesInput
from vid2gif.steps.s01_extract_frames.step import ExtractFramesStep
from vid2gif.steps.s02_encode_gif.contracts import EncodeGifInput
from vid2gif.steps.s02_encode_gif.step import EncodeGifStep
from vid2gif.utils.frame_rate import resolve_frame_rate
from vid2gif.utils.output_path import resolve_output_path

from .contracts import PipelineConfig, PipelineResult, PipelineStage, RunConfig
from .errors import ConfigurationError, Vid2GifError
from .workspace import Workspace

logger = logging.getLogger(__name__)

# The workspace path is shared by every run in this process.
_RUN_LOCK = threading.Lock()

# Steps by name, for schema introspection.
STEPS = {
    ExtractFramesStep.name: ExtractFramesStep,
    EncodeGifStep.name: EncodeGifStep,
}

# Label used in error messages for the stage being attempted.
_STAGE_LABELS = {
    PipelineStage.INIT: "configuration",
    PipelineStage.WORKSPACE_READY: "workspace",
    PipelineStage.FRAMES_EXTRACTED: "frame extraction (ffmpeg)",
    PipelineStage.RATE_RESOLVED: "frame rate detection",
    PipelineStage.OUTPUT_RESOLVED: "output path",
    PipelineStage.ENCODED: "encoding (gifski)",
}


def load_pipeline_config(config_path: Path | None, required: bool = False) -> PipelineConfig:
    """Load and validate pipeline.yaml.

    A missing file gives the built-in defaults unless ``required`` is set.
    """
    if config_path is None:
        return PipelineConfig()
    config_path = Path(config_path)
    if not config_path.exists():
        if required:
            raise ConfigurationError(f"Config file not found: {config_path}")
        logger.debug(f"No config at {config_path}, using defaults")
        return PipelineConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        return PipelineConfig(**raw)
    except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
        raise ConfigurationError(f"Invalid config {config_path}: {e}") from e


def validate_run_config(run_config: RunConfig) -> str:
    """Check the source file and return its stem."""
    source = run_config.source_path
    if not source.is_file():
        raise ConfigurationError(f"Input file not found: {source}")
    if not source.stem:
        raise ConfigurationError(f"Input file has no usable name: {source}")
    return source.stem


def run_pipeline(run_config: RunConfig, pipeline_cfg: PipelineConfig | None = None) -> PipelineResult:
    """Convert one video to a GIF.

    Every stage failure aborts the run. The workspace is removed in all
    cases; a failed removal is only reported as ``cleanup_warning`` (or
    logged, when the run itself failed).
    """
    pipeline_cfg = pipeline_cfg or PipelineConfig()
    with _RUN_LOCK:
        return _run(run_config, pipeline_cfg)


def _run(run_config: RunConfig, pipeline_cfg: PipelineConfig) -> PipelineResult:
    stages = [PipelineStage.INIT]
    attempting = PipelineStage.INIT
    workspace = Workspace(pipeline_cfg.workspace_dir)
    t0 = time.time()
    failed = True

    try:
        file_stem = validate_run_config(run_config)
        logger.info(f"input: {run_config.source_path}")
        logger.debug(f"frames dir: {workspace.path}")

        attempting = PipelineStage.WORKSPACE_READY
        frames_dir = workspace.prepare()
        stages.append(attempting)

        attempting = PipelineStage.FRAMES_EXTRACTED
        extract = ExtractFramesStep(config=pipeline_cfg.extract, verbose=run_config.verbose)
        extracted = extract.execute(ExtractFramesInput(video_path=run_config.source_path, frames_dir=frames_dir))
        stages.append(attempting)

        attempting = PipelineStage.RATE_RESOLVED
        fps = resolve_frame_rate(run_config.fps, extracted.diagnostics)
        stages.append(attempting)

        attempting = PipelineStage.OUTPUT_RESOLVED
        output_path = resolve_output_path(
            run_config.source_path,
            run_config.output,
            file_stem=file_stem,
            suffix=pipeline_cfg.output_suffix,
            extension=pipeline_cfg.output_extension,
        )
        logger.info(f"output: {output_path}")
        stages.append(attempting)

        attempting = PipelineStage.ENCODED
        encode = EncodeGifStep(config=pipeline_cfg.encode, verbose=run_config.verbose)
        encoded = encode.execute(
            EncodeGifInput(
                frames_dir=frames_dir,
                output_path=output_path,
                fps=fps,
                quality=run_config.quality,
            )
        )
        stages.append(attempting)
        failed = False
    except Vid2GifError as e:
        if e.stage is None:
            e.stage = _STAGE_LABELS[attempting]
        logger.error(f"{e.stage} failed: {e}")
        raise
    finally:
        cleanup_warning = workspace.teardown()
        stages.append(PipelineStage.FAILED if failed else PipelineStage.CLEANED_UP)

    return PipelineResult(
        output_path=encoded.output_path,
        fps=fps,
        fps_used=encoded.fps_used,
        quality_used=encoded.quality_used,
        frame_count=encoded.frame_count,
        stages=stages,
        elapsed_seconds=time.time() - t0,
        cleanup_warning=cleanup_warning,
    )
