"""vid2gif core: base step, shared contracts, errors, workspace."""

from .step_base import BaseStep
from .contracts import PipelineConfig, PipelineResult, PipelineStage, RunConfig
from .errors import (
    ConfigurationError,
    ExternalToolError,
    ExternalToolLaunchError,
    ExternalToolNotFound,
    ExternalToolTimeout,
    FrameRateParseError,
    Vid2GifError,
    WorkspaceError,
)
from .logging import setup_logging
from .workspace import Workspace

__all__ = [
    "BaseStep",
    "PipelineConfig",
    "PipelineResult",
    "PipelineStage",
    "RunConfig",
    "ConfigurationError",
    "ExternalToolError",
    "ExternalToolLaunchError",
    "ExternalToolNotFound",
    "ExternalToolTimeout",
    "FrameRateParseError",
    "Vid2GifError",
    "WorkspaceError",
    "setup_logging",
    "Workspace",
]
