"""Safe subprocess runner for external tools (ffmpeg, gifski)."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from vid2gif.core.errors import (
    ExternalToolError,
    ExternalToolLaunchError,
    ExternalToolNotFound,
    ExternalToolTimeout,
)

logger = logging.getLogger(__name__)


def resolve_tool(command: str, tool: str | None = None) -> str:
    """Resolve a command name through PATH, or check an explicit path."""
    resolved = shutil.which(command)
    if resolved is None:
        raise ExternalToolNotFound(tool or Path(command).name, f"looked up '{command}'")
    # absolute, so a relative tool path still works when cwd is changed
    return os.path.abspath(resolved)


def run_command(
    cmd: list[str],
    tool: str | None = None,
    cwd: Path | None = None,
    timeout: float | None = None,
    verbose: bool = False,
) -> subprocess.CompletedProcess:
    """Run an external command, blocking until it exits and its output is drained.

    ``cmd[0]`` may be a bare command name or a path to the binary. Output is
    decoded as UTF-8 with invalid bytes replaced. With ``verbose`` the tool's
    output is logged at INFO instead of DEBUG.
    """
    tool = tool or Path(cmd[0]).name
    executable = resolve_tool(cmd[0], tool)
    cmd = [executable, *cmd[1:]]
    cmd_str = " ".join(cmd)
    logger.info(f"Running: {cmd_str}")

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        raise ExternalToolTimeout(tool, timeout, stdout=_as_text(e.stdout), stderr=_as_text(e.stderr)) from e
    except (FileNotFoundError, PermissionError) as e:
        raise ExternalToolNotFound(tool, str(e)) from e
    except OSError as e:
        raise ExternalToolLaunchError(tool, str(e)) from e

    log_level = logging.INFO if verbose else logging.DEBUG
    if result.stdout:
        logger.log(log_level, f"stdout: {result.stdout[-500:]}")
    if result.stderr:
        logger.log(log_level, f"stderr: {result.stderr[-500:]}")

    if result.returncode != 0:
        raise ExternalToolError(tool, result.returncode, stdout=result.stdout, stderr=result.stderr)
    return result


def _as_text(output: str | bytes | None) -> str:
    # TimeoutExpired carries raw bytes even when text mode was requested
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output
