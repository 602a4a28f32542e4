"""Typed failures raised by the vid2gif pipeline."""

from __future__ import annotations


class Vid2GifError(Exception):
    """Base class for every pipeline failure.

    ``stage`` names the pipeline stage that was running when the error was
    raised. The pipeline runner fills it in if the raiser did not.
    """

    def __init__(self, message: str, stage: str | None = None):
        super().__init__(message)
        self.stage = stage


class ConfigurationError(Vid2GifError):
    """Invalid run or pipeline configuration (missing source, bad YAML)."""


class WorkspaceError(Vid2GifError):
    """The frames workspace could not be prepared or holds no frames."""


class ExternalToolNotFound(Vid2GifError):
    """An external tool binary could not be located or launched."""

    def __init__(self, tool: str, detail: str = "", stage: str | None = None):
        message = f"{tool} not found. Make sure it is installed and on PATH"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, stage=stage)
        self.tool = tool


class ExternalToolError(Vid2GifError):
    """An external tool ran and exited with a failing status."""

    def __init__(
        self,
        tool: str,
        exit_code: int | None,
        stdout: str = "",
        stderr: str = "",
        stage: str | None = None,
    ):
        message = f"{tool} exited with code {exit_code}"
        last_line = _last_line(stderr)
        if last_line:
            message = f"{message}: {last_line}"
        super().__init__(message, stage=stage)
        self.tool = tool
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr


class ExternalToolTimeout(ExternalToolError):
    """An external tool did not finish within its configured timeout."""

    def __init__(
        self,
        tool: str,
        timeout: float,
        stdout: str = "",
        stderr: str = "",
        stage: str | None = None,
    ):
        super().__init__(tool, None, stdout=stdout, stderr=stderr, stage=stage)
        self.args = (f"{tool} did not finish within {timeout:g}s",)
        self.timeout = timeout


class ExternalToolLaunchError(ExternalToolError):
    """An external tool was found but the OS refused to start it (e.g. argument list too long)."""

    def __init__(self, tool: str, detail: str, stage: str | None = None):
        super().__init__(tool, None, stage=stage)
        self.args = (f"{tool} could not be started: {detail}",)


class FrameRateParseError(Vid2GifError):
    """No usable '<number> fps' token in the extraction diagnostics."""


def _last_line(text: str) -> str:
    lines = [line.strip() for line in (text or "").splitlines() if line.strip()]
    return lines[-1] if lines else ""
