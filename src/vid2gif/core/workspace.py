"""Temporary frames directory shared by the extract and encode steps."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .errors import WorkspaceError

logger = logging.getLogger(__name__)


class Workspace:
    """Owns the one directory that frames are staged in during a run.

    prepare() always yields an empty directory, so frames left behind by a
    crashed run never leak into the next one. teardown() is best effort and
    reports failures instead of raising them.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def prepare(self) -> Path:
        """Remove any stale directory at the workspace path, then create it."""
        if self.path.is_dir():
            try:
                shutil.rmtree(self.path)
            except FileNotFoundError:
                pass
            except OSError as e:
                raise WorkspaceError(f"Cannot remove stale workspace {self.path}: {e}") from e
            logger.debug(f"Removed stale workspace {self.path}")

        try:
            self.path.mkdir(parents=True)
        except OSError as e:
            raise WorkspaceError(f"Cannot create workspace {self.path}: {e}") from e

        logger.debug(f"Created workspace {self.path}")
        return self.path

    def teardown(self) -> str | None:
        """Remove the workspace recursively. Returns a warning on failure."""
        if not self.path.exists():
            return None
        try:
            shutil.rmtree(self.path)
        except OSError as e:
            warning = f"Could not remove workspace {self.path}: {e}"
            logger.warning(warning)
            return warning
        logger.debug(f"Removed workspace {self.path}")
        return None

