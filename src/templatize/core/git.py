"""Thin wrapper around the ``git`` executable."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from templatize.contracts.exceptions import CloneError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitClient:
    """Runs ``git`` as a subprocess.

    Output is not captured: ``git``'s stdout and stderr go straight to the
    operator's terminal while the call blocks.
    """

    executable: str = "git"

    def clone(self, url: str, target: Path) -> None:
        cmd = [self.executable, "clone", url, str(target)]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, check=False)
        except OSError as exc:
            raise CloneError(f"failed to execute {self.executable}: {exc}") from exc
        if result.returncode != 0:
            raise CloneError(
                f"failed to clone repository: {self.executable} exited with status {result.returncode}",
                returncode=result.returncode,
            )

    def remove_metadata(self, target: Path) -> bool:
        """Delete ``target/.git``. Returns ``False`` (with a warning) on failure."""
        git_dir = target / ".git"
        if not git_dir.exists() and not git_dir.is_symlink():
            return True
        try:
            if git_dir.is_dir() and not git_dir.is_symlink():
                shutil.rmtree(git_dir)
            else:
                # Worktrees and submodules use a ".git" file pointing elsewhere.
                git_dir.unlink()
        except OSError as exc:
            logger.warning("could not remove .git directory: %s", exc)
            return False
        return True


__all__ = ["GitClient"]
