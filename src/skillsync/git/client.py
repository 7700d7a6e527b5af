"""Thin wrapper around the ``git`` executable."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from skillsync.constants.sync import DEFAULT_REMOTE
from skillsync.exceptions import GitCommandError

logger = logging.getLogger(__name__)


class GitClient:
    """Runs git commands inside a working tree."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def diff_name_status(self, base_ref: str, pathspec: str, *, remote: str = DEFAULT_REMOTE) -> str:
        """Return ``git diff --name-status`` output for ``pathspec`` since the merge base with ``base_ref``."""
        revision_range = f"{remote}/{base_ref}...HEAD"
        return self._run("diff", revision_range, "--name-status", "--", pathspec)

    def _run(self, *args: str) -> str:
        command = ("git", *args)
        logger.debug("Running %s", " ".join(command))
        try:
            completed = subprocess.run(
                command,
                cwd=self._root,
                check=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
            )
        except FileNotFoundError as exc:
            raise GitCommandError(command, stderr="git executable not found") from exc
        except subprocess.CalledProcessError as exc:
            raise GitCommandError(command, stderr=exc.stderr or "", returncode=exc.returncode) from exc
        return completed.stdout.strip()
