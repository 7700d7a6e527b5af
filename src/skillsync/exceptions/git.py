"""Version-control exceptions."""

from __future__ import annotations

from skillsync.exceptions.base import SkillSyncError


class GitCommandError(SkillSyncError, RuntimeError):
    """Raised when a git command cannot be run or exits non-zero."""

    def __init__(self, command: tuple[str, ...], stderr: str = "", returncode: int | None = None) -> None:
        self.command = command
        self.stderr = stderr
        self.returncode = returncode
        detail = stderr.strip() or "command failed"
        if returncode is not None:
            detail = f"{detail} (exit {returncode})"
        super().__init__(f"`{' '.join(command)}`: {detail}")
