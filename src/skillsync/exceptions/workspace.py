"""Workspace layout exceptions."""

from __future__ import annotations

from pathlib import Path

from skillsync.exceptions.base import SkillSyncError


class MissingAnchorError(SkillSyncError):
    """Raised when the README or the references directory does not exist."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path
