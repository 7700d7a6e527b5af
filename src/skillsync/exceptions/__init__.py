"""Shared exception hierarchy for skillsync."""

from __future__ import annotations

from .base import SkillSyncError
from .config import ConfigError
from .git import GitCommandError
from .parsing import EventPayloadError, ReadmeDecodeError, StructureBlockNotFoundError
from .workspace import MissingAnchorError

__all__ = [
    "ConfigError",
    "EventPayloadError",
    "GitCommandError",
    "MissingAnchorError",
    "ReadmeDecodeError",
    "SkillSyncError",
    "StructureBlockNotFoundError",
]
