"""Configuration-related exceptions."""

from __future__ import annotations

from skillsync.exceptions.base import SkillSyncError


class ConfigError(SkillSyncError, ValueError):
    """Raised when skillsync configuration is invalid."""
