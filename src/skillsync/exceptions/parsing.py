"""Parsing-related exceptions."""

from __future__ import annotations

from skillsync.exceptions.base import SkillSyncError


class EventPayloadError(SkillSyncError, ValueError):
    """Raised when the CI event payload file is not valid JSON."""


class StructureBlockNotFoundError(SkillSyncError, ValueError):
    """Raised when the README has no skill structure heading followed by a fenced block."""


class ReadmeDecodeError(SkillSyncError, ValueError):
    """Raised when the README cannot be decoded as UTF-8."""
