"""Base exception for skillsync."""

from __future__ import annotations


class SkillSyncError(Exception):
    """Base class for all errors raised by skillsync."""
