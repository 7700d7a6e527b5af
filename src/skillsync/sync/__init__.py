"""README sync pipeline."""

from __future__ import annotations

from skillsync.sync.pipeline import ChangeDetector, sync_readme

__all__ = ["ChangeDetector", "sync_readme"]
