"""Configuration loading and normalization for skillsync."""

from __future__ import annotations

from skillsync.config.loader import load_config
from skillsync.config.model import SyncConfig

__all__ = ["SyncConfig", "load_config"]
