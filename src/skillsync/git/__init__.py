"""Git helpers used to detect reference file changes."""

from __future__ import annotations

from skillsync.git.client import GitClient
from skillsync.git.name_status import parse_name_status

__all__ = ["GitClient", "parse_name_status"]
