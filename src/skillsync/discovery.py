"""Workspace checks and reference file discovery."""

from __future__ import annotations

import logging
from pathlib import Path

from skillsync.config.model import SyncConfig
from skillsync.constants.sync import REFERENCE_SUFFIX
from skillsync.exceptions import MissingAnchorError

logger = logging.getLogger(__name__)


def ensure_workspace(root: Path, config: SyncConfig) -> tuple[Path, Path]:
    """Return the README and references paths, raising if either is missing."""
    readme_path = config.readme_path(root)
    if not readme_path.is_file():
        raise MissingAnchorError(f"{config.readme} not found.", readme_path)
    references_path = config.references_path(root)
    if not references_path.is_dir():
        raise MissingAnchorError("References directory not found.", references_path)
    return readme_path, references_path


def list_reference_files(directory: Path, suffix: str = REFERENCE_SUFFIX) -> tuple[str, ...]:
    """Return names of regular files ending in ``suffix``, in ordinal order."""
    names = sorted(entry.name for entry in directory.iterdir() if entry.is_file() and entry.name.endswith(suffix))
    logger.debug("Found %d reference file(s) in %s", len(names), directory)
    return tuple(names)
