"""Dataclasses passed between pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillsync.constants.reporting import SCHEMA_VERSION
from skillsync.types import JsonObject, SyncStatus


@dataclass(frozen=True)
class ChangedPath:
    """One row of ``git diff --name-status`` output."""

    status: str
    path: str
    previous_path: str | None = None

    def to_dict(self) -> JsonObject:
        return {
            "status": self.status,
            "path": self.path,
            "previous_path": self.previous_path,
        }


@dataclass(frozen=True)
class StructureBlock:
    """Location of the skill structure fenced block inside a README.

    ``fence_start``/``fence_end`` delimit the fenced block including both
    fence markers; ``content`` is the text between the markers, stripped.
    """

    heading_start: int
    fence_start: int
    fence_end: int
    content: str


@dataclass(frozen=True)
class PatchResult:
    """README text after substituting the rendered block."""

    text: str
    changed: bool


@dataclass(frozen=True)
class SyncResult:
    """Outcome of one sync run."""

    status: SyncStatus
    readme_path: Path
    base_ref: str
    changed_paths: tuple[ChangedPath, ...] = ()
    reference_files: tuple[str, ...] = ()
    rendered_block: str | None = None

    @property
    def wrote_readme(self) -> bool:
        return self.status == "updated"

    def to_dict(self) -> JsonObject:
        """Serialize to a JSON-compatible mapping."""
        return {
            "schema_version": SCHEMA_VERSION,
            "status": self.status,
            "readme": str(self.readme_path),
            "base_ref": self.base_ref,
            "changed_paths": [changed.to_dict() for changed in self.changed_paths],
            "reference_files": list(self.reference_files),
            "wrote_readme": self.wrote_readme,
        }
