"""Config data model for skillsync runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from skillsync.constants.sync import (
    DEFAULT_BASE_REF,
    DEFAULT_MAIN_SKILL_DESCRIPTION,
    DEFAULT_REMOTE,
    MAIN_SKILL_FILENAME,
    PLACEHOLDER_DESCRIPTION,
    README_FILENAME,
    REFERENCE_SUFFIX,
    REFERENCES_DIR_NAME,
    SECTION_HEADING,
    SKILL_DIR_NAME,
)


@dataclass(frozen=True)
class SyncConfig:
    """Resolved sync config."""

    readme: str = README_FILENAME
    skill_dir: str = SKILL_DIR_NAME
    references_dir: str = REFERENCES_DIR_NAME
    main_skill_file: str = MAIN_SKILL_FILENAME
    reference_suffix: str = REFERENCE_SUFFIX
    section_heading: str = SECTION_HEADING
    default_base_ref: str = DEFAULT_BASE_REF
    remote: str = DEFAULT_REMOTE
    main_skill_description: str = DEFAULT_MAIN_SKILL_DESCRIPTION
    placeholder_description: str = PLACEHOLDER_DESCRIPTION

    @property
    def references_pathspec(self) -> str:
        """Repository-relative path of the references directory, as passed to git."""
        return str(PurePosixPath(self.skill_dir) / self.references_dir)

    @property
    def skill_root_name(self) -> str:
        """Label for the root line of the rendered tree."""
        return PurePosixPath(self.skill_dir).name

    def readme_path(self, root: Path) -> Path:
        return root / self.readme

    def references_path(self, root: Path) -> Path:
        return root / self.skill_dir / self.references_dir
