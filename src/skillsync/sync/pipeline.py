"""End-to-end README sync: resolve, detect, extract, render, patch."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from skillsync.config.model import SyncConfig
from skillsync.context import load_event_payload, resolve_base_ref
from skillsync.discovery import ensure_workspace, list_reference_files
from skillsync.exceptions import ReadmeDecodeError
from skillsync.git import GitClient, parse_name_status
from skillsync.io import read_text, write_text_atomic
from skillsync.model import SyncResult
from skillsync.parsers import find_structure_block, parse_descriptions
from skillsync.readme import patch_readme
from skillsync.rendering import fence_block, render_structure_block

logger = logging.getLogger(__name__)


class ChangeDetector(Protocol):
    """Anything that can report name-status changes under a path."""

    def diff_name_status(self, base_ref: str, pathspec: str, *, remote: str = ...) -> str: ...


def sync_readme(
    root: Path,
    config: SyncConfig | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    git: ChangeDetector | None = None,
    base_ref: str | None = None,
    force: bool = False,
    check: bool = False,
) -> SyncResult:
    """Rebuild the README skill structure block if reference files changed.

    ``force`` skips the change detection short-circuit. ``check`` computes the
    new README but never writes it, reporting ``drift`` instead of ``updated``.
    """
    config = config or SyncConfig()
    environ = os.environ if environ is None else environ
    readme_path, references_path = ensure_workspace(root, config)

    if base_ref is not None:
        base_ref = base_ref.strip() or None
    if base_ref is None:
        base_ref = resolve_base_ref(environ, load_event_payload(environ), config.default_base_ref)

    changed_paths = ()
    if not force:
        detector = git if git is not None else GitClient(root)
        diff = detector.diff_name_status(base_ref, config.references_pathspec, remote=config.remote)
        if not diff:
            return SyncResult(status="no_changes", readme_path=readme_path, base_ref=base_ref)
        changed_paths = parse_name_status(diff)
        for changed in changed_paths:
            logger.info("Reference change %s %s", changed.status, changed.path)

    try:
        readme_text = read_text(readme_path)
    except UnicodeDecodeError as exc:
        raise ReadmeDecodeError(f"{config.readme} is not valid UTF-8: {exc}") from exc
    block = find_structure_block(readme_text, config.section_heading)
    descriptions = parse_descriptions(block.content, config.reference_suffix)

    reference_files = list_reference_files(references_path, config.reference_suffix)
    rendered = render_structure_block(reference_files, descriptions, config)
    patch = patch_readme(readme_text, block, fence_block(rendered))

    if not patch.changed:
        status = "up_to_date"
    elif check:
        status = "drift"
    else:
        write_text_atomic(readme_path, patch.text)
        status = "updated"

    return SyncResult(
        status=status,
        readme_path=readme_path,
        base_ref=base_ref,
        changed_paths=changed_paths,
        reference_files=reference_files,
        rendered_block=rendered,
    )
