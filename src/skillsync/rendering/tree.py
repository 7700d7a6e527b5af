"""Render the skill structure tree with aligned description comments."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from skillsync.config.model import SyncConfig
from skillsync.constants.sync import (
    BRANCH_GLYPH,
    CODE_FENCE,
    DESCRIPTION_SEPARATOR,
    LAST_BRANCH_GLYPH,
    NESTED_INDENT,
)


def render_structure_block(
    reference_files: Sequence[str],
    descriptions: Mapping[str, str],
    config: SyncConfig | None = None,
) -> str:
    """Render the tree for ``reference_files`` (already sorted) without fences.

    The main skill file is always listed first. Names are padded to the
    longest of the main skill file and all reference files so every ``#``
    comment starts in the same column. Empty or missing descriptions fall back
    to the configured defaults.
    """
    config = config or SyncConfig()
    main_name = config.main_skill_file
    width = max(len(name) for name in (main_name, *reference_files))

    lines = [
        f"{config.skill_root_name}/",
        _entry_line(
            BRANCH_GLYPH,
            main_name,
            width,
            descriptions.get(main_name) or config.main_skill_description,
        ),
        f"{LAST_BRANCH_GLYPH} {config.references_dir}/",
    ]

    last_index = len(reference_files) - 1
    for index, name in enumerate(reference_files):
        glyph = LAST_BRANCH_GLYPH if index == last_index else BRANCH_GLYPH
        description = descriptions.get(name) or config.placeholder_description
        lines.append(NESTED_INDENT + _entry_line(glyph, name, width, description))

    return "\n".join(lines)


def fence_block(content: str) -> str:
    """Wrap rendered content in a plain code fence."""
    return f"{CODE_FENCE}\n{content}\n{CODE_FENCE}"


def _entry_line(glyph: str, name: str, width: int, description: str) -> str:
    return f"{glyph} {name.ljust(width)}{DESCRIPTION_SEPARATOR}{description}".rstrip()
