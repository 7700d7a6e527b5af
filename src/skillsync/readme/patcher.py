"""Apply a rendered structure block to README text."""

from __future__ import annotations

from skillsync.model import PatchResult, StructureBlock


def patch_readme(readme_text: str, block: StructureBlock, fenced_block: str) -> PatchResult:
    """Replace the located fenced block, keeping all other text verbatim."""
    updated = readme_text[: block.fence_start] + fenced_block + readme_text[block.fence_end :]
    return PatchResult(text=updated, changed=updated != readme_text)
