"""Locate the skill structure block in a README and recover its descriptions."""

from __future__ import annotations

import re

from skillsync.constants.sync import (
    BRANCH_GLYPHS,
    CODE_FENCE,
    COMMENT_MARKER,
    REFERENCE_SUFFIX,
    SECTION_HEADING,
)
from skillsync.exceptions import StructureBlockNotFoundError
from skillsync.model import StructureBlock


def find_structure_block(readme_text: str, heading: str = SECTION_HEADING) -> StructureBlock:
    """Return the first fenced block following ``heading``.

    Matching is non-greedy: the heading's first occurrence, then the nearest
    opening fence after it, then the nearest closing fence.
    """
    pattern = re.compile(
        rf"{re.escape(heading)}.*?(?P<fence>{CODE_FENCE}(?P<content>.*?){CODE_FENCE})",
        re.DOTALL,
    )
    match = pattern.search(readme_text)
    if match is None:
        raise StructureBlockNotFoundError(f"{heading.lstrip('# ')} code block not found in README.")
    return StructureBlock(
        heading_start=match.start(),
        fence_start=match.start("fence"),
        fence_end=match.end("fence"),
        content=match.group("content").strip(),
    )


def parse_descriptions(block_content: str, suffix: str = REFERENCE_SUFFIX) -> dict[str, str]:
    """Map each listed file name to its trailing ``#`` comment ("" when absent)."""
    descriptions: dict[str, str] = {}
    for line in block_content.splitlines():
        entry = parse_description_line(line, suffix)
        if entry is not None:
            name, description = entry
            descriptions[name] = description
    return descriptions


def parse_description_line(line: str, suffix: str = REFERENCE_SUFFIX) -> tuple[str, str] | None:
    """Parse one tree line of the form ``<glyph> <name><suffix>  # <comment>``.

    Returns None for lines without a branch glyph, lines whose entry does not
    end with ``suffix`` (directories, other files) and lines with more than
    one token before the comment.
    """
    remainder = _after_glyph(line)
    if remainder is None:
        return None

    head, marker, comment = remainder.partition(COMMENT_MARKER)
    tokens = head.split()
    if len(tokens) != 1:
        return None
    name = tokens[0]
    if not name.endswith(suffix) or len(name) == len(suffix):
        return None
    return name, comment.strip() if marker else ""


def _after_glyph(line: str) -> str | None:
    positions = [(line.find(glyph), glyph) for glyph in BRANCH_GLYPHS if glyph in line]
    if not positions:
        return None
    index, glyph = min(positions)
    remainder = line[index + len(glyph) :]
    # The glyph must be separated from the entry name.
    if not remainder[:1].isspace():
        return None
    return remainder
