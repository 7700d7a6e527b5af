"""Layout defaults and tree glyphs for the skill structure block."""

from __future__ import annotations

README_FILENAME: str = "README.md"
SKILL_DIR_NAME: str = "swift-concurrency"
REFERENCES_DIR_NAME: str = "references"
MAIN_SKILL_FILENAME: str = "SKILL.md"
REFERENCE_SUFFIX: str = ".md"

SECTION_HEADING: str = "## Skill Structure"
CODE_FENCE: str = "```"

DEFAULT_BASE_REF: str = "main"
DEFAULT_REMOTE: str = "origin"

BASE_REF_ENV_VAR: str = "GITHUB_BASE_REF"
EVENT_PATH_ENV_VAR: str = "GITHUB_EVENT_PATH"

BRANCH_GLYPH: str = "├──"
LAST_BRANCH_GLYPH: str = "└──"
BRANCH_GLYPHS: tuple[str, ...] = (BRANCH_GLYPH, LAST_BRANCH_GLYPH)
NESTED_INDENT: str = "    "
COMMENT_MARKER: str = "#"
DESCRIPTION_SEPARATOR: str = "   # "

DEFAULT_MAIN_SKILL_DESCRIPTION: str = "Main skill file with decision trees"
PLACEHOLDER_DESCRIPTION: str = "TODO: Add description"
