"""Configuration filename and accepted keys."""

from __future__ import annotations

CONFIG_FILENAME: str = "skillsync.yaml"

STRING_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "readme",
        "skill_dir",
        "references_dir",
        "main_skill_file",
        "reference_suffix",
        "section_heading",
        "default_base_ref",
        "remote",
        "main_skill_description",
        "placeholder_description",
    }
)

ALLOWED_CONFIG_KEYS: frozenset[str] = STRING_CONFIG_KEYS
