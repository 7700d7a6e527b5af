"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "skillsync"
CLI_DESCRIPTION: str = (
    f"{BRAND_NAME}: rebuild the README skill structure block when reference files change.\n"
    "\n"
    "Run from the repository root. The base ref comes from --base-ref, GITHUB_BASE_REF,\n"
    "the pull request in GITHUB_EVENT_PATH, or the configured default."
)
