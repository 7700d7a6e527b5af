"""Constants for outcome reporting."""

from __future__ import annotations

SCHEMA_VERSION: str = "1"

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})

ANSI_RESET: str = "\033[0m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_DIM: str = "\033[2m"

OUTCOME_MESSAGES: dict[str, str] = {
    "no_changes": "No reference file changes detected. Skipping README sync.",
    "up_to_date": "README already up to date.",
    "updated": "README updated with latest reference files.",
    "drift": "README skill structure is out of date.",
}

OUTCOME_COLORS: dict[str, str] = {
    "no_changes": ANSI_DIM,
    "up_to_date": ANSI_GREEN,
    "updated": ANSI_GREEN,
    "drift": ANSI_YELLOW,
}
