"""Config loading and normalization for skillsync runs."""

from __future__ import annotations

import difflib
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from skillsync.config.model import SyncConfig
from skillsync.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME, STRING_CONFIG_KEYS
from skillsync.exceptions import ConfigError

def load_config(root: Path, config_path: Path | None = None) -> SyncConfig:
    """Load and validate config from ``skillsync.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SyncConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file at {path} is not valid UTF-8: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(raw, key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            raise ConfigError(f"Unknown config key `{key}`{_suggest_key(str(key))}")

    overrides: dict[str, str] = {}
    for key in sorted(STRING_CONFIG_KEYS):
        if key in raw:
            overrides[key] = _ensure_string(raw[key], key)

    suffix = overrides.get("reference_suffix")
    if suffix is not None and not suffix.startswith("."):
        raise ConfigError("reference_suffix must start with '.'")

    return replace(SyncConfig(), **overrides)


def _ensure_string(value: Any, key_name: str) -> str:
    """Return a stripped string, raising ConfigError on type mismatch or blank values."""
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    stripped = value.strip()
    if not stripped:
        raise ConfigError(f"{key_name} must not be empty")
    return stripped


def _suggest_key(key: str) -> str:
    matches = difflib.get_close_matches(key, sorted(ALLOWED_CONFIG_KEYS), n=1, cutoff=0.6)
    if not matches:
        return ""
    return f" (did you mean `{matches[0]}`?)"
