"""Resolve the base ref a run diffs against.

Lookup order: ``GITHUB_BASE_REF``, then ``pull_request.base.ref`` from the
event payload file named by ``GITHUB_EVENT_PATH``, then the configured default.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from skillsync.constants.sync import BASE_REF_ENV_VAR, DEFAULT_BASE_REF, EVENT_PATH_ENV_VAR
from skillsync.exceptions import EventPayloadError
from skillsync.types import JsonValue

logger = logging.getLogger(__name__)


def load_event_payload(environ: Mapping[str, str]) -> JsonValue:
    """Parse the event payload file, or return None when it is not configured or absent."""
    event_path = environ.get(EVENT_PATH_ENV_VAR)
    if not event_path:
        return None
    path = Path(event_path)
    if not path.is_file():
        logger.debug("Event payload file not found: %s", path)
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise EventPayloadError(f"Invalid event payload JSON at {path}: {exc}") from exc


def resolve_base_ref(
    environ: Mapping[str, str],
    payload: JsonValue = None,
    default: str = DEFAULT_BASE_REF,
) -> str:
    """Return the base ref from the environment, the payload, or ``default``."""
    explicit = environ.get(BASE_REF_ENV_VAR, "").strip()
    if explicit:
        logger.debug("Base ref from %s: %s", BASE_REF_ENV_VAR, explicit)
        return explicit

    from_payload = _pull_request_base_ref(payload)
    if from_payload:
        logger.debug("Base ref from event payload: %s", from_payload)
        return from_payload

    logger.debug("Base ref defaulted to %s", default)
    return default


def _pull_request_base_ref(payload: JsonValue) -> str | None:
    node: JsonValue = payload
    for key in ("pull_request", "base", "ref"):
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    if isinstance(node, str) and node.strip():
        return node.strip()
    return None
