"""CI context resolution (base ref and event payload)."""

from __future__ import annotations

from skillsync.context.resolver import load_event_payload, resolve_base_ref

__all__ = ["load_event_payload", "resolve_base_ref"]
