"""JSON rendering of sync results."""

from __future__ import annotations

import json

from skillsync.model import SyncResult


def render_json(result: SyncResult) -> str:
    return json.dumps(result.to_dict(), indent=2, sort_keys=True, ensure_ascii=False)
