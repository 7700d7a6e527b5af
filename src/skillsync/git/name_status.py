"""Parser for ``git diff --name-status`` output."""

from __future__ import annotations

from skillsync.model import ChangedPath

# Rename and copy rows carry a similarity score and two paths.
_TWO_PATH_STATUSES: frozenset[str] = frozenset({"R", "C"})


def parse_name_status(output: str) -> tuple[ChangedPath, ...]:
    """Parse tab-separated name-status rows, skipping blank or malformed lines."""
    changes: list[ChangedPath] = []
    for line in output.splitlines():
        parts = line.split("\t")
        if len(parts) < 2 or not parts[0]:
            continue
        status = parts[0]
        if status[0] in _TWO_PATH_STATUSES and len(parts) >= 3:
            changes.append(ChangedPath(status=status, path=parts[2], previous_path=parts[1]))
        else:
            changes.append(ChangedPath(status=status, path=parts[1]))
    return tuple(changes)
