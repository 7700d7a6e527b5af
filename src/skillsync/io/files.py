"""Text read/write helpers with atomic persistence."""

from __future__ import annotations

import os
import tempfile
from contextlib import suppress
from pathlib import Path


def read_text(path: Path) -> str:
    """Read a UTF-8 text file without newline translation."""
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def write_text_atomic(path: Path, text: str, *, temp_prefix: str = ".skillsync-") -> None:
    """Persist text atomically by writing to a temp file then renaming."""
    # Symlinked targets are written through, not replaced.
    path = path.resolve()
    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=".tmp",
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(text)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    if path.exists():
        os.chmod(temp_name, path.stat().st_mode & 0o777)
    os.replace(temp_name, path)
