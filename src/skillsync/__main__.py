"""Allow ``python -m skillsync``."""

from __future__ import annotations

from skillsync.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
