#!/usr/bin/env python3
"""CI entrypoint: sync the README skill structure block from the repository root.

Intended for a pull-request workflow step. ``GITHUB_BASE_REF`` and
``GITHUB_EVENT_PATH`` are read from the environment the runner provides.

Exit codes:
  0 - README updated, already up to date, or no reference changes.
  1 - sync failed (missing README/references, git failure, malformed README).
  2 - invalid configuration.
"""

from __future__ import annotations

import sys

from skillsync.cli.main import main

if __name__ == "__main__":
    sys.exit(main(["--no-color", *sys.argv[1:]]))
