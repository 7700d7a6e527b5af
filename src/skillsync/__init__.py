"""skillsync: keep a README skill structure block in sync with reference files."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
