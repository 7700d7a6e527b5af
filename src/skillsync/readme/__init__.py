"""README patching."""

from .patcher import patch_readme

__all__ = ["patch_readme"]
