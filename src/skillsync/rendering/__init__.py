"""Renderers for the skill structure block."""

from .tree import fence_block, render_structure_block

__all__ = ["fence_block", "render_structure_block"]
