"""Core data models for skillsync."""

from .entities import ChangedPath, PatchResult, StructureBlock, SyncResult

__all__ = [
    "ChangedPath",
    "PatchResult",
    "StructureBlock",
    "SyncResult",
]
