"""Shared type aliases for skillsync."""

from .common import JsonObject, JsonScalar, JsonValue, OutputFormat, SyncStatus

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "OutputFormat",
    "SyncStatus",
]
