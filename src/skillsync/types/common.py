"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

SyncStatus: TypeAlias = Literal["no_changes", "up_to_date", "updated", "drift"]
OutputFormat: TypeAlias = Literal["text", "json"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
