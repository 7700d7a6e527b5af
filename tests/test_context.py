"""Tests for base-ref resolution from the CI environment."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from skillsync.context import load_event_payload, resolve_base_ref
from skillsync.exceptions import EventPayloadError, SkillSyncError


def _write_event(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "event.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_explicit_env_var_wins_over_payload(tmp_path: Path) -> None:
    event = _write_event(tmp_path, {"pull_request": {"base": {"ref": "develop"}}})
    environ = {"GITHUB_BASE_REF": "release", "GITHUB_EVENT_PATH": str(event)}

    assert resolve_base_ref(environ, load_event_payload(environ)) == "release"


def test_payload_base_ref_used_when_env_var_missing(tmp_path: Path) -> None:
    event = _write_event(tmp_path, {"pull_request": {"base": {"ref": "develop"}}})
    environ = {"GITHUB_EVENT_PATH": str(event)}

    assert resolve_base_ref(environ, load_event_payload(environ)) == "develop"


def test_empty_env_var_falls_through_to_payload(tmp_path: Path) -> None:
    event = _write_event(tmp_path, {"pull_request": {"base": {"ref": "develop"}}})
    environ = {"GITHUB_BASE_REF": "", "GITHUB_EVENT_PATH": str(event)}

    assert resolve_base_ref(environ, load_event_payload(environ)) == "develop"


@pytest.mark.parametrize(
    "payload",
    [
        {"ref": "refs/heads/main"},
        {"pull_request": None},
        {"pull_request": {"base": {"ref": ""}}},
        {"pull_request": {"base": {"ref": 42}}},
        ["not", "a", "mapping"],
    ],
    ids=["push_event", "null_pull_request", "empty_ref", "non_string_ref", "list_payload"],
)
def test_default_used_when_payload_has_no_base_ref(tmp_path: Path, payload: object) -> None:
    environ = {"GITHUB_EVENT_PATH": str(_write_event(tmp_path, payload))}

    assert resolve_base_ref(environ, load_event_payload(environ)) == "main"


def test_custom_default_base_ref() -> None:
    assert resolve_base_ref({}, None, default="trunk") == "trunk"


def test_load_event_payload_returns_none_without_env_var() -> None:
    assert load_event_payload({}) is None


def test_load_event_payload_returns_none_for_missing_file(tmp_path: Path) -> None:
    assert load_event_payload({"GITHUB_EVENT_PATH": str(tmp_path / "absent.json")}) is None


def test_load_event_payload_rejects_invalid_json(tmp_path: Path) -> None:
    event = tmp_path / "event.json"
    event.write_text("{not json", encoding="utf-8")

    with pytest.raises(EventPayloadError, match="Invalid event payload JSON") as excinfo:
        load_event_payload({"GITHUB_EVENT_PATH": str(event)})

    assert isinstance(excinfo.value, SkillSyncError)
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


def test_load_event_payload_rejects_undecodable_file(tmp_path: Path) -> None:
    event = tmp_path / "event.json"
    event.write_bytes(b"\xff")

    with pytest.raises(EventPayloadError) as excinfo:
        load_event_payload({"GITHUB_EVENT_PATH": str(event)})

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
