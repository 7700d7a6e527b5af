"""Tests for the stdout reporter."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillsync.constants.reporting import ANSI_GREEN, ANSI_RESET, ANSI_YELLOW
from skillsync.model import ChangedPath, SyncResult
from skillsync.reporting import StdoutReporter
from skillsync.types import SyncStatus


def _make_result(status: SyncStatus = "updated", **kwargs: object) -> SyncResult:
    return SyncResult(
        status=status,
        readme_path=Path("README.md"),
        base_ref="main",
        **kwargs,  # type: ignore[arg-type]
    )


@pytest.mark.parametrize(
    ("status", "message"),
    [
        ("no_changes", "No reference file changes detected. Skipping README sync."),
        ("up_to_date", "README already up to date."),
        ("updated", "README updated with latest reference files."),
    ],
)
def test_render_plain_message(status: SyncStatus, message: str) -> None:
    assert StdoutReporter(_make_result(status), color=False).render() == message


def test_render_colors_outcome() -> None:
    rendered = StdoutReporter(_make_result("updated"), color=True).render()

    assert rendered == f"{ANSI_GREEN}README updated with latest reference files.{ANSI_RESET}"


def test_render_drift_includes_expected_block() -> None:
    result = _make_result("drift", rendered_block="swift-concurrency/\n└── references/")

    rendered = StdoutReporter(result, color=True).render()

    assert rendered.startswith(f"{ANSI_YELLOW}README skill structure is out of date.{ANSI_RESET}")
    assert rendered.endswith("Expected skill structure:\nswift-concurrency/\n└── references/")


def test_render_verbose_lists_changes() -> None:
    result = _make_result(
        "updated",
        changed_paths=(ChangedPath(status="A", path="swift-concurrency/references/new.md"),),
        reference_files=("new.md", "old.md"),
    )

    lines = StdoutReporter(result, color=False, verbose=True).render().splitlines()

    assert lines == [
        "README updated with latest reference files.",
        "base ref: main",
        "  A\tswift-concurrency/references/new.md",
        "reference files: 2",
    ]
