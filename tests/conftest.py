"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path

import pytest


class FakeGit:
    """Stands in for GitClient, returning canned name-status output."""

    def __init__(self, output: str = "") -> None:
        self.output = output
        self.calls: list[tuple[str, str, str]] = []

    def diff_name_status(self, base_ref: str, pathspec: str, *, remote: str = "origin") -> str:
        self.calls.append((base_ref, pathspec, remote))
        return self.output


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def basic_repo_root(fixtures_root: Path) -> Path:
    """Return the primary fixture repository path."""
    return fixtures_root / "repos" / "basic"


@pytest.fixture()
def make_git() -> Callable[[str], FakeGit]:
    """Return a factory for fake change detectors."""
    return FakeGit


@pytest.fixture()
def workspace(basic_repo_root: Path, tmp_path: Path) -> Path:
    """Return a writable copy of the basic fixture repository."""
    root = tmp_path / "repo"
    shutil.copytree(basic_repo_root, root)
    return root


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop CI variables that would otherwise leak into base-ref resolution."""
    monkeypatch.delenv("GITHUB_BASE_REF", raising=False)
    monkeypatch.delenv("GITHUB_EVENT_PATH", raising=False)
