"""Shared fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from ci_release.vcs.git import Commit

if TYPE_CHECKING:
    from pathlib import Path

REPO_URL = "https://github.com/acme/widgets"


@pytest.fixture
def repo_url() -> str:
    return REPO_URL


@pytest.fixture
def sample_commits() -> list[Commit]:
    """Commits in log order (newest first)."""
    return [
        Commit(sha="abc123", message="[ci] fix build"),
        Commit(sha="def456", message="[framework] add module\n[ci] cleanup"),
        Commit(sha="0a1b2c3", message="Merge branch 'main'\n\nnot [tagged] properly"),
    ]


@pytest.fixture
def github_env_file(tmp_path: Path) -> Path:
    path = tmp_path / "github_env"
    path.write_text("")
    return path


@pytest.fixture
def github_environ(github_env_file: Path) -> dict[str, str]:
    return {
        "GITHUB_SERVER_URL": "https://github.com",
        "GITHUB_REPOSITORY": "acme/widgets",
        "GITHUB_ENV": str(github_env_file),
    }
