"""Fixtures for integration tests against real local git repositories.

Each test gets a working clone with master, development and validation
branches, all pushed to a bare repository standing in for origin.
"""

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from storyflow.git_executor import GitExecutor

ROOT_BRANCHES = ("master", "development", "validation")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests when git is not installed."""
    if shutil.which("git") is not None:
        return
    skip = pytest.mark.skip(reason="git executable not found")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


@pytest.fixture
def run_git() -> Callable[..., str]:
    """Run a git command in a directory and return its stdout."""
    return _git


@pytest.fixture
def origin(tmp_path: Path) -> Path:
    """Bare repository acting as the remote."""
    path = tmp_path / "origin.git"
    path.mkdir()
    _git(path, "init", "--quiet", "--bare")
    return path


@pytest.fixture
def repo(tmp_path: Path, origin: Path) -> Path:
    """Working repository with the root branches pushed to origin."""
    path = tmp_path / "work"
    path.mkdir()
    _git(path, "init", "--quiet")
    _git(path, "symbolic-ref", "HEAD", "refs/heads/master")
    _git(path, "config", "user.email", "test@example.com")
    _git(path, "config", "user.name", "Test User")
    _git(path, "config", "commit.gpgsign", "false")
    _git(path, "config", "tag.gpgsign", "false")
    _git(path, "remote", "add", "origin", str(origin))

    (path / "README.md").write_text("# sample\n")
    _git(path, "add", "README.md")
    _git(path, "commit", "--quiet", "-m", "Initial commit")
    _git(path, "branch", "development")
    _git(path, "branch", "validation")
    _git(path, "push", "--quiet", "origin", *ROOT_BRANCHES)
    return path


@pytest.fixture
def commit(run_git: Callable[..., str]) -> Callable[[Path, str, str], str]:
    """Commit a file on the checked out branch and return the new HEAD."""

    def _commit(path: Path, filename: str, content: str = "change\n") -> str:
        (path / filename).write_text(content)
        run_git(path, "add", filename)
        run_git(path, "commit", "--quiet", "-m", f"Update {filename}")
        return run_git(path, "rev-parse", "HEAD")

    return _commit


@pytest.fixture
def executor(repo: Path) -> GitExecutor:
    return GitExecutor(repo)
