"""Shared test fixtures for diffgate tests."""

import os
import subprocess
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

GitRunner = Callable[..., str]


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_git_repo(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary git repository.

    Initializes a git repo with user config and an initial commit.
    Changes cwd to the repo directory for the duration of the test.
    """
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init")
    _git(repo, "config", "user.email", "test@test.com")
    _git(repo, "config", "user.name", "Test User")
    _git(repo, "config", "commit.gpgsign", "false")

    (repo / "README.md").write_text("# Test\n")
    _git(repo, "add", ".")
    _git(repo, "commit", "-m", "Initial commit")

    original_cwd = os.getcwd()
    os.chdir(repo)
    try:
        yield repo
    finally:
        os.chdir(original_cwd)


@pytest.fixture
def git(temp_git_repo: Path) -> GitRunner:
    """Run git inside temp_git_repo and return stdout."""

    def run(*args: str) -> str:
        return _git(temp_git_repo, *args)

    return run


@pytest.fixture
def branch_repo(temp_git_repo: Path, git: GitRunner) -> Path:
    """Repository with a `base` tag and a `feature` branch two commits ahead.

    feature changes README.md, adds src/app.py and docs/guide.md,
    and adds a yarn.lock that diffs must never report.
    """
    git("tag", "base")
    git("checkout", "-b", "feature")

    (temp_git_repo / "README.md").write_text("# Test\n\nMore words.\n")
    (temp_git_repo / "src").mkdir()
    (temp_git_repo / "src" / "app.py").write_text("print('hello')\n")
    git("add", ".")
    git("commit", "-m", "Add app")

    (temp_git_repo / "docs").mkdir()
    (temp_git_repo / "docs" / "guide.md").write_text("# Guide\n")
    (temp_git_repo / "yarn.lock").write_text("# lockfile\n")
    git("add", ".")
    git("commit", "-m", "Add docs")

    return temp_git_repo


@pytest.fixture
def outside_repo(tmp_path: Path) -> Generator[Path, None, None]:
    """A directory outside any repository, made the cwd for the test."""
    plain = tmp_path / "plain"
    plain.mkdir()
    original_cwd = os.getcwd()
    os.chdir(plain)
    try:
        yield plain
    finally:
        os.chdir(original_cwd)
