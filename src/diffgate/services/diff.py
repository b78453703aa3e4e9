"""Staged and branch diff retrieval for diffgate."""

import logging
from pathlib import Path

from ..models import BranchDiff, DiffScope, FileDiff, StagedDiff
from .git import run_git

logger = logging.getLogger(__name__)


def _split_files(output: str) -> list[str]:
    return [line for line in output.split("\n") if line]


def get_staged_diff(
    exclude_files: list[str] | None = None,
    cwd: Path | None = None,
) -> StagedDiff | None:
    """Get the staged file list and diff text.

    Args:
        exclude_files: Extra paths or globs to leave out, on top of lock files
        cwd: Working directory inside the repository

    Returns:
        StagedDiff, or None if nothing is staged
    """
    scope = DiffScope.staged(exclude_files)
    files = run_git(*scope.diff_args(name_only=True), cwd=cwd)
    if not files:
        logger.debug("No staged changes")
        return None

    diff = run_git(*scope.diff_args(), cwd=cwd)
    return StagedDiff(files=_split_files(files), diff=diff)


def get_branch_diff(
    from_branch: str,
    to_branch: str,
    exclude_files: list[str] | None = None,
    cwd: Path | None = None,
) -> BranchDiff | None:
    """Get changed files between two revisions and one diff per file.

    Per-file diffs are fetched one after another, in the order git lists
    the files, one git process per file.

    Args:
        from_branch: Start revision (branch, tag or commit)
        to_branch: End revision
        exclude_files: Extra paths or globs to leave out
        cwd: Working directory inside the repository

    Returns:
        BranchDiff, or None if the revisions do not differ
    """
    scope = DiffScope.branch(from_branch, to_branch, exclude_files)
    output = run_git(*scope.diff_args(name_only=True), cwd=cwd)
    if not output:
        logger.debug("No changes between %s and %s", from_branch, to_branch)
        return None

    files = _split_files(output)
    logger.debug("Fetching per-file diffs for %d file(s)", len(files))
    diffs = [
        get_branch_diff_per_file(from_branch, to_branch, file, exclude_files, cwd=cwd).diff
        for file in files
    ]
    return BranchDiff(files=files, diff=diffs)


def get_branch_diff_per_file(
    from_branch: str,
    to_branch: str,
    file: str,
    exclude_files: list[str] | None = None,
    cwd: Path | None = None,
) -> FileDiff:
    """Get the diff of a single file over from_branch..to_branch."""
    scope = DiffScope.branch(from_branch, to_branch, exclude_files)
    return FileDiff(diff=run_git(*scope.file_diff_args(file), cwd=cwd))


def get_detected_message(files: list[str]) -> str:
    """Format a status line such as "Detected 3 staged files"."""
    count = len(files)
    return f"Detected {count:,} staged file{'s' if count > 1 else ''}"


def write_diff(path: Path, content: str) -> None:
    """Write diff to file.

    Args:
        path: File path to write to
        content: Diff content
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
