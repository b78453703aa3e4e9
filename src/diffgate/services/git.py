"""Git subprocess wrapper for diffgate."""

import logging
import subprocess
from pathlib import Path

from ..constants import NOT_A_REPOSITORY_MESSAGE

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Git command failed or git is not available."""

    pass


class NotARepositoryError(GitError):
    """Working directory is not inside a git repository."""

    def __init__(self, message: str = NOT_A_REPOSITORY_MESSAGE):
        super().__init__(message)


def run_git(*args: str, cwd: Path | None = None, check: bool = True) -> str:
    """Run a git command and return its stdout.

    One trailing newline is removed from the output; everything else is
    returned as git printed it, so diff text stays byte-for-byte intact.

    Args:
        *args: Git arguments (without the leading "git")
        cwd: Working directory (defaults to the process cwd)
        check: If True, raise GitError on a non-zero exit

    Returns:
        Command stdout

    Raises:
        GitError: If git is missing, or the command fails and check is True
    """
    # Unquoted paths so names from --name-only can be passed back as pathspecs
    cmd = ["git", "-c", "core.quotePath=false", *args]
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
        )
    except FileNotFoundError:
        raise GitError("git executable not found in PATH") from None

    if result.returncode != 0:
        stderr = result.stderr.strip()
        logger.debug("git exited with %d: %s", result.returncode, stderr)
        if check:
            raise GitError(f"git {' '.join(args)} failed:\n{stderr}")

    return result.stdout.removesuffix("\n")


def verify_repository(cwd: Path | None = None) -> Path:
    """Return the top-level directory of the enclosing git repository.

    Raises:
        NotARepositoryError: If cwd is not inside a repository or git is missing
    """
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
        )
    except FileNotFoundError:
        logger.debug("git executable not found while verifying repository")
        raise NotARepositoryError() from None

    if result.returncode != 0:
        logger.debug("rev-parse failed: %s", result.stderr.strip())
        raise NotARepositoryError()

    return Path(result.stdout.removesuffix("\n"))
