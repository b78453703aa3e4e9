"""External tool integrations for diffgate.

This package is the only place that talks to git:
- git: Subprocess wrapper and repository verification
- diff: Staged and branch diff retrieval
"""

from .diff import (
    get_branch_diff,
    get_branch_diff_per_file,
    get_detected_message,
    get_staged_diff,
    write_diff,
)
from .git import GitError, NotARepositoryError, run_git, verify_repository

__all__ = [
    "GitError",
    "NotARepositoryError",
    "get_branch_diff",
    "get_branch_diff_per_file",
    "get_detected_message",
    "get_staged_diff",
    "run_git",
    "verify_repository",
    "write_diff",
]
