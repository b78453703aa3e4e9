"""Pydantic data models for diffgate.

This package defines the values passed between the git gateway and
its callers:
- The scope of a diff request (DiffScope)
- Staged results (StagedDiff)
- Revision-range results (BranchDiff, FileDiff)

Example:
    >>> from diffgate.models import DiffScope
    >>> DiffScope.staged(["docs/*"]).pathspecs()[-1]
    ':(top,exclude)docs/*'
"""

from .diff import BranchDiff, DiffScope, FileDiff, StagedDiff, exclude_from_diff, literal_path

__all__ = [
    "BranchDiff",
    "DiffScope",
    "FileDiff",
    "StagedDiff",
    "exclude_from_diff",
    "literal_path",
]
