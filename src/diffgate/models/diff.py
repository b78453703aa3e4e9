"""Diff result models.

A diff is requested for a DiffScope (staged index, or a pair of revisions)
and comes back as one of the result models below. Every value is built
fresh per call; nothing here is cached or mutated after return.
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..constants import BUILTIN_EXCLUDES, DIFF_ALGORITHM


def exclude_from_diff(path: str) -> str:
    """Wrap a path or glob as an exclusion pathspec anchored at the repository root."""
    return f":(top,exclude){path}"


def literal_path(path: str) -> str:
    """Pathspec matching exactly one root-relative path, with no glob expansion."""
    return f":(top,literal){path}"


class DiffScope(BaseModel):
    """What to diff and which paths to leave out.

    Attributes:
        from_ref: Start revision, or None for the staged scope.
        to_ref: End revision, or None for the staged scope.
        exclude_files: Caller excludes, applied after BUILTIN_EXCLUDES.
    """

    model_config = ConfigDict(frozen=True)

    from_ref: str | None = Field(default=None, description="Start revision")
    to_ref: str | None = Field(default=None, description="End revision")
    exclude_files: tuple[str, ...] = Field(
        default=(), description="Extra exclude patterns from the caller"
    )

    @model_validator(mode="after")
    def validate_refs(self) -> Self:
        """Require both revisions or neither."""
        if (self.from_ref is None) != (self.to_ref is None):
            raise ValueError("from_ref and to_ref must be given together")
        return self

    @classmethod
    def staged(cls, exclude_files: list[str] | None = None) -> "DiffScope":
        """Scope covering changes recorded in the index."""
        return cls(exclude_files=tuple(exclude_files or ()))

    @classmethod
    def branch(
        cls, from_ref: str, to_ref: str, exclude_files: list[str] | None = None
    ) -> "DiffScope":
        """Scope covering changes between two revisions."""
        return cls(from_ref=from_ref, to_ref=to_ref, exclude_files=tuple(exclude_files or ()))

    @property
    def is_staged(self) -> bool:
        return self.from_ref is None

    def pathspecs(self) -> list[str]:
        """Exclusion pathspecs, built-ins first, all relative to the repository root."""
        return [exclude_from_diff(p) for p in (*BUILTIN_EXCLUDES, *self.exclude_files)]

    def diff_args(self, name_only: bool = False) -> list[str]:
        """Arguments for `git diff` over the whole scope."""
        if self.is_staged:
            args = ["diff", "--cached", f"--diff-algorithm={DIFF_ALGORITHM}"]
        else:
            args = ["diff", self.from_ref, self.to_ref, f"--diff-algorithm={DIFF_ALGORITHM}"]
        if name_only:
            args.append("--name-only")
        return [*args, *self.pathspecs()]

    def file_diff_args(self, file: str) -> list[str]:
        """Arguments for `git diff from..to -- file` within a branch scope.

        ``file`` is a path relative to the repository root, as `git diff
        --name-only` prints it.
        """
        if self.is_staged:
            raise ValueError("Per-file diffs need a revision range")
        return [
            "diff",
            f"{self.from_ref}..{self.to_ref}",
            f"--diff-algorithm={DIFF_ALGORITHM}",
            "--",
            literal_path(file),
            *self.pathspecs(),
        ]


class StagedDiff(BaseModel):
    """Staged files and the diff text covering all of them."""

    files: list[str] = Field(description="Changed paths in the order git lists them")
    diff: str = Field(description="Literal diff text")


class FileDiff(BaseModel):
    """Diff text for a single file within a revision range."""

    diff: str = Field(description="Literal diff text, possibly empty")


class BranchDiff(BaseModel):
    """Files changed between two revisions with one diff per file.

    ``diff[i]`` always belongs to ``files[i]``.
    """

    files: list[str] = Field(description="Changed paths in the order git lists them")
    diff: list[str] = Field(description="Per-file diff text, index-aligned with files")

    @model_validator(mode="after")
    def validate_alignment(self) -> Self:
        if len(self.files) != len(self.diff):
            raise ValueError(
                f"files and diff must be index-aligned ({len(self.files)} != {len(self.diff)})"
            )
        return self

    def items(self) -> list[tuple[str, str]]:
        """(file, diff) pairs in order."""
        return list(zip(self.files, self.diff, strict=True))
