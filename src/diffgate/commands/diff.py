"""Diff command implementations: staged, branch and file."""

import os
from pathlib import Path

import typer
from rich.markup import escape

from ..config import ConfigError, DiffgateConfig, get_config_dir, load_config
from ..constants import EXIT_GIT_FAILURE, EXIT_NO_CHANGES, EXIT_NOT_A_REPOSITORY
from ..models import DiffScope
from ..output import OutputContext, get_output_context
from ..services import (
    GitError,
    NotARepositoryError,
    get_branch_diff,
    get_branch_diff_per_file,
    get_detected_message,
    get_staged_diff,
    verify_repository,
    write_diff,
)


def _prepare(ctx: OutputContext) -> tuple[Path, DiffgateConfig]:
    """Verify the repository and load its config, exiting on failure."""
    try:
        repo_root = verify_repository()
    except NotARepositoryError as e:
        ctx.error(str(e))
        raise typer.Exit(EXIT_NOT_A_REPOSITORY) from None

    try:
        config = load_config(get_config_dir(repo_root))
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None

    return repo_root, config


def _dry_run(ctx: OutputContext, *commands: list[str]) -> None:
    ctx.console.print("[cyan][DRY RUN][/cyan] Would run:")
    for args in commands:
        ctx.console.print(f"  git {escape(' '.join(args))}", highlight=False, soft_wrap=True)


def _to_repo_path(ctx: OutputContext, repo_root: Path, path: str) -> str:
    """Turn a path given relative to the cwd into a root-relative git path."""
    absolute = Path(os.path.normpath(Path.cwd().resolve() / path))
    try:
        return absolute.relative_to(repo_root.resolve()).as_posix()
    except ValueError:
        ctx.error(f"{path} is outside the repository {repo_root}")
        raise typer.Exit(1) from None


def _print_files(ctx: OutputContext, files: list[str]) -> None:
    for file in files:
        ctx.console.print(f"  {escape(file)}", highlight=False, soft_wrap=True)


def staged(
    exclude: list[str] | None = typer.Option(
        None, "--exclude", "-x", help="Path or glob to exclude (repeatable)"
    ),
    name_only: bool = typer.Option(False, "--name-only", help="List staged files only"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write diff to file"),
) -> None:
    """Show staged changes, excluding lock files."""
    ctx = get_output_context()
    repo_root, config = _prepare(ctx)
    excludes = config.merge_excludes(exclude)

    if ctx.dry_run:
        scope = DiffScope.staged(excludes)
        _dry_run(ctx, scope.diff_args(name_only=True), scope.diff_args())
        return

    try:
        result = get_staged_diff(excludes, cwd=repo_root)
    except GitError as e:
        ctx.error(str(e))
        raise typer.Exit(EXIT_GIT_FAILURE) from None

    if result is None:
        ctx.error("No changes detected")
        raise typer.Exit(EXIT_NO_CHANGES)

    message = get_detected_message(result.files)
    write_to = None if name_only else output
    if write_to:
        write_diff(write_to, result.diff)

    if ctx.json_mode:
        data: dict[str, object] = {"message": message, "files": result.files}
        if write_to:
            data["output"] = str(write_to)
        elif not name_only:
            data["diff"] = result.diff
        ctx.print_json(data)
        return

    ctx.success(message)
    if name_only or config.output.show_files:
        _print_files(ctx, result.files)
    if name_only:
        return

    if write_to:
        ctx.success(f"Wrote diff to {write_to}")
    else:
        ctx.print_diff(result.diff)


def branch(
    from_branch: str = typer.Argument(..., help="Start revision (branch, tag or commit)"),
    to_branch: str = typer.Argument(..., help="End revision"),
    exclude: list[str] | None = typer.Option(
        None, "--exclude", "-x", help="Path or glob to exclude (repeatable)"
    ),
    name_only: bool = typer.Option(False, "--name-only", help="List changed files only"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write diffs to file"),
) -> None:
    """Show changes between two revisions, one diff per file."""
    ctx = get_output_context()
    repo_root, config = _prepare(ctx)
    excludes = config.merge_excludes(exclude)

    if ctx.dry_run:
        scope = DiffScope.branch(from_branch, to_branch, excludes)
        _dry_run(ctx, scope.diff_args(name_only=True), scope.file_diff_args("<file>"))
        return

    try:
        result = get_branch_diff(from_branch, to_branch, excludes, cwd=repo_root)
    except GitError as e:
        ctx.error(str(e))
        raise typer.Exit(EXIT_GIT_FAILURE) from None

    if result is None:
        ctx.error(f"No changes between {from_branch} and {to_branch}")
        raise typer.Exit(EXIT_NO_CHANGES)

    count = len(result.files)
    write_to = None if name_only else output
    if write_to:
        write_diff(write_to, "\n".join(result.diff) + "\n")

    if ctx.json_mode:
        data: dict[str, object] = {"files": result.files}
        if write_to:
            data["output"] = str(write_to)
        elif not name_only:
            data["diff"] = result.diff
        ctx.print_json(data)
        return

    ctx.success(f"{count:,} changed file{'s' if count != 1 else ''}")
    if name_only:
        _print_files(ctx, result.files)
        return

    if write_to:
        ctx.success(f"Wrote {count:,} diff(s) to {write_to}")
        return

    for file, diff in result.items():
        ctx.console.print(f"\n[bold]{escape(file)}[/bold]", highlight=False, soft_wrap=True)
        ctx.print_diff(diff)


def file(
    from_branch: str = typer.Argument(..., help="Start revision"),
    to_branch: str = typer.Argument(..., help="End revision"),
    path: str = typer.Argument(..., help="File to diff, relative to the current directory"),
    exclude: list[str] | None = typer.Option(
        None, "--exclude", "-x", help="Path or glob to exclude (repeatable)"
    ),
) -> None:
    """Show the diff of a single file between two revisions."""
    ctx = get_output_context()
    repo_root, config = _prepare(ctx)
    excludes = config.merge_excludes(exclude)
    repo_path = _to_repo_path(ctx, repo_root, path)

    if ctx.dry_run:
        scope = DiffScope.branch(from_branch, to_branch, excludes)
        _dry_run(ctx, scope.file_diff_args(repo_path))
        return

    try:
        result = get_branch_diff_per_file(
            from_branch, to_branch, repo_path, excludes, cwd=repo_root
        )
    except GitError as e:
        ctx.error(str(e))
        raise typer.Exit(EXIT_GIT_FAILURE) from None

    if not result.diff:
        ctx.error(f"No changes to {repo_path} between {from_branch} and {to_branch}")
        raise typer.Exit(EXIT_NO_CHANGES)

    if ctx.json_mode:
        ctx.print_json({"file": repo_path, "diff": result.diff})
        return

    ctx.print_diff(result.diff)
