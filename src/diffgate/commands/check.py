"""Check command implementation."""

import typer

from ..constants import EXIT_NOT_A_REPOSITORY
from ..output import get_output_context
from ..services import NotARepositoryError, verify_repository


def check() -> None:
    """Verify the current directory is inside a git repository."""
    ctx = get_output_context()

    try:
        repo_root = verify_repository()
    except NotARepositoryError as e:
        ctx.error(str(e))
        raise typer.Exit(EXIT_NOT_A_REPOSITORY) from None

    ctx.result({"root": str(repo_root)}, message=str(repo_root))
