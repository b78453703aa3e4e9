"""Init command implementation."""

import subprocess

import typer

from ..config import get_config_dir, write_config_template
from ..constants import EXIT_NOT_A_REPOSITORY, EXIT_TOOL_MISSING, INIT_TOOL_CHECK_TIMEOUT
from ..output import get_output_context
from ..services import NotARepositoryError, verify_repository


def init() -> None:
    """Initialize diffgate in the current repository."""
    ctx = get_output_context()

    try:
        repo_root = verify_repository()
    except NotARepositoryError as e:
        ctx.console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(EXIT_NOT_A_REPOSITORY) from None

    config_dir = get_config_dir(repo_root)
    config_path = config_dir / "config.toml"

    if ctx.dry_run:
        ctx.console.print("[cyan][DRY RUN][/cyan] Would initialize diffgate in this repository:")
        if not config_path.exists():
            ctx.console.print(f"  Create config: {config_path}")
        else:
            ctx.console.print(f"  Config already exists: {config_path}")
        ctx.console.print("\n[cyan][DRY RUN][/cyan] Would check toolchain: git")
        return

    if not config_path.exists():
        write_config_template(config_dir)
        ctx.console.print(f"[green]Created config template:[/green] {config_path}")
    else:
        ctx.console.print(f"[yellow]Config already exists:[/yellow] {config_path}")

    try:
        result = subprocess.run(
            ["git", "--version"], capture_output=True, text=True, timeout=INIT_TOOL_CHECK_TIMEOUT
        )
        git_ok = result.returncode == 0
        detail = result.stdout.strip() if git_ok else result.stderr.strip()[:50]
    except FileNotFoundError:
        git_ok = False
        detail = "not found in PATH"
    except subprocess.TimeoutExpired:
        git_ok = False
        detail = "timed out"

    if not git_ok:
        ctx.console.print(f"[red]✗[/red] git: {detail}")
        raise typer.Exit(EXIT_TOOL_MISSING)

    ctx.console.print(f"[green]✓[/green] {detail}")
    ctx.console.print("\n[bold green]diffgate initialized successfully![/bold green]")
