"""diffgate CLI: staged and branch diffs for downstream tools."""

import typer

from diffgate import __version__

from .commands import branch, check, file, init, staged
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"diffgate {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="diffgate",
    help="Staged and branch diffs with lock files filtered out",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show the git commands that would run",
    ),
) -> None:
    """diffgate - staged and branch diffs for commit tooling."""
    console = configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
    )
    set_output_context(OutputContext(console=console, json_mode=json_output, dry_run=dry_run))


app.command()(init)
app.command()(check)
app.command()(staged)
app.command()(branch)
app.command()(file)


if __name__ == "__main__":
    app()
