"""Root callback for the smartcommit CLI."""

import typer

from smartcommit import __version__


EXAMPLES = """Examples:
  sc commit        # Start interactive commit prompt
  sc amend         # Amend the last commit interactively
  sc rollback      # Rollback the last commit (soft or hard reset)
  sc rebase-helper # Launch interactive rebase helper
  sc branch        # Create a branch from a base + name template
  sc stats         # Show commit statistics
  sc history       # Show commit history with filtering
  sc config show   # View settings
  sc setup         # Run interactive setup wizard
"""


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"smartcommit {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Smart Commit: create customizable Git commits with ease."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        typer.echo()
        typer.echo(EXAMPLES)
