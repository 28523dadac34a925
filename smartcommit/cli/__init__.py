"""CLI entry point for smartcommit.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from smartcommit.cli.amend import amend_command
from smartcommit.cli.branch import branch_command
from smartcommit.cli.commit import commit_command
from smartcommit.cli.config import config_app
from smartcommit.cli.history import history_command
from smartcommit.cli.main import main_command
from smartcommit.cli.rebase import rebase_command
from smartcommit.cli.rollback import rollback_command
from smartcommit.cli.setup import setup_command
from smartcommit.cli.stats import stats_command

# Main application
app = typer.Typer(
    name="smartcommit",
    help="smartcommit: interactive Git commit assistant",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("commit")(commit_command)
app.command("c", hidden=True)(commit_command)
app.command("amend")(amend_command)
app.command("branch")(branch_command)
app.command("b", hidden=True)(branch_command)
app.command("rollback")(rollback_command)
app.command("rebase-helper")(rebase_command)
app.command("rebase", hidden=True)(rebase_command)
app.command("history")(history_command)
app.command("stats")(stats_command)
app.command("setup")(setup_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "amend_command",
    "branch_command",
    "commit_command",
    "config_app",
    "history_command",
    "main_command",
    "rebase_command",
    "rollback_command",
    "setup_command",
    "stats_command",
]
