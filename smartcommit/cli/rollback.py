"""CLI command for rolling back commits."""

import typer

from smartcommit.git import GitError, ensure_git_repo, get_recent_commits, reset
from smartcommit.prompts import Choice
from smartcommit.cli.utils import error, get_prompter, success, warn


RESET_CHOICES = [
    Choice(name="Soft reset (keep changes staged)", value="soft"),
    Choice(name="Hard reset (discard changes)", value="hard"),
]


def rollback_command() -> None:
    """Rollback a commit. Soft reset keeps changes staged."""
    try:
        ensure_git_repo()
        prompter = get_prompter()

        reset_type = prompter.select("Choose rollback type:", RESET_CHOICES)

        target = "HEAD~1"
        if reset_type == "soft":
            choose_specific = prompter.confirm(
                "Would you like to choose a specific commit for rollback? "
                "(Soft reset keeps changes staged)",
                default=False,
            )
            if choose_specific:
                commits = get_recent_commits(10)
                if not commits:
                    warn("No commits found.")
                    raise typer.Exit(0)
                target = prompter.select(
                    "Select the commit to rollback to:",
                    [Choice(name=line, value=sha) for sha, line in commits],
                )
            else:
                warn("Soft reset selected. Changes will remain staged.")

        if not prompter.confirm(
            f"This will perform a {reset_type} reset to {target}. Continue?",
            default=False,
        ):
            warn("Rollback cancelled.")
            raise typer.Exit(0)

        reset(reset_type, target)
        success("Rollback successful!")

    except GitError as e:
        error(f"Error during rollback: {e}")
        raise typer.Exit(1)
