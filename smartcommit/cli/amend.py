"""CLI command for amending the last commit message."""

import typer

from smartcommit.config import SmartCommitConfig, load_config
from smartcommit.core import CommitCancelledError, RepairLoop, lint_commit_message
from smartcommit.git import GitError, amend, ensure_git_repo, get_last_commit_message, get_repo_root
from smartcommit.prompts import Prompter
from smartcommit.cli.utils import error, get_prompter, info, success, warn


def edit_amend_message(config: SmartCommitConfig, prompter: Prompter, current: str) -> str:
    """Edit the message, then lint it (when enabled) until it passes.

    Raises:
        CommitCancelledError: If the user gives up on lint errors.
    """
    if not config.enable_lint:
        return prompter.editor("Edit the commit message:", default=current)

    loop = RepairLoop(prompter, lambda m: lint_commit_message(m, config.lint_rules))
    return loop.run(current, confirm_first=False)


def amend_command() -> None:
    """Amend the last commit interactively."""
    try:
        ensure_git_repo()
        config = load_config(get_repo_root())
        prompter = get_prompter()

        current = get_last_commit_message()
        info("Current commit message:")
        typer.echo(current)

        if not prompter.confirm("Do you want to amend the last commit?", default=True):
            warn("Amend cancelled.")
            raise typer.Exit(0)

        new_message = edit_amend_message(config, prompter, current)
        amend(new_message)
        success("Commit amended successfully!")

    except CommitCancelledError as e:
        error(f"Amend cancelled due to lint errors: {e}")
        raise typer.Exit(1)
    except GitError as e:
        error(f"Error during amend: {e}")
        raise typer.Exit(1)
