"""Shared utility functions for CLI commands."""

from typing import Callable

import typer

from smartcommit.config import SmartCommitConfig, load_config
from smartcommit.git import GitError, get_repo_root
from smartcommit.prompts import Prompter, TyperPrompter


def get_prompter() -> Prompter:
    """Get the prompter used by interactive commands."""
    return TyperPrompter()


def load_effective_config() -> SmartCommitConfig:
    """Load configuration, including the repo layer when inside a repository."""
    try:
        repo_root = get_repo_root()
    except GitError:
        repo_root = None  # Not in a repo, use global only
    return load_config(repo_root)


def info(message: str) -> None:
    typer.echo(typer.style(message, fg=typer.colors.BLUE))


def success(message: str) -> None:
    typer.echo(typer.style(message, fg=typer.colors.GREEN))


def warn(message: str) -> None:
    typer.echo(typer.style(message, fg=typer.colors.YELLOW), err=True)


def error(message: str) -> None:
    typer.echo(typer.style(message, fg=typer.colors.RED), err=True)


def ask_validated(
    prompter: Prompter,
    message: str,
    is_valid: Callable[[str], bool],
    error_message: str,
    default: str = "",
) -> str:
    """Ask for text until ``is_valid`` accepts it.

    Args:
        prompter: Prompt collaborator.
        message: Question text.
        is_valid: Predicate on the answer.
        error_message: Shown after an invalid answer.
        default: Default answer.

    Returns:
        The first valid answer.
    """
    while True:
        answer = prompter.text(message, default=default)
        if is_valid(answer):
            return answer
        error(error_message)


def is_positive_int(value: str) -> bool:
    """Check that a string is a positive decimal integer."""
    return value.strip().isdigit() and int(value) > 0


def colorize_diff(text: str) -> str:
    """Add ANSI color codes to diff lines like git diff.

    - Red for removed lines (-)
    - Green for added lines (+)
    - Cyan for hunk headers (@@)
    - Bold for diff/file header lines

    Args:
        text: Raw diff text.

    Returns:
        Colorized diff text with ANSI escape codes.
    """
    colorized = []
    for line in text.split("\n"):
        if line.startswith("@@"):
            colorized.append(typer.style(line, fg=typer.colors.CYAN))
        elif line.startswith(("---", "+++", "diff --git")):
            colorized.append(typer.style(line, bold=True))
        elif line.startswith("-"):
            colorized.append(typer.style(line, fg=typer.colors.RED))
        elif line.startswith("+"):
            colorized.append(typer.style(line, fg=typer.colors.GREEN))
        else:
            colorized.append(line)
    return "\n".join(colorized)

