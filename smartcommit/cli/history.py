"""CLI command for searching commit history."""

import re

import typer

from smartcommit.git import (
    GitError,
    HistoryFilter,
    build_log_args,
    ensure_git_repo,
    get_history_page,
)
from smartcommit.prompts import Choice, Prompter
from smartcommit.cli.utils import ask_validated, error, get_prompter, info, is_positive_int, warn


DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

FILTER_CHOICES = [
    Choice(name="Search by keyword in commit message", value="keyword"),
    Choice(name="By author", value="author"),
    Choice(name="By date range", value="date"),
]

VIEW_CHOICES = [
    Choice(name="Only current branch commits", value="current"),
    Choice(name="Include merged commits", value="merged"),
]


def _ask_date(prompter: Prompter, message: str) -> str:
    return ask_validated(
        prompter,
        message,
        lambda v: bool(DATE_PATTERN.match(v)),
        "Please enter date in YYYY-MM-DD format",
    )


def ask_history_filter(prompter: Prompter) -> HistoryFilter:
    """Ask how to filter the history."""
    filter_type = prompter.select("Select search type:", FILTER_CHOICES)
    view_mode = prompter.select("Select view mode:", VIEW_CHOICES)
    current_only = view_mode == "current"

    if filter_type == "keyword":
        keyword = prompter.text("Enter keyword to search in commit messages:")
        return HistoryFilter(keyword=keyword or None, current_branch_only=current_only)
    if filter_type == "author":
        author = prompter.text("Enter author name or email:")
        return HistoryFilter(author=author or None, current_branch_only=current_only)

    since = _ask_date(prompter, "Enter start date (YYYY-MM-DD):")
    until = _ask_date(prompter, "Enter end date (YYYY-MM-DD):")
    return HistoryFilter(since=since, until=until, current_branch_only=current_only)


def history_command() -> None:
    """Show commit history with search options."""
    try:
        ensure_git_repo()
        prompter = get_prompter()

        history_filter = ask_history_filter(prompter)
        per_page = int(ask_validated(
            prompter,
            "Enter number of commits per page (default 20):",
            is_positive_int,
            "Please enter a positive integer",
            default="20",
        ))

        log_args = build_log_args(history_filter)
        skip = 0
        while True:
            output = get_history_page(log_args, per_page, skip)
            if not output.strip():
                warn("No more commits to display.")
                break

            info("\nCommit History:\n")
            typer.echo(typer.style(output, fg=typer.colors.GREEN))

            if not prompter.confirm("Show next page?", default=True):
                break
            skip += per_page

    except GitError as e:
        error(f"Error retrieving history: {e}")
        raise typer.Exit(1)
