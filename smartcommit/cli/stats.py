"""CLI command for repository statistics."""

import typer

from smartcommit.git import (
    GitError,
    count_commits_by_date,
    ensure_git_repo,
    get_commit_dates,
    show_shortlog,
)
from smartcommit.prompts import Choice
from smartcommit.cli.utils import error, get_prompter, info, warn


PERIOD_CHOICES = [
    Choice(name="Day", value="1 day ago"),
    Choice(name="Week", value="1 week ago"),
    Choice(name="Month", value="1 month ago"),
]

STATS_CHOICES = [
    Choice(name="Shortlog by author", value="shortlog"),
    Choice(name="Activity by date", value="activity"),
]


def format_activity(counts: list[tuple[str, int]]) -> list[str]:
    """Render per-date commit counts as ASCII bars.

    Args:
        counts: (date, count) pairs.

    Returns:
        Lines like "2024-05-01: ### (3)".
    """
    return [f"{date}: {'#' * count} ({count})" for date, count in counts]


def stats_command() -> None:
    """Show commit statistics with ASCII graphs."""
    try:
        ensure_git_repo()
        prompter = get_prompter()

        period = prompter.select("Select period for statistics:", PERIOD_CHOICES)
        stats_type = prompter.select("Select type of statistics:", STATS_CHOICES)

        if stats_type == "shortlog":
            show_shortlog(period)
            return

        dates = get_commit_dates(period)
        if not dates:
            warn("No commits found for the selected period.")
            return

        info("\nCommit Activity:")
        for line in format_activity(count_commits_by_date(dates)):
            typer.echo(typer.style(line, fg=typer.colors.GREEN))

    except GitError as e:
        error(f"Error retrieving statistics: {e}")
        raise typer.Exit(1)
