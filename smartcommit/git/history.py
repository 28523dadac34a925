"""Git history and statistics queries.

Contains:
- HistoryFilter: Search criteria for the history command
- build_log_args: Build ``git log`` arguments for a filter
- get_history_page: One page of one-line history
- get_commit_dates: Short commit dates since a period start
- count_commits_by_date: Aggregate dates into per-day counts
- show_shortlog: Print the author shortlog for a period
"""

from collections import Counter
from dataclasses import dataclass
from typing import Optional

from smartcommit.git.branch import get_branch
from smartcommit.git.runner import _run_git_command, run_passthrough


@dataclass(frozen=True)
class HistoryFilter:
    """Criteria for searching commit history.

    Attributes:
        keyword: Pattern passed to ``--grep``.
        author: Pattern passed to ``--author``.
        since: Start date (YYYY-MM-DD).
        until: End date (YYYY-MM-DD).
        current_branch_only: Exclude commits reachable from other local branches.
    """

    keyword: Optional[str] = None
    author: Optional[str] = None
    since: Optional[str] = None
    until: Optional[str] = None
    current_branch_only: bool = False


def _other_local_refs(branch: str) -> list[str]:
    output = _run_git_command(["for-each-ref", "--format=%(refname)", "refs/heads/"])
    own_ref = f"refs/heads/{branch}"
    return [ref for ref in output.split("\n") if ref.strip() and ref.strip() != own_ref]


def build_log_args(history_filter: HistoryFilter) -> list[str]:
    """Build the ``git log`` argument list for a history filter.

    Args:
        history_filter: The search criteria.

    Returns:
        Arguments for git, without pagination options.
    """
    args = ["log", "--pretty=oneline"]

    if history_filter.current_branch_only:
        branch = get_branch()
        args.append(branch)
        others = _other_local_refs(branch)
        if others:
            args.append("--not")
            args.extend(others)

    if history_filter.keyword:
        args.append(f"--grep={history_filter.keyword}")
    if history_filter.author:
        args.append(f"--author={history_filter.author}")
    if history_filter.since:
        args.append(f"--since={history_filter.since}")
    if history_filter.until:
        args.append(f"--until={history_filter.until}")

    return args


def get_history_page(log_args: list[str], per_page: int, skip: int) -> str:
    """Get one page of history output.

    Args:
        log_args: Arguments from build_log_args.
        per_page: Maximum number of commits.
        skip: Number of commits to skip.

    Returns:
        The one-line history text (empty when exhausted).
    """
    # Options must precede the "--not" revision list
    args = log_args[:2] + [f"--max-count={per_page}", f"--skip={skip}"] + log_args[2:]
    return _run_git_command(args)


def get_recent_commits(n: int = 10) -> list[tuple[str, str]]:
    """Get the last n commits as (hash, oneline) pairs.

    Args:
        n: Number of commits.

    Returns:
        List of (abbreviated hash, full oneline text).
    """
    output = _run_git_command(["log", "--oneline", "-n", str(n)])
    commits = []
    for line in output.split("\n"):
        line = line.strip()
        if not line:
            continue
        commits.append((line.split(" ", 1)[0], line))
    return commits


def get_commit_dates(since: str) -> list[str]:
    """Get short commit dates since a relative period start.

    Args:
        since: A git date expression such as "1 week ago".

    Returns:
        One YYYY-MM-DD string per commit.
    """
    output = _run_git_command(
        ["log", f"--since={since}", "--pretty=format:%ad", "--date=short"]
    )
    return [d.strip() for d in output.split("\n") if d.strip()]


def count_commits_by_date(dates: list[str]) -> list[tuple[str, int]]:
    """Count commits per date.

    Args:
        dates: Dates as returned by get_commit_dates.

    Returns:
        (date, count) pairs sorted by date ascending.
    """
    return sorted(Counter(dates).items())


def show_shortlog(since: str) -> None:
    """Print the per-author commit count for a period.

    Args:
        since: A git date expression such as "1 month ago".
    """
    run_passthrough(["--no-pager", "shortlog", "-s", "-n", f"--since={since}", "HEAD"])
