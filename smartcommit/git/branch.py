"""Git branch utilities.

Contains:
- get_branch: Get the current branch name
- get_local_branches: List local branches, most recently committed first
- fetch_all: Fetch all remotes
- create_branch: Create and check out a new branch
- checkout: Switch to an existing branch
"""

from typing import Optional

from smartcommit.git.runner import _run_git_command, run_passthrough


def get_branch() -> str:
    """Get the current branch name.

    Returns:
        The abbreviated ref of HEAD ('HEAD' when detached).
    """
    return _run_git_command(["rev-parse", "--abbrev-ref", "HEAD"])


def get_local_branches() -> list[str]:
    """List local branches sorted by most recent commit.

    Returns:
        Branch names, most recently committed first.
    """
    output = _run_git_command(
        ["branch", "--sort=-committerdate", "--format=%(refname:short)"]
    )
    return [b.strip() for b in output.split("\n") if b.strip()]


def fetch_all() -> None:
    """Fetch all refs from every remote."""
    run_passthrough(["fetch", "--all"])


def create_branch(name: str, base: Optional[str] = None) -> None:
    """Create a new branch and check it out.

    Args:
        name: Name of the new branch.
        base: Start point. Current HEAD when None or empty.
    """
    args = ["checkout", "-b", name]
    if base:
        args.append(base)
    run_passthrough(args)


def checkout(name: str) -> None:
    """Switch to an existing branch.

    Args:
        name: Branch to check out.
    """
    run_passthrough(["checkout", name])
