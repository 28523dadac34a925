"""Git commands that create or rewrite commits.

Contains:
- commit: Create a commit with a message
- amend: Replace the message of the last commit
- push: Push the current branch
- reset: Soft or hard reset to a target commit
- interactive_rebase: Launch ``git rebase -i``
- get_last_commit_message: Full message of HEAD
"""

from smartcommit.git.runner import _run_git_command, run_passthrough


def commit(message: str, sign: bool = False) -> None:
    """Create a commit from the staged changes.

    Args:
        message: Complete commit message.
        sign: GPG-sign the commit.
    """
    args = ["commit"]
    if sign:
        args.append("-S")
    args.extend(["-m", message])
    run_passthrough(args)


def amend(message: str) -> None:
    """Amend the last commit with a new message.

    Args:
        message: Replacement commit message.
    """
    run_passthrough(["commit", "--amend", "-m", message])


def push() -> None:
    """Push the current branch to its upstream."""
    run_passthrough(["push"])


def reset(mode: str, target: str = "HEAD~1") -> None:
    """Reset the current branch.

    Args:
        mode: "soft" or "hard".
        target: Commit to reset to.

    Raises:
        ValueError: If mode is not soft or hard.
    """
    if mode not in ("soft", "hard"):
        raise ValueError(f"Unsupported reset mode: {mode}")
    run_passthrough(["reset", f"--{mode}", target])


def interactive_rebase(count: int) -> None:
    """Start an interactive rebase over the last ``count`` commits.

    Args:
        count: Number of commits to include.
    """
    run_passthrough(["rebase", "-i", f"HEAD~{count}"])


def get_last_commit_message() -> str:
    """Get the full message of the last commit.

    Returns:
        The commit message, stripped.
    """
    return _run_git_command(["log", "-1", "--pretty=%B"])
