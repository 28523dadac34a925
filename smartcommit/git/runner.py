"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- run_passthrough: Run a git command attached to the terminal
- run_shell_command: Run an arbitrary shell command (e.g. the CI command)
- ensure_git_repo: Check that the working directory is inside a work tree
- get_repo_root: Get the root directory of the current git repository
"""

import subprocess
from pathlib import Path

from smartcommit.git.exceptions import GitError


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{(e.stderr or '').strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def run_passthrough(args: list[str]) -> None:
    """Run a git command with stdin/stdout/stderr inherited from the terminal.

    Used for commands whose output the user should see as-is (commit, push,
    interactive rebase, shortlog).

    Args:
        args: List of arguments to pass to git.

    Raises:
        GitError: If the command exits with a non-zero status.
    """
    try:
        result = subprocess.run(["git"] + args, check=False)
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    if result.returncode != 0:
        raise GitError(f"Git command failed: git {' '.join(args)} (exit code {result.returncode})")


def run_shell_command(command: str) -> None:
    """Run a shell command attached to the terminal.

    Args:
        command: Command line, interpreted by the shell.

    Raises:
        GitError: If the command exits with a non-zero status.
    """
    result = subprocess.run(command, shell=True, check=False)
    if result.returncode != 0:
        raise GitError(f"Command failed: {command} (exit code {result.returncode})")


def ensure_git_repo() -> None:
    """Check that the current directory is inside a git work tree.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        _run_git_command(["rev-parse", "--is-inside-work-tree"])
    except GitError:
        raise GitError("Not a Git repository. Please run 'git init' or navigate to a valid repo.")


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"])
        return Path(root)
    except GitError:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")
