"""Git working tree status utilities.

Contains:
- get_staged_files: List of staged file paths
- get_unstaged_files: Modified and untracked files not yet staged
- stage_files: Add files to the index
- get_staged_diff: Staged diff text for preview
- require_staged_files: Staged files, raising when nothing is staged
"""

from smartcommit.git.exceptions import NoStagedChangesError
from smartcommit.git.runner import _run_git_command


def _split_lines(output: str) -> list[str]:
    return [line.strip() for line in output.split("\n") if line.strip()]


def get_staged_files() -> list[str]:
    """Get list of staged file paths.

    Returns:
        List of staged file paths.
    """
    return _split_lines(_run_git_command(["diff", "--cached", "--name-only"]))


def get_unstaged_files() -> list[str]:
    """Get changed and untracked files that are not staged.

    Tracked modifications come first, followed by untracked files.
    Duplicates are removed.

    Returns:
        List of file paths.
    """
    changed = _split_lines(_run_git_command(["diff", "--name-only"]))
    untracked = _split_lines(
        _run_git_command(["ls-files", "--others", "--exclude-standard"])
    )
    return list(dict.fromkeys(changed + untracked))


def stage_files(files: list[str]) -> None:
    """Stage the given files.

    Args:
        files: Paths to add to the index. No-op when empty.
    """
    if not files:
        return
    _run_git_command(["add", "--"] + list(files))


def get_staged_diff() -> str:
    """Get the staged diff.

    Returns:
        Output of ``git diff --staged``.
    """
    return _run_git_command(["diff", "--staged"])


def require_staged_files() -> list[str]:
    """Get the staged files, failing when there are none.

    Returns:
        List of staged file paths.

    Raises:
        NoStagedChangesError: If nothing is staged.
    """
    files = get_staged_files()
    if not files:
        raise NoStagedChangesError("No changes staged.")
    return files
