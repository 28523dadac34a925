"""Filtering of candidate files against .gitignore patterns.

Contains:
- load_gitignore_patterns: Read patterns from a .gitignore file
- should_ignore_file: Check a path against patterns
- filter_ignored: Drop ignored paths from a list
"""

import fnmatch
from pathlib import Path


def load_gitignore_patterns(repo_root: Path) -> list[str]:
    """Read ignore patterns from <repo_root>/.gitignore.

    Blank lines, comments and negated patterns are skipped.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        List of patterns (empty when the file is missing or unreadable).
    """
    gitignore = repo_root / ".gitignore"
    if not gitignore.exists():
        return []
    try:
        lines = gitignore.read_text(encoding="utf-8").splitlines()
    except OSError:
        return []

    patterns = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#") or line.startswith("!"):
            continue
        patterns.append(line)
    return patterns


def should_ignore_file(filename: str, patterns: list[str]) -> bool:
    """Check if a file matches any ignore pattern.

    Supports glob patterns, basename patterns and directory patterns such as
    ``build/`` or ``/dist``.

    Args:
        filename: The file path to check (relative to the repo root).
        patterns: List of patterns to match against.

    Returns:
        True if the file should be ignored.
    """
    for pattern in patterns:
        anchored = pattern.startswith("/")
        pattern = pattern.strip("/") if pattern.endswith("/") else pattern.lstrip("/")
        if not pattern:
            continue
        # Handle exact matches and glob patterns
        if filename == pattern or fnmatch.fnmatch(filename, pattern):
            return True
        # Handle directory prefixes
        if filename.startswith(pattern + "/") or fnmatch.fnmatch(filename, pattern + "/*"):
            return True
        if anchored:
            continue
        # Handle patterns that match a basename or any path segment
        parts = filename.split("/")
        if any(fnmatch.fnmatch(part, pattern) for part in parts):
            return True
    return False


def filter_ignored(files: list[str], patterns: list[str]) -> list[str]:
    """Remove ignored files from a list, preserving order.

    Args:
        files: Candidate file paths.
        patterns: Ignore patterns.

    Returns:
        Files not matching any pattern.
    """
    return [f for f in files if not should_ignore_file(f, patterns)]
