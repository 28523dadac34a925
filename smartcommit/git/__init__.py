"""Git collaborator for smartcommit.

This package wraps the git CLI with:
- exceptions: GitError, NoStagedChangesError
- runner: _run_git_command, run_passthrough, run_shell_command, ensure_git_repo, get_repo_root
- branch: get_branch, get_local_branches, fetch_all, create_branch, checkout
- status: get_staged_files, get_unstaged_files, stage_files, get_staged_diff, require_staged_files
- history: HistoryFilter, build_log_args, get_history_page, get_recent_commits,
           get_commit_dates, count_commits_by_date, show_shortlog
- commits: commit, amend, push, reset, interactive_rebase, get_last_commit_message
"""

# Exceptions
from smartcommit.git.exceptions import (
    GitError,
    NoStagedChangesError,
)

# Runner utilities
from smartcommit.git.runner import (
    _run_git_command,
    ensure_git_repo,
    get_repo_root,
    run_passthrough,
    run_shell_command,
)

# Branch utilities
from smartcommit.git.branch import (
    checkout,
    create_branch,
    fetch_all,
    get_branch,
    get_local_branches,
)

# Status utilities
from smartcommit.git.status import (
    get_staged_diff,
    get_staged_files,
    get_unstaged_files,
    require_staged_files,
    stage_files,
)

# History utilities
from smartcommit.git.history import (
    HistoryFilter,
    build_log_args,
    count_commits_by_date,
    get_commit_dates,
    get_history_page,
    get_recent_commits,
    show_shortlog,
)

# Commit operations
from smartcommit.git.commits import (
    amend,
    commit,
    get_last_commit_message,
    interactive_rebase,
    push,
    reset,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoStagedChangesError",
    # Runner
    "_run_git_command",
    "ensure_git_repo",
    "get_repo_root",
    "run_passthrough",
    "run_shell_command",
    # Branch
    "checkout",
    "create_branch",
    "fetch_all",
    "get_branch",
    "get_local_branches",
    # Status
    "get_staged_diff",
    "get_staged_files",
    "get_unstaged_files",
    "require_staged_files",
    "stage_files",
    # History
    "HistoryFilter",
    "build_log_args",
    "count_commits_by_date",
    "get_commit_dates",
    "get_history_page",
    "get_recent_commits",
    "show_shortlog",
    # Commit
    "amend",
    "commit",
    "get_last_commit_message",
    "interactive_rebase",
    "push",
    "reset",
]
