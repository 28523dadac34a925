"""Template, sanitization and validation logic for smartcommit.

This package provides:
- sanitize: sanitize_for_branch
- template: CommitAnswers, find_placeholders, render_commit_message, render_branch_name
- ticket: extract_ticket, compile_ticket_pattern
- suggest: suggest_commit_type, compute_auto_summary
- lint: LintRule, LintViolation, lint_commit_message
- repair: RepairLoop, RepairState, CommitCancelledError
"""

from smartcommit.core.sanitize import sanitize_for_branch
from smartcommit.core.template import (
    CommitAnswers,
    commit_values,
    find_placeholders,
    render_branch_name,
    render_commit_message,
    substitute,
)
from smartcommit.core.ticket import compile_ticket_pattern, extract_ticket
from smartcommit.core.suggest import compute_auto_summary, suggest_commit_type
from smartcommit.core.lint import (
    LintRule,
    LintViolation,
    get_summary_line,
    lint_commit_message,
)
from smartcommit.core.repair import CommitCancelledError, RepairLoop, RepairState


__all__ = [
    "sanitize_for_branch",
    "CommitAnswers",
    "commit_values",
    "find_placeholders",
    "render_branch_name",
    "render_commit_message",
    "substitute",
    "compile_ticket_pattern",
    "extract_ticket",
    "compute_auto_summary",
    "suggest_commit_type",
    "LintRule",
    "LintViolation",
    "get_summary_line",
    "lint_commit_message",
    "CommitCancelledError",
    "RepairLoop",
    "RepairState",
]
