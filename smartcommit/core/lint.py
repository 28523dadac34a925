"""Commit message linting.

The linter is a pure function of (message, rules). Violations are reported
in a fixed order: summary length, summary case, required ticket.
"""

from dataclasses import dataclass
from enum import Enum

from smartcommit.config.models import LintRules, TypeCase


class LintRule(Enum):
    """Identifiers for lint checks."""

    SUMMARY_TOO_LONG = "summary-too-long"
    SUMMARY_CASE = "summary-case"
    TICKET_REQUIRED = "ticket-required"


@dataclass(frozen=True)
class LintViolation:
    """A single rule breach in a commit message."""

    rule: LintRule
    message: str

    def __str__(self) -> str:
        return self.message


def get_summary_line(message: str) -> str:
    """Return the first line of a message, trimmed."""
    return message.split("\n", 1)[0].strip()


def lint_commit_message(message: str, rules: LintRules) -> list[LintViolation]:
    """Check a commit message against the lint rules.

    Args:
        message: Full commit message.
        rules: Active lint rules.

    Returns:
        All violations found; empty when the message passes.
    """
    violations = []
    summary = get_summary_line(message)

    if len(summary) > rules.summary_max_length:
        violations.append(LintViolation(
            LintRule.SUMMARY_TOO_LONG,
            f"Summary is too long ({len(summary)} characters). "
            f"Max allowed is {rules.summary_max_length}.",
        ))

    if rules.type_case == TypeCase.LOWERCASE and summary and summary[0] != summary[0].lower():
        violations.append(LintViolation(
            LintRule.SUMMARY_CASE,
            "Summary should start with a lowercase letter.",
        ))

    if rules.required_ticket and "#" not in message:
        violations.append(LintViolation(
            LintRule.TICKET_REQUIRED,
            "A ticket ID is required in the commit message (e.g., '#DEV-123').",
        ))

    return violations
