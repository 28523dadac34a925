"""Placeholder substitution for commit messages and branch names.

Templates contain ``{name}`` tokens. There is no nesting or escaping: text
that is not a recognized token, including stray braces, is copied through.

Commit messages and branch names share the substitution rule (the first
occurrence of each token is replaced) but treat empty values differently:
- commit messages substitute an empty string and leave the template's own
  punctuation alone;
- branch names drop the token together with one trailing "/" or "-", then
  clean up repeated and dangling separators.
"""

import random
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from smartcommit.config.models import BranchConfig
from smartcommit.core.sanitize import sanitize_for_branch


PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")

FALLBACK_BRANCH_PREFIX = "new-branch-"
FALLBACK_BRANCH_MAX = 9999


@dataclass(frozen=True)
class CommitAnswers:
    """Answers collected by the commit prompts.

    Optional fields that were not asked are empty strings.
    """

    type: str = ""
    scope: str = ""
    summary: str = ""
    body: str = ""
    footer: str = ""
    ticket: str = ""
    run_ci: bool = False
    push: bool = False


def find_placeholders(template: str) -> list[str]:
    """List placeholder names in order of first appearance.

    Args:
        template: Template string.

    Returns:
        Unique placeholder names.
    """
    return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(template)))


def substitute(template: str, values: Mapping[str, str]) -> str:
    """Replace the first occurrence of each ``{key}`` with its value.

    The template is scanned once, so placeholder-like text inside a value
    is never substituted. Tokens without a key are left as-is.

    Args:
        template: Template string.
        values: Placeholder values.

    Returns:
        The rendered string.
    """
    used: set[str] = set()

    def replace(match: re.Match) -> str:
        key = match.group(1)
        if key in values and key not in used:
            used.add(key)
            return values[key]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, template)


def commit_values(answers: CommitAnswers, extra: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """Compute placeholder values for a commit message.

    ``scope`` is wrapped in parentheses and ``ticketSeparator`` is ": " only
    when the corresponding answer is non-empty.

    Args:
        answers: Collected commit answers.
        extra: Additional custom placeholder values.

    Returns:
        Mapping of placeholder name to trimmed value.
    """
    scope = answers.scope.strip()
    ticket = answers.ticket.strip()
    values = {
        "ticket": ticket,
        "ticketSeparator": ": " if ticket else "",
        "type": answers.type.strip(),
        "scope": f"({scope})" if scope else "",
        "summary": answers.summary.strip(),
        "body": answers.body.strip(),
        "footer": answers.footer.strip(),
    }
    for key, value in (extra or {}).items():
        values.setdefault(key, (value or "").strip())
    return values


def render_commit_message(
    template: str,
    answers: CommitAnswers,
    extra: Optional[Mapping[str, str]] = None,
) -> str:
    """Render a commit message template.

    Args:
        template: Commit template, e.g. "[{type}]{scope}: {summary}".
        answers: Collected commit answers.
        extra: Additional custom placeholder values.

    Returns:
        The commit message.
    """
    return substitute(template, commit_values(answers, extra))


def _cleanup_branch_name(name: str) -> str:
    name = re.sub(r"//+", "/", name)
    name = re.sub(r"--+", "-", name)
    name = name.strip("-")
    return re.sub(r"/+$", "", name)


def render_branch_name(
    template: str,
    values: Mapping[str, str],
    branch_config: Optional[BranchConfig] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Render a branch name from a template and raw placeholder answers.

    Non-empty values are sanitized with their placeholder's options. Empty
    or missing values remove the token plus one following "/" or "-".

    Args:
        template: Branch template, e.g. "{type}/{ticketId}-{shortDesc}".
        values: Raw answers keyed by placeholder name.
        branch_config: Supplies per-placeholder sanitization options.
        rng: Random source for the fallback name.

    Returns:
        The branch name, or "new-branch-<n>" when nothing is left.
    """
    branch_config = branch_config or BranchConfig()
    name = template

    for placeholder in find_placeholders(template):
        raw = values.get(placeholder) or ""
        value = sanitize_for_branch(raw, branch_config.placeholder_config(placeholder)) if raw else ""
        token = f"{{{placeholder}}}"
        if value:
            name = name.replace(token, value, 1)
            continue
        for candidate in (f"{token}/", f"{token}-", token):
            if candidate in name:
                name = name.replace(candidate, "", 1)
                break

    name = _cleanup_branch_name(name)
    if not name:
        rng = rng or random.Random()
        name = f"{FALLBACK_BRANCH_PREFIX}{rng.randint(0, FALLBACK_BRANCH_MAX)}"
    return name
