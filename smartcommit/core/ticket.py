"""Ticket key extraction from branch names."""

import re
from typing import Optional

from smartcommit.config.result import ParseResult


def compile_ticket_pattern(pattern: str) -> ParseResult[re.Pattern]:
    """Compile the configured ticket regex.

    Args:
        pattern: Regular expression source.

    Returns:
        ParseResult with the compiled pattern.
    """
    try:
        return ParseResult.success(re.compile(pattern))
    except re.error as e:
        return ParseResult.failure("ticket_regex", f"invalid regular expression {pattern!r} ({e})")


def extract_ticket(branch_name: str, pattern: str) -> Optional[str]:
    """Extract a ticket key from a branch name.

    Returns the whole match (not a group) of the first occurrence. An empty
    or invalid pattern yields None; use compile_ticket_pattern to find out why.

    Args:
        branch_name: Current branch, e.g. "feature/PROJ-123-login".
        pattern: Ticket regex, e.g. "[A-Z]+-\\d+".

    Returns:
        The ticket key or None.
    """
    if not pattern:
        return None
    compiled = compile_ticket_pattern(pattern)
    if not compiled.ok:
        return None
    match = compiled.value.search(branch_name)
    if match and match.group(0):
        return match.group(0)
    return None
