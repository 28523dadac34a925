"""Branch name sanitization.

Turns free text typed for a branch placeholder into a token that is safe
inside a branch name: ASCII letters, digits, underscore and the configured
separator only.
"""

import re
from typing import Optional

from smartcommit.config.models import PlaceholderConfig


def sanitize_for_branch(text: str, options: Optional[PlaceholderConfig] = None) -> str:
    """Sanitize a value for use as a branch name segment.

    Steps, in order:
    1. Replace each whitespace character with the separator.
    2. Drop characters other than [A-Za-z0-9_] and the separator.
    3. Lowercase (unless ``lowercase`` is False).
    4. Collapse repeated separators (unless ``collapse_separator`` is False).
    5. Truncate to ``max_length`` if set.

    Args:
        text: Raw user input.
        options: Placeholder options; defaults when None.

    Returns:
        The sanitized value, possibly empty.
    """
    options = options or PlaceholderConfig()
    separator = options.separator
    sep = re.escape(separator)

    result = re.sub(r"\s", separator, text)
    result = re.sub(f"[^a-zA-Z0-9_{sep}]", "", result)

    if options.lowercase:
        result = result.lower()

    if options.collapse_separator:
        result = re.sub(f"(?:{sep}){{2,}}", separator, result)

    if options.max_length and len(result) > options.max_length:
        result = result[: options.max_length]

    return result
