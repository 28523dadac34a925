"""Exception hierarchy for smartcommit.

Contains:
- SmartCommitError: Base exception for all smartcommit errors
- ConfigError: Raised when the configuration cannot be written
"""


class SmartCommitError(Exception):
    """Base exception for smartcommit errors."""

    pass


class ConfigError(SmartCommitError):
    """Raised when the configuration file cannot be written."""

    pass
