"""Configuration models for smartcommit.

Contains:
- CommitType: A selectable commit category
- LintRules: Rules applied by the commit message linter
- PlaceholderConfig: Sanitization options for one branch placeholder
- BranchType: A selectable branch category
- BranchConfig: Branch naming template, types and placeholder options
- Steps: Which optional commit prompts are enabled
- Templates: Commit message templates
- SmartCommitConfig: The complete, immutable configuration
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from smartcommit.config.defaults import (
    DEFAULT_BRANCH_TEMPLATE,
    DEFAULT_BRANCH_TYPES,
    DEFAULT_COMMIT_TEMPLATE,
    DEFAULT_COMMIT_TYPES,
    DEFAULT_PLACEHOLDERS,
    DEFAULT_SUMMARY_MAX_LENGTH,
)


class TypeCase(Enum):
    """Case rule for the first character of the summary line."""

    LOWERCASE = "lowercase"
    ANY = "any"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class CommitType(_Frozen):
    """A commit category offered in the type selection.

    Attributes:
        emoji: Decoration shown when emoji display is enabled.
        value: Identifier substituted for {type}.
        description: Short explanation shown next to the value.
    """

    emoji: str = ""
    value: str
    description: str = ""


class LintRules(_Frozen):
    """Rules for lint_commit_message."""

    summary_max_length: int = Field(default=DEFAULT_SUMMARY_MAX_LENGTH, gt=0)
    type_case: TypeCase = TypeCase.LOWERCASE
    required_ticket: bool = False


class PlaceholderConfig(_Frozen):
    """Sanitization options for a single branch template placeholder.

    Attributes:
        lowercase: Lowercase the sanitized value.
        separator: Character replacing whitespace; always allowed in output.
        collapse_separator: Collapse runs of the separator into one.
        max_length: Hard truncation length, if any.
    """

    lowercase: bool = True
    separator: str = "-"
    collapse_separator: bool = True
    max_length: Optional[int] = Field(default=None, gt=0)

    @field_validator("separator")
    @classmethod
    def single_character(cls, v: str) -> str:
        """Ensure the separator is exactly one character."""
        if len(v) != 1:
            raise ValueError("separator must be a single character")
        return v


class BranchType(_Frozen):
    """A branch category offered for the {type} placeholder."""

    value: str
    description: str = ""


class BranchConfig(_Frozen):
    """Branch naming configuration."""

    template: str = DEFAULT_BRANCH_TEMPLATE
    types: tuple[BranchType, ...] = Field(
        default_factory=lambda: tuple(BranchType(**t) for t in DEFAULT_BRANCH_TYPES)
    )
    placeholders: dict[str, PlaceholderConfig] = Field(
        default_factory=lambda: {
            name: PlaceholderConfig(**opts) for name, opts in DEFAULT_PLACEHOLDERS.items()
        }
    )

    def placeholder_config(self, name: str) -> PlaceholderConfig:
        """Get the options for a placeholder, all defaults when absent."""
        return self.placeholders.get(name) or PlaceholderConfig()


class Steps(_Frozen):
    """Optional prompts in the commit flow."""

    scope: bool = False
    body: bool = False
    footer: bool = False
    ticket: bool = False
    run_ci: bool = False


class Templates(_Frozen):
    """Commit message templates.

    Available placeholders: {type}, {scope}, {ticket}, {ticketSeparator},
    {summary}, {body}, {footer}.
    """

    default_template: str = DEFAULT_COMMIT_TEMPLATE


class SmartCommitConfig(_Frozen):
    """Complete smartcommit configuration, read-only during a command."""

    commit_types: tuple[CommitType, ...] = Field(
        default_factory=lambda: tuple(CommitType(**t) for t in DEFAULT_COMMIT_TYPES)
    )
    auto_add: bool = False
    use_emoji: bool = True
    ci_command: str = ""
    templates: Templates = Field(default_factory=Templates)
    steps: Steps = Field(default_factory=Steps)
    ticket_regex: str = ""
    enable_lint: bool = False
    lint_rules: LintRules = Field(default_factory=LintRules)
    branch: BranchConfig = Field(default_factory=BranchConfig)
