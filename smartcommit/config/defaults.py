"""Built-in configuration defaults.

Contains:
- DEFAULT_COMMIT_TYPES: Commit types offered in the type selection
- DEFAULT_COMMIT_TEMPLATE: Default commit message template
- DEFAULT_BRANCH_TEMPLATE: Default branch naming template
- DEFAULT_BRANCH_TYPES: Branch types offered for the {type} placeholder
- DEFAULT_PLACEHOLDERS: Per-placeholder sanitization overrides
- SETUP_COMMIT_TEMPLATE: Template suggested by the setup wizard
"""

DEFAULT_COMMIT_TYPES = [
    {"emoji": "✨", "value": "feat", "description": "A new feature"},
    {"emoji": "🐛", "value": "fix", "description": "A bug fix"},
    {"emoji": "📝", "value": "docs", "description": "Documentation changes"},
    {"emoji": "💄", "value": "style", "description": "Code style improvements"},
    {"emoji": "♻️", "value": "refactor", "description": "Code refactoring"},
    {"emoji": "🚀", "value": "perf", "description": "Performance improvements"},
    {"emoji": "✅", "value": "test", "description": "Adding tests"},
    {"emoji": "🔧", "value": "chore", "description": "Maintenance and chores"},
]

DEFAULT_COMMIT_TEMPLATE = (
    "[{type}]{ticketSeparator}{ticket}: {summary}\n\nBody:\n{body}\n\nFooter:\n{footer}"
)

SETUP_COMMIT_TEMPLATE = "[{type}]: {summary}"

DEFAULT_BRANCH_TEMPLATE = "{type}/{ticketId}-{shortDesc}"

DEFAULT_BRANCH_TYPES = [
    {"value": "feature", "description": "New feature"},
    {"value": "fix", "description": "Bug fix"},
    {"value": "chore", "description": "Chore branch"},
    {"value": "hotfix", "description": "Hotfix branch"},
    {"value": "release", "description": "Release branch"},
    {"value": "dev", "description": "Development branch"},
]

# Ticket keys keep their case (PROJ-123 rather than proj-123)
DEFAULT_PLACEHOLDERS = {
    "ticketId": {"lowercase": False},
}

DEFAULT_SUMMARY_MAX_LENGTH = 72
