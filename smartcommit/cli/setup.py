"""Interactive setup wizard for the global configuration."""

import json

import typer

from smartcommit.config import (
    BranchConfig,
    SmartCommitConfig,
    Steps,
    Templates,
    config_to_dict,
    parse_branch_types,
    parse_placeholder_configs,
    save_global_config,
    warn_parse_error,
)
from smartcommit.config.defaults import DEFAULT_BRANCH_TEMPLATE, SETUP_COMMIT_TEMPLATE
from smartcommit.prompts import Prompter
from smartcommit.exceptions import ConfigError
from smartcommit.cli.utils import error, get_prompter, success


BRANCH_TYPES_EXAMPLE = json.dumps(
    [
        {"value": "feature", "description": "New feature"},
        {"value": "fix", "description": "Bug fix"},
    ],
    indent=2,
)

PLACEHOLDERS_EXAMPLE = json.dumps({"ticketId": {"lowercase": False}}, indent=2)


def ask_branch_config(prompter: Prompter) -> BranchConfig:
    """Ask for branch template, types and placeholder rules.

    JSON that cannot be parsed is reported and the defaults are kept.
    """
    defaults = BranchConfig()
    template = prompter.text(
        'Enter branch template (e.g. "{type}/{ticketId}-{shortDesc}"):',
        default=DEFAULT_BRANCH_TEMPLATE,
    )
    types = defaults.types
    placeholders = defaults.placeholders

    if prompter.confirm("Would you like to configure branch types?", default=False):
        raw = prompter.editor(
            "Enter your branch types as JSON (array of {value, description}):",
            default=BRANCH_TYPES_EXAMPLE,
        )
        parsed = parse_branch_types(raw)
        if parsed.ok:
            types = tuple(parsed.value)
        else:
            warn_parse_error(parsed.error)

    if prompter.confirm("Would you like to configure placeholder rules?", default=False):
        raw = prompter.editor(
            'Enter placeholder config as JSON (e.g. { "ticketId": {"lowercase": false} })',
            default=PLACEHOLDERS_EXAMPLE,
        )
        parsed = parse_placeholder_configs(raw)
        if parsed.ok:
            placeholders = parsed.value
        else:
            warn_parse_error(parsed.error)

    return BranchConfig(template=template or DEFAULT_BRANCH_TEMPLATE, types=types, placeholders=placeholders)


def run_setup(prompter: Prompter) -> SmartCommitConfig:
    """Ask the setup questions and build a configuration."""
    steps = Steps(
        scope=prompter.confirm("Enable scope prompt?", default=False),
        body=prompter.confirm("Enable body prompt?", default=False),
        footer=prompter.confirm("Enable footer prompt?", default=False),
        ticket=prompter.confirm("Enable ticket prompt?", default=False),
        run_ci=prompter.confirm("Enable CI prompt?", default=False),
    )
    ticket_regex = prompter.text("Enter regex for ticket extraction (leave blank for none):")
    template = prompter.text("Enter default commit message template:", default=SETUP_COMMIT_TEMPLATE)
    auto_add = prompter.confirm("Enable auto-add by default?", default=False)
    ci_command = prompter.text("Enter CI command (leave blank for none):")
    enable_lint = prompter.confirm("Enable commit message linting?", default=False)

    defaults = SmartCommitConfig()
    branch = defaults.branch
    if prompter.confirm("Would you like to configure branch naming settings?", default=False):
        branch = ask_branch_config(prompter)

    data = config_to_dict(defaults)
    data.update(
        auto_add=auto_add,
        ci_command=ci_command or "",
        templates=Templates(default_template=template or defaults.templates.default_template).model_dump(),
        steps=steps.model_dump(),
        ticket_regex=ticket_regex or "",
        enable_lint=enable_lint,
        branch=branch.model_dump(mode="json"),
    )
    return SmartCommitConfig.model_validate(data)


def setup_command() -> None:
    """Interactive setup for the smartcommit configuration."""
    typer.echo("Welcome to smartcommit setup!")
    config = run_setup(get_prompter())
    try:
        path = save_global_config(config)
    except ConfigError as e:
        error(str(e))
        raise typer.Exit(1)
    success(f"Setup complete! Configuration saved at {path}")
