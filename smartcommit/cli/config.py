"""CLI commands for configuration management."""

from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from smartcommit.config import (
    SmartCommitConfig,
    config_from_dict,
    config_to_dict,
    get_global_config_file,
    load_config,
    parse_branch_types,
    parse_placeholder_configs,
    save_global_config,
    warn_parse_error,
)
from smartcommit.exceptions import ConfigError
from smartcommit.cli.utils import error, info, load_effective_config, success

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Configure or view smartcommit settings",
    add_completion=False,
)


def _table(title: str, columns: list[str], rows: list[list[Any]]) -> Table:
    table = Table(title=title)
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*(escape(str(value)) for value in row))
    return table


def render_config_tables(config: SmartCommitConfig) -> list[Table]:
    """Build the tables shown by ``config show``."""
    tables = [
        _table("Current configuration", ["Key", "Value"], [
            ["auto_add", config.auto_add],
            ["use_emoji", config.use_emoji],
            ["ci_command", config.ci_command],
            ["ticket_regex", config.ticket_regex],
            ["enable_lint", config.enable_lint],
        ]),
        _table("Steps (prompts enabled)", ["Step", "Enabled"], [
            [name, enabled] for name, enabled in config.steps.model_dump().items()
        ]),
        _table("Lint Rules", ["summary_max_length", "type_case", "required_ticket"], [[
            config.lint_rules.summary_max_length,
            config.lint_rules.type_case.value,
            config.lint_rules.required_ticket,
        ]]),
        _table("Commit Types", ["Emoji", "Value", "Description"], [
            [ct.emoji, ct.value, ct.description] for ct in config.commit_types
        ]),
    ]

    if config.branch.types:
        tables.append(_table("Branch Types", ["Value", "Description"], [
            [bt.value, bt.description] for bt in config.branch.types
        ]))

    if config.branch.placeholders:
        tables.append(_table(
            "Branch Placeholders",
            ["Placeholder", "lowercase", "separator", "collapse_separator", "max_length"],
            [
                [name, opts.lowercase, opts.separator, opts.collapse_separator,
                 opts.max_length if opts.max_length is not None else "N/A"]
                for name, opts in config.branch.placeholders.items()
            ],
        ))
    return tables


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    config = load_effective_config()
    console = Console()

    for table in render_config_tables(config):
        console.print(table)

    info("\nDefault Commit Template:")
    typer.echo(config.templates.default_template)
    info("\nBranch Template:")
    typer.echo(config.branch.template)


@config_app.command("set")
def config_set(
    auto_add: Optional[bool] = typer.Option(None, "--auto-add/--no-auto-add", help="Stage all non-ignored files automatically"),
    use_emoji: Optional[bool] = typer.Option(None, "--use-emoji/--no-use-emoji", help="Show emojis in commit types"),
    ci_command: Optional[str] = typer.Option(None, "--ci-command", help='CI command, e.g. "pytest"'),
    template: Optional[str] = typer.Option(None, "--template", "-t", help="Default commit message template"),
    enable_scope: Optional[bool] = typer.Option(None, "--enable-scope/--disable-scope", help="Scope prompt"),
    enable_body: Optional[bool] = typer.Option(None, "--enable-body/--disable-body", help="Body prompt"),
    enable_footer: Optional[bool] = typer.Option(None, "--enable-footer/--disable-footer", help="Footer prompt"),
    enable_ticket: Optional[bool] = typer.Option(None, "--enable-ticket/--disable-ticket", help="Ticket prompt"),
    enable_run_ci: Optional[bool] = typer.Option(None, "--enable-run-ci/--disable-run-ci", help="CI prompt"),
    ticket_regex: Optional[str] = typer.Option(None, "--ticket-regex", help="Regex for ticket extraction from branch name"),
    enable_lint: Optional[bool] = typer.Option(None, "--enable-lint/--disable-lint", help="Commit message linting"),
    summary_max_length: Optional[int] = typer.Option(None, "--summary-max-length", min=1, help="Lint: maximum summary length"),
    required_ticket: Optional[bool] = typer.Option(None, "--require-ticket/--no-require-ticket", help="Lint: require '#' in the message"),
    branch_template: Optional[str] = typer.Option(None, "--branch-template", help="Branch naming template"),
    branch_type: Optional[str] = typer.Option(None, "--branch-type", help="Branch types (JSON array of {value, description})"),
    branch_placeholder: Optional[str] = typer.Option(None, "--branch-placeholder", help="Branch placeholder config (JSON object)"),
) -> None:
    """Update settings in the global configuration."""
    data = config_to_dict(load_config())
    changed = False

    def update(section: Optional[str], key: str, value: Any) -> None:
        nonlocal changed
        if value is None:
            return
        target = data[section] if section else data
        target[key] = value
        changed = True

    update(None, "auto_add", auto_add)
    update(None, "use_emoji", use_emoji)
    update(None, "ci_command", ci_command)
    update("templates", "default_template", template)
    update("steps", "scope", enable_scope)
    update("steps", "body", enable_body)
    update("steps", "footer", enable_footer)
    update("steps", "ticket", enable_ticket)
    update("steps", "run_ci", enable_run_ci)
    update(None, "ticket_regex", ticket_regex)
    update(None, "enable_lint", enable_lint)
    update("lint_rules", "summary_max_length", summary_max_length)
    update("lint_rules", "required_ticket", required_ticket)
    update("branch", "template", branch_template)

    if branch_type is not None:
        parsed = parse_branch_types(branch_type, source="--branch-type")
        if parsed.ok:
            update("branch", "types", [bt.model_dump() for bt in parsed.value])
        else:
            warn_parse_error(parsed.error)

    if branch_placeholder is not None:
        parsed = parse_placeholder_configs(branch_placeholder, source="--branch-placeholder")
        if parsed.ok:
            update("branch", "placeholders", {
                name: opts.model_dump() for name, opts in parsed.value.items()
            })
        else:
            warn_parse_error(parsed.error)

    if not changed:
        typer.echo("Nothing to change. Use 'smartcommit config show' to view settings.")
        return

    result = config_from_dict(data)
    if not result.ok:
        error(f"Invalid configuration: {result.error}")
        raise typer.Exit(1)

    try:
        path = save_global_config(result.value)
    except ConfigError as e:
        error(str(e))
        raise typer.Exit(1)
    success(f"Global configuration saved at {path}")


@config_app.command("reset")
def config_reset(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Reset the global configuration to default settings."""
    if not yes and not typer.confirm(f"Overwrite {get_global_config_file()} with defaults?", default=False):
        typer.echo("Reset cancelled.")
        raise typer.Exit(0)
    try:
        save_global_config(SmartCommitConfig())
    except ConfigError as e:
        error(str(e))
        raise typer.Exit(1)
    success("Configuration has been reset to default settings.")
