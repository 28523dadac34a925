"""CLI command for creating a commit interactively."""

from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer

from smartcommit.config import SmartCommitConfig, load_config, warn_parse_error
from smartcommit.core import (
    CommitAnswers,
    CommitCancelledError,
    RepairLoop,
    compile_ticket_pattern,
    compute_auto_summary,
    extract_ticket,
    lint_commit_message,
    render_commit_message,
    suggest_commit_type,
)
from smartcommit.git import (
    GitError,
    NoStagedChangesError,
    commit,
    ensure_git_repo,
    get_branch,
    get_repo_root,
    get_staged_diff,
    get_unstaged_files,
    push,
    require_staged_files,
    run_shell_command,
    stage_files,
)
from smartcommit.ignore import filter_ignored, load_gitignore_patterns
from smartcommit.prompts import Choice, Prompter
from smartcommit.cli.utils import colorize_diff, error, get_prompter, info, success, warn


def commit_type_choices(config: SmartCommitConfig) -> list[Choice]:
    """Build the choices for the commit type question."""
    choices = []
    for ct in config.commit_types:
        if config.use_emoji and ct.emoji:
            name = f"{ct.emoji} {ct.value} ({ct.description})"
        else:
            name = f"{ct.value} ({ct.description})"
        choices.append(Choice(name=name, value=ct.value))
    return choices


def stage_changes(config: SmartCommitConfig, prompter: Prompter, repo_root: Path) -> None:
    """Stage files chosen by the user, or every non-ignored file with auto_add."""
    candidates = filter_ignored(get_unstaged_files(), load_gitignore_patterns(repo_root))

    if not candidates:
        if config.auto_add:
            warn("No files to auto-add (all ignored or none changed).")
        else:
            warn("No unstaged files to add (that aren't ignored).")
        return

    if config.auto_add:
        info("Auto-adding non-ignored files:")
        for f in candidates:
            typer.echo(f"  {f}")
        stage_files(candidates)
    else:
        stage_files(prompter.checkbox("Select files to stage:", candidates))


def collect_commit_answers(
    config: SmartCommitConfig,
    prompter: Prompter,
    suggested_type: Optional[str] = None,
    auto_summary: str = "",
    push_default: bool = False,
) -> CommitAnswers:
    """Ask the commit questions enabled in the configuration.

    Args:
        config: Active configuration.
        prompter: Prompt collaborator.
        suggested_type: Default for the type question.
        auto_summary: Default for the summary question.
        push_default: Default for the push question.

    Returns:
        The collected answers; steps that were not asked are empty.
    """
    steps = config.steps
    commit_type = prompter.select(
        "Select commit type:", commit_type_choices(config), default=suggested_type
    )
    scope = prompter.text("Enter scope (optional):") if steps.scope else ""
    summary = prompter.text("Enter commit summary:", default=auto_summary, required=True)
    body = (
        prompter.editor("Enter commit body (your default editor will open, leave empty to skip):")
        if steps.body else ""
    )
    footer = prompter.text("Enter commit footer (optional):") if steps.footer else ""
    ticket = prompter.text("Enter ticket ID (optional):") if steps.ticket else ""
    run_ci = prompter.confirm("Run CI tests before commit?", default=False) if steps.run_ci else False
    push_commit = prompter.confirm("Push commit after creation?", default=push_default)

    return CommitAnswers(
        type=commit_type or "",
        scope=scope or "",
        summary=summary or "",
        body=body or "",
        footer=footer or "",
        ticket=ticket or "",
        run_ci=bool(run_ci),
        push=bool(push_commit),
    )


def fill_ticket_from_branch(config: SmartCommitConfig, answers: CommitAnswers) -> CommitAnswers:
    """Extract the ticket from the branch name when the ticket was left empty.

    Only applies when the ticket step is enabled and a ticket regex is set.
    An invalid regex is reported as a warning and extraction is skipped.
    """
    if not (config.steps.ticket and not answers.ticket and config.ticket_regex):
        return answers

    compiled = compile_ticket_pattern(config.ticket_regex)
    if not compiled.ok:
        warn_parse_error(compiled.error)
        return answers

    try:
        branch = get_branch()
    except GitError:
        return answers

    ticket = extract_ticket(branch, config.ticket_regex)
    if not ticket:
        return answers

    typer.echo(typer.style(f"Extracted ticket from branch: {ticket}", fg=typer.colors.CYAN))
    return replace(answers, ticket=ticket)


def review_staged_diff(prompter: Prompter) -> bool:
    """Optionally show the staged diff; returns False if the user rejects it."""
    if not prompter.confirm("Would you like to view the staged diff preview?", default=False):
        return True

    diff = get_staged_diff()
    if not diff.strip():
        warn("No staged changes to show.")
    else:
        success("\nStaged Diff Preview:\n")
        typer.echo(colorize_diff(diff))
    return prompter.confirm("Does the staged diff look OK?", default=True)


def finalize_message(
    config: SmartCommitConfig,
    prompter: Prompter,
    message: str,
    lint_enabled: bool,
) -> Optional[str]:
    """Lint-and-repair the message, or preview and confirm it.

    Returns:
        The final message, or None if the user cancelled at the final
        confirmation.

    Raises:
        CommitCancelledError: If the user gives up on lint errors.
    """
    if lint_enabled:
        loop = RepairLoop(prompter, lambda m: lint_commit_message(m, config.lint_rules))
        return loop.run(message)

    if prompter.confirm("Preview commit message?", default=True):
        info("\nPreview commit message:\n")
        typer.echo(message)
    if not prompter.confirm("Proceed with commit?", default=True):
        return None
    return message


def commit_command(
    push_flag: bool = typer.Option(
        False,
        "--push",
        help="Push commit to remote after creation",
    ),
    sign: bool = typer.Option(
        False,
        "--sign",
        help="Sign commit with GPG",
    ),
    lint: Optional[bool] = typer.Option(
        None,
        "--lint/--no-lint",
        help="Enable or disable commit message linting (default from config)",
    ),
) -> None:
    """Create a commit with interactive prompts."""
    try:
        ensure_git_repo()
        repo_root = get_repo_root()
        config = load_config(repo_root)
        prompter = get_prompter()

        stage_changes(config, prompter, repo_root)

        staged = require_staged_files()

        answers = collect_commit_answers(
            config,
            prompter,
            suggested_type=suggest_commit_type(staged),
            auto_summary=compute_auto_summary(staged),
            push_default=push_flag,
        )
        answers = fill_ticket_from_branch(config, answers)

        if answers.run_ci:
            if config.ci_command:
                info("Running CI tests...")
                try:
                    run_shell_command(config.ci_command)
                except GitError as e:
                    error(f"CI tests failed: {e}")
                    raise typer.Exit(1)
                success("CI tests passed!")
            else:
                warn("No CI command configured, skipping CI run.")

        # The CI command may have changed the index
        require_staged_files()

        if not review_staged_diff(prompter):
            warn("Commit cancelled due to diff review.")
            raise typer.Exit(0)

        message = render_commit_message(config.templates.default_template, answers)
        lint_enabled = lint if lint is not None else config.enable_lint
        message = finalize_message(config, prompter, message, lint_enabled)
        if message is None:
            warn("Commit cancelled after preview.")
            raise typer.Exit(0)

        try:
            commit(message, sign=sign)
        except GitError as e:
            error(f"Error during commit: {e}")
            raise typer.Exit(1)
        success("Commit successful!")

        if answers.push:
            try:
                push()
                success("Pushed successfully!")
            except GitError as e:
                # The commit already exists, so a failed push is not fatal
                error(f"Push failed: {e}")

    except NoStagedChangesError as e:
        warn(f"{e} Aborting commit.")
        raise typer.Exit(0)
    except CommitCancelledError as e:
        error(f"Commit cancelled: {e}")
        raise typer.Exit(1)
    except GitError as e:
        error(f"Error: {e}")
        raise typer.Exit(1)
