"""CLI command for creating a branch from a naming template."""

import random
from typing import Optional

import typer

from smartcommit.config import SmartCommitConfig, load_config
from smartcommit.core import find_placeholders, render_branch_name
from smartcommit.git import (
    GitError,
    checkout,
    create_branch,
    ensure_git_repo,
    fetch_all,
    get_local_branches,
    get_repo_root,
)
from smartcommit.prompts import Choice, Prompter
from smartcommit.cli.utils import error, get_prompter, info, success, warn


MANUAL_INPUT = "Manual input..."
SEARCH = "Search..."
CUSTOM_INPUT = "CUSTOM_INPUT"
SUGGESTION_COUNT = 4


def branch_suggestions(branches: list[str], query: str = "") -> list[str]:
    """Suggest base branches for a search query.

    Without a query: the most recent branches plus main/master. With a query:
    every branch containing it (case-insensitive). "Manual input..." is
    always the last entry.

    Args:
        branches: Local branches, most recent first.
        query: Search text.

    Returns:
        Branch names to offer.
    """
    if not query:
        suggestions = branches[:SUGGESTION_COUNT]
        main_branch = next((b for b in branches if b.lower() in ("main", "master")), None)
        if main_branch and main_branch not in suggestions:
            suggestions.append(main_branch)
    else:
        needle = query.lower()
        suggestions = [b for b in branches if needle in b.lower()]
    return suggestions + [MANUAL_INPUT]


def choose_base_branch(prompter: Prompter, branches: list[str]) -> str:
    """Ask for the base branch, with searching and manual entry.

    Returns:
        The base branch name; empty means the current HEAD.
    """
    query = ""
    while True:
        options = [Choice(name=b, value=b) for b in branch_suggestions(branches, query)]
        options.append(Choice(name=SEARCH, value=SEARCH))
        selected = prompter.select(
            'Select a base branch. Choose "Search..." to filter or "Manual input..." to enter something else.',
            options,
        )
        if selected == SEARCH:
            query = prompter.text("Search branches:")
            continue
        if selected == MANUAL_INPUT:
            return prompter.text("Enter base branch name (any value):").strip()
        return selected


def ask_placeholder(config: SmartCommitConfig, prompter: Prompter, placeholder: str) -> str:
    """Ask for the raw value of one branch template placeholder."""
    if placeholder == "type":
        types = config.branch.types
        if not types:
            return prompter.text("Enter branch type (no branch types defined in config):")
        choices = [Choice(name=f"{bt.value} ({bt.description})", value=bt.value) for bt in types]
        choices.append(Choice(name="Custom input...", value=CUSTOM_INPUT))
        selected = prompter.select("Select branch type:", choices)
        if selected == CUSTOM_INPUT:
            return prompter.text("Enter custom branch type:").strip()
        return selected
    if placeholder == "shortDesc":
        return prompter.text("Short description for branch name:", required=True)
    if placeholder == "ticketId":
        return prompter.text("Enter ticket ID (optional):")
    return prompter.text(f"Enter {placeholder} (optional):")


def build_branch_name(
    config: SmartCommitConfig,
    prompter: Prompter,
    rng: Optional[random.Random] = None,
) -> str:
    """Ask for every placeholder in the branch template and render the name."""
    template = config.branch.template
    answers = {ph: ask_placeholder(config, prompter, ph) for ph in find_placeholders(template)}
    return render_branch_name(template, answers, config.branch, rng=rng)


def branch_command() -> None:
    """Create a new branch from a base branch using the naming template."""
    try:
        ensure_git_repo()
        config = load_config(get_repo_root())
        prompter = get_prompter()

        try:
            branches = get_local_branches()
        except GitError as e:
            error(f"Error getting local branches: {e}")
            branches = []

        base = choose_base_branch(prompter, branches)
        name = build_branch_name(config, prompter)

        info("Fetching all refs...")
        fetch_all()
        info(f"Creating new branch '{name}' from '{base or 'HEAD'}'...")
        create_branch(name, base)
        success(f"Branch created: {name}")
    except GitError as e:
        error(f"Error creating branch: {e}")
        raise typer.Exit(1)

    stay = prompter.confirm(
        f"Stay on '{name}'? (If 'No', you'll return to '{base or 'HEAD'}')",
        default=True,
    )
    if stay:
        return
    if not base:
        warn("No base branch specified, staying on new branch anyway.")
        return
    try:
        checkout(base)
        success(f"Switched back to '{base}'.")
    except GitError as e:
        error(f"Error switching branch back: {e}")
