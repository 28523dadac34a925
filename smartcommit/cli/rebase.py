"""CLI command wrapping interactive rebase with a short guide."""

import typer

from smartcommit.git import GitError, ensure_git_repo, interactive_rebase
from smartcommit.cli.utils import ask_validated, error, get_prompter, info, is_positive_int, success


REBASE_COMMANDS = [
    ("pick", "Use the commit as-is."),
    ("reword", "Use the commit, but edit the commit message."),
    ("edit", "Stop at the commit for amending."),
    ("squash", "Merge the commit into the previous commit."),
    ("fixup", "Like squash, but discard this commit's message."),
    ("drop", "Remove the commit."),
    ("exec", "Run a shell command."),
    ("break", "Pause the rebase (resume later with 'git rebase --continue')."),
]

EDITOR_STEPS = [
    "Use arrow keys to navigate up/down.",
    "Press 'i' to enter insert mode and edit commands.",
    "Modify 'pick' to another command (e.g., 'reword', 'squash').",
    "Press 'Esc' to exit insert mode.",
    "Type ':wq' and press Enter to save and exit.",
    "If you make a mistake, use ':q!' to quit without saving.",
]


def print_rebase_guide() -> None:
    """Print the interactive rebase cheat sheet."""
    yellow = typer.colors.YELLOW
    typer.echo(typer.style("### Interactive Rebase Guide ###", fg=yellow))
    typer.echo(typer.style(
        "Git interactive rebase allows you to modify, reorder, and squash commits.", fg=yellow
    ))
    typer.echo(typer.style(
        "When the editor opens, you will see a list of commits. "
        "Each line starts with a command and a commit hash.",
        fg=yellow,
    ))
    typer.echo(typer.style(
        "You can change the command to modify how the commit is handled.\n", fg=yellow
    ))

    typer.echo(typer.style("Basic Commands:", fg=typer.colors.GREEN))
    for command, description in REBASE_COMMANDS:
        typer.echo(typer.style(f"  {command:<7}", fg=typer.colors.CYAN) + description)
    typer.echo()

    typer.echo(typer.style("### How to Use the Editor ###", fg=typer.colors.MAGENTA))
    for i, step in enumerate(EDITOR_STEPS, 1):
        typer.echo(typer.style(f"{i}. {step}", fg=yellow))
    typer.echo()


def rebase_command() -> None:
    """Launch an interactive rebase with explanations."""
    try:
        ensure_git_repo()
        prompter = get_prompter()

        count = int(ask_validated(
            prompter,
            "Enter the number of commits to rebase (e.g., 3):",
            is_positive_int,
            "Please enter a valid positive number",
        ))

        info(f"Launching interactive rebase for the last {count} commits.\n")
        print_rebase_guide()

        if not prompter.confirm(
            "Did you read the instructions above? Ready to start the rebase?", default=True
        ):
            error("Rebase aborted by user.")
            raise typer.Exit(0)

        info("Opening interactive rebase editor...")
        interactive_rebase(count)
        success("Interactive rebase completed.")

    except GitError as e:
        error(f"Error during interactive rebase: {e}")
        raise typer.Exit(1)
