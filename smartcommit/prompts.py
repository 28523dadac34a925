"""Interactive prompt collaborator.

Commands never call typer's prompt helpers directly; they go through a
Prompter so the interactive flows can be driven by scripted answers in tests.
"""

import os
import shlex
import shutil
import subprocess
import tempfile
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence

import typer


@dataclass(frozen=True)
class Choice:
    """An option in a single-select question."""

    name: str
    value: Any


class Prompter(ABC):
    """Abstract base class for asking the user questions."""

    @abstractmethod
    def text(self, message: str, default: str = "", required: bool = False) -> str:
        """Ask for a single line of text."""

    @abstractmethod
    def select(self, message: str, choices: Sequence[Choice], default: Any = None) -> Any:
        """Ask the user to pick one choice; returns its value."""

    @abstractmethod
    def checkbox(self, message: str, options: Sequence[str]) -> list[str]:
        """Ask the user to pick any number of options."""

    @abstractmethod
    def confirm(self, message: str, default: bool = True) -> bool:
        """Ask a yes/no question."""

    @abstractmethod
    def editor(self, message: str, default: str = "") -> str:
        """Open the user's editor pre-filled with ``default``; returns the text."""


def parse_selection(raw: str, count: int) -> Optional[list[int]]:
    """Parse a checkbox answer such as "1,3-4" or "a".

    Args:
        raw: User input.
        count: Number of options.

    Returns:
        Sorted zero-based indexes, or None when the input is invalid.
    """
    raw = raw.strip().lower()
    if not raw:
        return []
    if raw in ("a", "all"):
        return list(range(count))

    indexes: set[int] = set()
    for part in raw.replace(" ", "").split(","):
        if not part:
            continue
        try:
            if "-" in part:
                start, end = (int(x) for x in part.split("-", 1))
            else:
                start = end = int(part)
        except ValueError:
            return None
        if start < 1 or end > count or start > end:
            return None
        indexes.update(range(start - 1, end))
    return sorted(indexes)


def find_editor() -> list[str]:
    """Find an available text editor.

    Preference order:
    1. $VISUAL, then $EDITOR (may include arguments, e.g. "code --wait")
    2. nano
    3. vi

    Returns:
        List of command parts to run the editor.
    """
    for variable in ("VISUAL", "EDITOR"):
        editor = os.environ.get(variable)
        if editor:
            return shlex.split(editor)

    if shutil.which("nano"):
        return ["nano"]

    return ["vi"]


def edit_text(text: str) -> str:
    """Edit text in the user's editor through a temporary file.

    Args:
        text: Initial file content.

    Returns:
        The saved content without trailing newlines.

    Raises:
        typer.Exit: If the editor cannot be started.
    """
    editor_cmd = find_editor()

    with tempfile.NamedTemporaryFile(
        "w", suffix=".txt", prefix="smartcommit-", encoding="utf-8", delete=False
    ) as f:
        f.write(text)
        file_path = Path(f.name)

    try:
        result = subprocess.run(editor_cmd + [str(file_path)], check=False)
        if result.returncode != 0:
            typer.echo(f"Warning: Editor exited with code {result.returncode}", err=True)
        return file_path.read_text(encoding="utf-8").rstrip("\n")
    except FileNotFoundError:
        typer.echo(f"Error: Editor not found: {editor_cmd[0]}", err=True)
        raise typer.Exit(1)
    finally:
        file_path.unlink(missing_ok=True)


class TyperPrompter(Prompter):
    """Prompter backed by typer's terminal helpers."""

    def text(self, message: str, default: str = "", required: bool = False) -> str:
        while True:
            answer = typer.prompt(message, default=default, show_default=bool(default))
            answer = answer.strip()
            if answer or not required:
                return answer
            typer.echo("A value is required.", err=True)

    def select(self, message: str, choices: Sequence[Choice], default: Any = None) -> Any:
        if not choices:
            raise ValueError("select() needs at least one choice")

        default_index = 1
        for i, choice in enumerate(choices, 1):
            if choice.value == default:
                default_index = i

        typer.echo(message)
        for i, choice in enumerate(choices, 1):
            typer.echo(f"  {i}. {choice.name}")

        while True:
            index = typer.prompt(f"Select (1-{len(choices)})", type=int, default=default_index)
            if 1 <= index <= len(choices):
                return choices[index - 1].value
            typer.echo("Invalid choice.", err=True)

    def checkbox(self, message: str, options: Sequence[str]) -> list[str]:
        if not options:
            return []

        typer.echo(message)
        for i, option in enumerate(options, 1):
            typer.echo(f"  {i}. {option}")

        while True:
            raw = typer.prompt(
                "Numbers separated by commas, ranges like 2-4, 'a' for all, empty for none",
                default="",
                show_default=False,
            )
            indexes = parse_selection(raw, len(options))
            if indexes is not None:
                return [options[i] for i in indexes]
            typer.echo("Invalid selection.", err=True)

    def confirm(self, message: str, default: bool = True) -> bool:
        return typer.confirm(message, default=default)

    def editor(self, message: str, default: str = "") -> str:
        typer.echo(message)
        return edit_text(default)
