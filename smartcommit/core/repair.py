"""Interactive lint-and-repair loop for commit messages.

State machine:

    EDITING --confirm--> LINTING --pass--> DONE
       ^                    |
       |                  fail
       |                    v
       +----keep editing--PROMPT_RETRY --decline--> CANCELLED

Declining the "looks OK?" question in EDITING opens the editor and stays
in EDITING. There is no retry limit unless ``max_rounds`` is given.
"""

from enum import Enum
from typing import Callable, Optional

import typer

from smartcommit.core.lint import LintViolation
from smartcommit.exceptions import SmartCommitError
from smartcommit.prompts import Prompter


class CommitCancelledError(SmartCommitError):
    """Raised when the user gives up fixing a message that fails lint."""

    pass


class RepairState(Enum):
    """States of the repair loop."""

    EDITING = "editing"
    LINTING = "linting"
    PROMPT_RETRY = "prompt_retry"
    DONE = "done"
    CANCELLED = "cancelled"


def _echo_draft(message: str) -> None:
    typer.echo(typer.style("\nPreview commit message:\n", fg=typer.colors.BLUE))
    typer.echo(message)


def _echo_violations(violations: list[LintViolation]) -> None:
    typer.echo(typer.style("Linting errors:", fg=typer.colors.RED), err=True)
    for violation in violations:
        typer.echo(typer.style(f"- {violation}", fg=typer.colors.RED), err=True)


class RepairLoop:
    """Drive a draft commit message until it passes lint or the user gives up.

    Args:
        prompter: Source of confirmations and edited text.
        lint: Function returning the violations for a message.
        show_draft: Displays the current draft before confirmation.
        show_violations: Displays lint violations.
        max_rounds: Optional cap on lint evaluations; None means unbounded.
    """

    def __init__(
        self,
        prompter: Prompter,
        lint: Callable[[str], list[LintViolation]],
        show_draft: Callable[[str], None] = _echo_draft,
        show_violations: Callable[[list[LintViolation]], None] = _echo_violations,
        max_rounds: Optional[int] = None,
    ):
        self.prompter = prompter
        self.lint = lint
        self.show_draft = show_draft
        self.show_violations = show_violations
        self.max_rounds = max_rounds
        self.lint_count = 0
        self.state = RepairState.EDITING

    def run(self, draft: str, confirm_first: bool = True) -> str:
        """Run the loop.

        Args:
            draft: Initial message.
            confirm_first: Ask "looks OK?" before linting. When False the
                editor is opened first and the result is linted directly
                (the amend flow).

        Returns:
            The message that passed lint.

        Raises:
            CommitCancelledError: If the user declines to keep editing.
        """
        message = draft
        self.state = RepairState.EDITING
        if not confirm_first:
            message = self.prompter.editor("Edit the commit message:", default=message)
            self.state = RepairState.LINTING

        violations: list[LintViolation] = []
        while True:
            if self.state == RepairState.EDITING:
                self.show_draft(message)
                if self.prompter.confirm("Does the commit message look OK?", default=True):
                    self.state = RepairState.LINTING
                else:
                    message = self.prompter.editor("Edit the commit message as needed:", default=message)

            elif self.state == RepairState.LINTING:
                self.lint_count += 1
                violations = self.lint(message)
                if not violations:
                    self.state = RepairState.DONE
                else:
                    self.show_violations(violations)
                    self.state = RepairState.PROMPT_RETRY

            elif self.state == RepairState.PROMPT_RETRY:
                if self.max_rounds is not None and self.lint_count >= self.max_rounds:
                    self.state = RepairState.CANCELLED
                elif self.prompter.confirm(
                    "Lint errors found. Would you like to re-edit the commit message?",
                    default=True,
                ):
                    message = self.prompter.editor(
                        "Edit the commit message to fix these issues:", default=message
                    )
                    self.state = RepairState.EDITING if confirm_first else RepairState.LINTING
                else:
                    self.state = RepairState.CANCELLED

            elif self.state == RepairState.DONE:
                return message

            else:
                summary = "; ".join(str(v) for v in violations)
                raise CommitCancelledError(f"Commit message still fails lint: {summary}")
