"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from smartcommit.prompts import Prompter


class ScriptedPrompter(Prompter):
    """Prompter that replays scripted answers and records every question.

    Answers are consumed in order, per question kind. A ``None`` text or
    editor answer means "accept the default".
    """

    def __init__(self, text=(), select=(), checkbox=(), confirm=(), editor=()):
        self.answers = {
            "text": list(text),
            "select": list(select),
            "checkbox": list(checkbox),
            "confirm": list(confirm),
            "editor": list(editor),
        }
        self.calls = []

    def _next(self, kind, message):
        self.calls.append((kind, message))
        queue = self.answers[kind]
        if not queue:
            raise AssertionError(f"Unexpected {kind} prompt: {message}")
        return queue.pop(0)

    def text(self, message, default="", required=False):
        answer = self._next("text", message)
        return default if answer is None else answer

    def select(self, message, choices, default=None):
        return self._next("select", message)

    def checkbox(self, message, options):
        return self._next("checkbox", message)

    def confirm(self, message, default=True):
        return self._next("confirm", message)

    def editor(self, message, default=""):
        answer = self._next("editor", message)
        return default if answer is None else answer

    def messages(self, kind):
        return [message for k, message in self.calls if k == kind]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    # Create .git directory to simulate a git repo
    repo = temp_dir / "repo"
    (repo / ".git").mkdir(parents=True)
    return repo


@pytest.fixture
def fake_home(temp_dir, monkeypatch):
    """Point Path.home() at a temporary directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    return home


@pytest.fixture
def prompter_factory():
    """Build ScriptedPrompter instances."""
    return ScriptedPrompter
