"""Tests for smartcommit.core.template module."""

import random
import re

from smartcommit.config import BranchConfig, PlaceholderConfig
from smartcommit.config.defaults import DEFAULT_COMMIT_TEMPLATE
from smartcommit.core import (
    CommitAnswers,
    commit_values,
    find_placeholders,
    render_branch_name,
    render_commit_message,
    substitute,
)


class TestFindPlaceholders:
    """Tests for find_placeholders function."""

    def test_in_order_of_appearance(self):
        """Test placeholders are listed in template order."""
        assert find_placeholders("{type}/{ticketId}-{shortDesc}") == ["type", "ticketId", "shortDesc"]

    def test_duplicates_listed_once(self):
        """Test repeated placeholders appear once."""
        assert find_placeholders("{a}-{b}-{a}") == ["a", "b"]

    def test_no_placeholders(self):
        """Test plain text and stray braces."""
        assert find_placeholders("main {not a placeholder} }{") == []


class TestSubstitute:
    """Tests for substitute function."""

    def test_replaces_first_occurrence_only(self):
        """Test only the first token of a key is replaced."""
        assert substitute("{summary} {summary}", {"summary": "x"}) == "x {summary}"

    def test_template_without_placeholders(self):
        """Test a template without tokens is returned unchanged."""
        assert substitute("plain message {", {"type": "feat"}) == "plain message {"

    def test_values_not_rescanned(self):
        """Test a value containing another token is inserted literally."""
        assert substitute("{a} {b}", {"a": "{b}", "b": "x"}) == "{b} x"

    def test_unknown_tokens_left_alone(self):
        """Test tokens without a value are copied through."""
        assert substitute("{type} {unknown}", {"type": "feat"}) == "feat {unknown}"


class TestRenderCommitMessage:
    """Tests for render_commit_message function."""

    def test_default_template_without_ticket(self):
        """Test the ticket separator is empty without a ticket."""
        answers = CommitAnswers(type="feat", summary="add x")

        message = render_commit_message(DEFAULT_COMMIT_TEMPLATE, answers)

        assert message == "[feat]: add x\n\nBody:\n\n\nFooter:\n"

    def test_default_template_with_ticket(self):
        """Test the ticket and its separator are inserted."""
        answers = CommitAnswers(type="fix", summary="fix crash", ticket="PROJ-1", body="details")

        message = render_commit_message(DEFAULT_COMMIT_TEMPLATE, answers)

        assert message.startswith("[fix]: PROJ-1: fix crash\n")
        assert "Body:\ndetails" in message

    def test_scope_wrapped_in_parentheses(self):
        """Test a non-empty scope is rendered as '(scope)'."""
        answers = CommitAnswers(type="feat", scope="api", summary="add endpoint")

        assert render_commit_message("{type}{scope}: {summary}", answers) == "feat(api): add endpoint"

    def test_empty_scope(self):
        """Test an empty scope leaves no parentheses."""
        answers = CommitAnswers(type="feat", summary="add endpoint")

        assert render_commit_message("{type}{scope}: {summary}", answers) == "feat: add endpoint"

    def test_values_are_trimmed(self):
        """Test surrounding whitespace is removed from answers."""
        answers = CommitAnswers(type=" feat ", summary="  add x  ")

        assert render_commit_message("{type}: {summary}", answers) == "feat: add x"

    def test_placeholder_text_in_answers_is_kept(self):
        """Test braces typed by the user are not treated as placeholders."""
        answers = CommitAnswers(type="fix", summary="escape {body} token", body="details")

        message = render_commit_message("{type}: {summary}\n\n{body}", answers)

        assert message == "fix: escape {body} token\n\ndetails"

    def test_extra_values(self):
        """Test custom placeholders are filled from extra values."""
        answers = CommitAnswers(type="feat", summary="x")

        message = render_commit_message("{type}: {summary} [{team}]", answers, {"team": " core "})

        assert message == "feat: x [core]"

    def test_extra_values_do_not_override_answers(self):
        """Test built-in placeholders win over extra values."""
        values = commit_values(CommitAnswers(type="feat"), {"type": "fix"})
        assert values["type"] == "feat"


class TestRenderBranchName:
    """Tests for render_branch_name function."""

    def test_all_values_present(self):
        """Test the default template with all answers."""
        values = {"type": "feature", "ticketId": "PROJ-123", "shortDesc": "Add login page"}

        assert render_branch_name("{type}/{ticketId}-{shortDesc}", values) == "feature/PROJ-123-add-login-page"

    def test_empty_ticket_removes_trailing_dash(self):
        """Test an empty placeholder is removed with its '-'."""
        values = {"type": "feature", "ticketId": "", "shortDesc": "Add login"}

        assert render_branch_name("{type}/{ticketId}-{shortDesc}", values) == "feature/add-login"

    def test_empty_type_removes_trailing_slash(self):
        """Test an empty placeholder is removed with its '/'."""
        values = {"type": "", "ticketId": "PROJ-1", "shortDesc": "login"}

        assert render_branch_name("{type}/{ticketId}-{shortDesc}", values) == "PROJ-1-login"

    def test_missing_values_treated_as_empty(self):
        """Test placeholders without an answer are removed."""
        assert render_branch_name("{type}/{scope}/{shortDesc}", {"type": "feature", "shortDesc": "login"}) == "feature/login"

    def test_value_sanitized_to_empty_is_removed(self):
        """Test a value with only symbols counts as empty and dangling '-' is trimmed."""
        values = {"type": "feature", "ticketId": "X-1", "shortDesc": "!!!"}

        assert render_branch_name("{type}/{ticketId}-{shortDesc}", values) == "feature/X-1"

    def test_per_placeholder_options(self):
        """Test placeholder options apply and a dangling separator is trimmed."""
        config = BranchConfig(placeholders={"shortDesc": PlaceholderConfig(max_length=5)})

        name = render_branch_name("{type}/{shortDesc}", {"type": "fix", "shortDesc": "Long description"}, config)

        assert name == "fix/long"

    def test_numeric_ticket(self):
        """Test the default template with a numeric ticket."""
        values = {"type": "feat", "ticketId": "123", "shortDesc": "add login"}

        assert render_branch_name("{type}/{ticketId}-{shortDesc}", values) == "feat/123-add-login"

    def test_fallback_name_when_empty(self):
        """Test a random fallback name is generated when nothing is left."""
        name = render_branch_name("{type}/{ticketId}-{shortDesc}", {}, rng=random.Random(7))

        assert re.fullmatch(r"new-branch-\d{1,4}", name)

    def test_fallback_name_is_seedable(self):
        """Test the same seed produces the same fallback name."""
        first = render_branch_name("{shortDesc}", {}, rng=random.Random(42))
        second = render_branch_name("{shortDesc}", {}, rng=random.Random(42))

        assert first == second
