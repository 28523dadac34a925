"""Tests for smartcommit.prompts module."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import typer

from smartcommit.prompts import Choice, TyperPrompter, edit_text, find_editor, parse_selection


class TestParseSelection:
    """Tests for parse_selection function."""

    def test_single_and_list(self):
        """Test comma separated numbers."""
        assert parse_selection("1,3", 3) == [0, 2]

    def test_range(self):
        """Test ranges are expanded."""
        assert parse_selection("2-3", 3) == [1, 2]

    def test_all(self):
        """Test 'a' selects everything."""
        assert parse_selection("a", 3) == [0, 1, 2]

    def test_empty_selects_nothing(self):
        """Test blank input selects nothing."""
        assert parse_selection("  ", 3) == []

    def test_duplicates_and_spaces(self):
        """Test duplicates collapse and spaces are ignored."""
        assert parse_selection("1, 1 ,2", 3) == [0, 1]

    def test_out_of_range(self):
        """Test numbers outside the option list are invalid."""
        assert parse_selection("4", 3) is None
        assert parse_selection("0", 3) is None

    def test_reversed_range(self):
        """Test reversed ranges are invalid."""
        assert parse_selection("3-1", 3) is None

    def test_garbage(self):
        """Test non-numeric input is invalid."""
        assert parse_selection("x", 3) is None


class TestTyperPrompter:
    """Tests for TyperPrompter."""

    def test_select_returns_value(self, mocker):
        """Test the numbered answer maps to the choice value."""
        mocker.patch("typer.prompt", return_value=2)
        choices = [Choice("Soft", "soft"), Choice("Hard", "hard")]

        assert TyperPrompter().select("Pick", choices) == "hard"

    def test_select_retries_invalid_number(self, mocker):
        """Test out-of-range answers are asked again."""
        mock_prompt = mocker.patch("typer.prompt", side_effect=[5, 1])
        choices = [Choice("Soft", "soft"), Choice("Hard", "hard")]

        assert TyperPrompter().select("Pick", choices) == "soft"
        assert mock_prompt.call_count == 2

    def test_select_default_is_index_of_default_value(self, mocker):
        """Test the default value is offered as the default number."""
        mock_prompt = mocker.patch("typer.prompt", return_value=2)
        choices = [Choice("Soft", "soft"), Choice("Hard", "hard")]

        TyperPrompter().select("Pick", choices, default="hard")

        assert mock_prompt.call_args.kwargs["default"] == 2

    def test_checkbox(self, mocker):
        """Test invalid selections are asked again."""
        mocker.patch("typer.prompt", side_effect=["9", "1,2"])

        assert TyperPrompter().checkbox("Files", ["a.py", "b.py"]) == ["a.py", "b.py"]

    def test_checkbox_without_options(self, mocker):
        """Test no question is asked without options."""
        mock_prompt = mocker.patch("typer.prompt")

        assert TyperPrompter().checkbox("Files", []) == []
        mock_prompt.assert_not_called()

    def test_text_required(self, mocker):
        """Test required text is asked until non-empty."""
        mocker.patch("typer.prompt", side_effect=["  ", " add x "])

        assert TyperPrompter().text("Summary", required=True) == "add x"

    def test_editor_uses_edit_text(self, mocker):
        """Test the editor answer comes from the edited file."""
        mock_edit = mocker.patch("smartcommit.prompts.edit_text", return_value="edited")

        assert TyperPrompter().editor("Edit", default="draft") == "edited"
        mock_edit.assert_called_once_with("draft")


def fake_editor(new_content, returncode=0):
    """Build a subprocess.run replacement that rewrites the edited file."""
    def run(cmd, check=False):
        Path(cmd[-1]).write_text(new_content, encoding="utf-8")
        result = MagicMock()
        result.returncode = returncode
        return result
    return run


class TestFindEditor:
    """Tests for find_editor function."""

    def test_editor_variable_with_arguments(self, monkeypatch):
        """Test $EDITOR is split into command parts."""
        monkeypatch.delenv("VISUAL", raising=False)
        monkeypatch.setenv("EDITOR", "code --wait")

        assert find_editor() == ["code", "--wait"]

    def test_visual_preferred(self, monkeypatch):
        """Test $VISUAL wins over $EDITOR."""
        monkeypatch.setenv("VISUAL", "vim")
        monkeypatch.setenv("EDITOR", "nano")

        assert find_editor() == ["vim"]

    def test_fallback_to_vi(self, mocker, monkeypatch):
        """Test vi is used when nothing else is available."""
        monkeypatch.delenv("VISUAL", raising=False)
        monkeypatch.delenv("EDITOR", raising=False)
        mocker.patch("shutil.which", return_value=None)

        assert find_editor() == ["vi"]


class TestEditText:
    """Tests for edit_text function."""

    def test_returns_saved_content(self, mocker):
        """Test the draft is written to a file and the edited file is read back."""
        seen = {}

        def run(cmd, check=False):
            path = Path(cmd[-1])
            seen["path"] = path
            seen["initial"] = path.read_text(encoding="utf-8")
            return fake_editor("fix: new message\n")(cmd, check)

        mocker.patch("smartcommit.prompts.find_editor", return_value=["fake-editor", "--wait"])
        mock_run = mocker.patch("subprocess.run", side_effect=run)

        assert edit_text("draft") == "fix: new message"
        assert seen["initial"] == "draft"
        assert mock_run.call_args.args[0][:2] == ["fake-editor", "--wait"]
        assert not seen["path"].exists()

    def test_non_zero_exit_keeps_content(self, mocker, capsys):
        """Test a failing editor is reported and the file content is still used."""
        mocker.patch("smartcommit.prompts.find_editor", return_value=["fake-editor"])
        mocker.patch("subprocess.run", side_effect=fake_editor("kept", returncode=1))

        assert edit_text("draft") == "kept"
        assert "exited with code 1" in capsys.readouterr().err

    def test_editor_not_found(self, mocker):
        """Test a missing editor exits with an error."""
        mocker.patch("smartcommit.prompts.find_editor", return_value=["missing-editor"])
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(typer.Exit):
            edit_text("draft")

    def test_prompter_editor_end_to_end(self, mocker):
        """Test TyperPrompter.editor goes through the editor command."""
        mocker.patch("smartcommit.prompts.find_editor", return_value=["fake-editor"])
        mocker.patch("subprocess.run", side_effect=fake_editor("edited body\n\n"))

        assert TyperPrompter().editor("Edit", default="draft") == "edited body"
