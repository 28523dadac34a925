"""Tests for smartcommit.config package."""

import pytest
import yaml
from pydantic import ValidationError

from smartcommit.config import (
    BranchConfig,
    LintRules,
    ParseError,
    ParseResult,
    PlaceholderConfig,
    SmartCommitConfig,
    TypeCase,
    config_from_dict,
    get_global_config_file,
    get_repo_config_file,
    load_config,
    parse_branch_types,
    parse_placeholder_configs,
    read_yaml_file,
    save_global_config,
)
from smartcommit.config.defaults import DEFAULT_COMMIT_TEMPLATE
from smartcommit.exceptions import ConfigError


def write_yaml(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.dump(data), encoding="utf-8")


class TestModels:
    """Tests for configuration models."""

    def test_defaults(self):
        """Test built-in default values."""
        config = SmartCommitConfig()

        assert len(config.commit_types) == 8
        assert config.commit_types[0].value == "feat"
        assert config.auto_add is False
        assert config.use_emoji is True
        assert config.enable_lint is False
        assert config.templates.default_template == DEFAULT_COMMIT_TEMPLATE
        assert config.lint_rules.summary_max_length == 72
        assert config.lint_rules.type_case == TypeCase.LOWERCASE
        assert config.branch.template == "{type}/{ticketId}-{shortDesc}"

    def test_config_is_frozen(self):
        """Test configuration cannot be mutated."""
        config = SmartCommitConfig()
        with pytest.raises(ValidationError):
            config.auto_add = True

    def test_placeholder_config_lookup(self):
        """Test configured and unconfigured placeholder options."""
        branch = BranchConfig()

        assert branch.placeholder_config("ticketId").lowercase is False
        assert branch.placeholder_config("shortDesc") == PlaceholderConfig()

    def test_separator_must_be_single_character(self):
        """Test multi-character separators are rejected."""
        with pytest.raises(ValidationError):
            PlaceholderConfig(separator="--")

    def test_summary_max_length_must_be_positive(self):
        """Test non-positive summary lengths are rejected."""
        with pytest.raises(ValidationError):
            LintRules(summary_max_length=0)

    def test_unknown_keys_ignored(self):
        """Test unknown keys in the data are ignored."""
        config = SmartCommitConfig.model_validate({"auto_add": True, "legacy_option": 1})
        assert config.auto_add is True


class TestParseResult:
    """Tests for ParseResult and ParseError."""

    def test_success(self):
        """Test a successful result."""
        result = ParseResult.success(3)

        assert result.ok
        assert result.unwrap_or(0) == 3

    def test_failure(self):
        """Test a failed result falls back to the default."""
        result = ParseResult.failure("config.yaml", "bad value")

        assert not result.ok
        assert result.unwrap_or(0) == 0
        assert str(result.error) == "config.yaml: bad value"

    def test_parse_error_str(self):
        """Test ParseError formatting."""
        assert str(ParseError("ticket_regex", "invalid")) == "ticket_regex: invalid"


class TestReadYamlFile:
    """Tests for read_yaml_file function."""

    def test_empty_file(self, temp_dir):
        """Test an empty file is an empty mapping."""
        path = temp_dir / "config.yaml"
        path.write_text("", encoding="utf-8")

        result = read_yaml_file(path)

        assert result.ok
        assert result.value == {}

    def test_invalid_yaml(self, temp_dir):
        """Test malformed YAML is a failure."""
        path = temp_dir / "config.yaml"
        path.write_text("auto_add: [unclosed", encoding="utf-8")

        assert not read_yaml_file(path).ok

    def test_non_mapping(self, temp_dir):
        """Test a YAML list is rejected."""
        path = temp_dir / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        result = read_yaml_file(path)

        assert not result.ok
        assert "mapping" in result.error.message


class TestConfigFromDict:
    """Tests for config_from_dict function."""

    def test_valid(self):
        """Test valid data produces a config."""
        result = config_from_dict({"ci_command": "pytest"})

        assert result.ok
        assert result.value.ci_command == "pytest"

    def test_invalid_reports_location(self):
        """Test validation errors name the failing field."""
        result = config_from_dict({"lint_rules": {"summary_max_length": -1}}, source="x.yaml")

        assert not result.ok
        assert result.error.source == "x.yaml"
        assert "lint_rules.summary_max_length" in result.error.message


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_without_files(self, fake_home):
        """Test defaults are used when no file exists."""
        assert load_config() == SmartCommitConfig()

    def test_global_file(self, fake_home):
        """Test values from the global file are applied."""
        write_yaml(get_global_config_file(), {"auto_add": True, "ci_command": "make test"})

        config = load_config()

        assert config.auto_add is True
        assert config.ci_command == "make test"

    def test_repo_overrides_global(self, fake_home, mock_repo_root):
        """Test the repository file overrides the global file."""
        write_yaml(get_global_config_file(), {"auto_add": True, "use_emoji": True})
        write_yaml(get_repo_config_file(mock_repo_root), {"use_emoji": False})

        config = load_config(mock_repo_root)

        assert config.auto_add is True
        assert config.use_emoji is False

    def test_override_is_shallow(self, fake_home, mock_repo_root):
        """Test a nested section in the repo file replaces the global one."""
        write_yaml(get_global_config_file(), {"steps": {"scope": True}})
        write_yaml(get_repo_config_file(mock_repo_root), {"steps": {"body": True}})

        config = load_config(mock_repo_root)

        assert config.steps.body is True
        assert config.steps.scope is False

    def test_repo_layer_skipped_without_root(self, fake_home, mock_repo_root):
        """Test the repo file is not read when no root is given."""
        write_yaml(get_repo_config_file(mock_repo_root), {"auto_add": True})

        assert load_config().auto_add is False

    def test_invalid_yaml_falls_back(self, fake_home, capsys):
        """Test malformed YAML is reported and defaults are used."""
        path = get_global_config_file()
        path.parent.mkdir(parents=True)
        path.write_text("auto_add: [unclosed", encoding="utf-8")

        config = load_config()

        assert config == SmartCommitConfig()
        assert "Warning" in capsys.readouterr().err

    def test_invalid_layer_keeps_previous(self, fake_home, mock_repo_root, capsys):
        """Test an invalid repo layer is skipped but the global layer stays."""
        write_yaml(get_global_config_file(), {"auto_add": True})
        write_yaml(get_repo_config_file(mock_repo_root), {"lint_rules": {"summary_max_length": -1}})

        config = load_config(mock_repo_root)

        assert config.auto_add is True
        assert config.lint_rules.summary_max_length == 72
        assert "summary_max_length" in capsys.readouterr().err


class TestSaveGlobalConfig:
    """Tests for save_global_config function."""

    def test_creates_directory_and_file(self, fake_home):
        """Test the config directory is created."""
        path = save_global_config(SmartCommitConfig(auto_add=True))

        assert path == fake_home / ".smartcommit" / "config.yaml"
        assert path.exists()

    def test_unwritable_location(self, fake_home):
        """Test a write failure raises ConfigError."""
        (fake_home / ".smartcommit").write_text("not a directory", encoding="utf-8")

        with pytest.raises(ConfigError):
            save_global_config(SmartCommitConfig())

    def test_saved_config_is_loaded(self, fake_home):
        """Test a saved configuration is read back."""
        config = SmartCommitConfig(
            ticket_regex=r"[A-Z]+-\d+",
            branch=BranchConfig(placeholders={"shortDesc": PlaceholderConfig(max_length=20)}),
        )
        save_global_config(config)

        assert load_config() == config


class TestParseBranchTypes:
    """Tests for parse_branch_types function."""

    def test_valid(self):
        """Test a JSON array of branch types."""
        result = parse_branch_types('[{"value": "spike", "description": "Experiment"}]')

        assert result.ok
        assert [bt.value for bt in result.value] == ["spike"]

    def test_invalid_json(self):
        """Test malformed JSON is a failure."""
        result = parse_branch_types("not json", source="--branch-type")

        assert not result.ok
        assert result.error.source == "--branch-type"

    def test_not_an_array(self):
        """Test a JSON object is rejected."""
        assert not parse_branch_types('{"value": "x"}').ok

    def test_missing_value(self):
        """Test entries must have a value."""
        assert not parse_branch_types('[{"description": "x"}]').ok


class TestParsePlaceholderConfigs:
    """Tests for parse_placeholder_configs function."""

    def test_valid(self):
        """Test a JSON object of placeholder options."""
        result = parse_placeholder_configs('{"ticketId": {"lowercase": false, "max_length": 10}}')

        assert result.ok
        assert result.value["ticketId"] == PlaceholderConfig(lowercase=False, max_length=10)

    def test_invalid_separator(self):
        """Test invalid options are a failure."""
        result = parse_placeholder_configs('{"shortDesc": {"separator": "--"}}')

        assert not result.ok
        assert "separator" in result.error.message

    def test_not_an_object(self):
        """Test a JSON array is rejected."""
        assert not parse_placeholder_configs("[]").ok
