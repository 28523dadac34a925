"""Configuration file management for smartcommit.

Configuration is layered:
- built-in defaults (smartcommit.config.defaults)
- global file: ~/.smartcommit/config.yaml
- repository file: <repo>/.smartcommit/config.yaml

Each layer shallow-overrides the previous one. A layer that cannot be read
or validated is reported on stderr and skipped.
"""

import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from smartcommit.config.models import BranchType, PlaceholderConfig, SmartCommitConfig
from smartcommit.config.result import ParseError, ParseResult
from smartcommit.exceptions import ConfigError


_CONFIG_DIR_NAME = ".smartcommit"
_CONFIG_FILE_NAME = "config.yaml"


def get_global_config_dir() -> Path:
    """Get the global smartcommit configuration directory.

    Returns:
        Path to ~/.smartcommit/
    """
    return Path.home() / _CONFIG_DIR_NAME


def get_global_config_file() -> Path:
    """Get path to the global config.yaml file.

    Returns:
        Path to ~/.smartcommit/config.yaml
    """
    return get_global_config_dir() / _CONFIG_FILE_NAME


def get_repo_config_file(repo_root: Path) -> Path:
    """Get path to the repository config.yaml file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to <repo>/.smartcommit/config.yaml
    """
    return repo_root / _CONFIG_DIR_NAME / _CONFIG_FILE_NAME


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"]) or "(root)"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def read_yaml_file(path: Path) -> ParseResult[dict]:
    """Read a YAML mapping from disk.

    Args:
        path: File to read.

    Returns:
        ParseResult with the mapping (empty for an empty file).
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        return ParseResult.failure(str(path), f"cannot read configuration ({e})")
    if not isinstance(data, dict):
        return ParseResult.failure(str(path), "configuration must be a mapping")
    return ParseResult.success(data)


def config_from_dict(data: dict, source: str = "configuration") -> ParseResult[SmartCommitConfig]:
    """Validate a configuration dictionary.

    Args:
        data: Raw configuration, as loaded from YAML.
        source: Label used in the error, if any.

    Returns:
        ParseResult with a SmartCommitConfig.
    """
    try:
        return ParseResult.success(SmartCommitConfig.model_validate(data))
    except ValidationError as e:
        return ParseResult.failure(source, _format_validation_error(e))


def config_to_dict(config: SmartCommitConfig) -> dict:
    """Convert a configuration to a plain dictionary for saving.

    Args:
        config: SmartCommitConfig instance.

    Returns:
        Dictionary of YAML-serializable values.
    """
    return config.model_dump(mode="json")


def warn_parse_error(error: ParseError) -> None:
    """Report a configuration problem on stderr."""
    typer.echo(typer.style(f"Warning: {error}. Using defaults.", fg=typer.colors.YELLOW), err=True)


def load_config(repo_root: Optional[Path] = None) -> SmartCommitConfig:
    """Load the effective configuration (repo overrides global overrides defaults).

    Args:
        repo_root: Repository root, or None to skip the repository layer.

    Returns:
        The merged SmartCommitConfig.
    """
    merged: dict[str, Any] = config_to_dict(SmartCommitConfig())

    layers = [get_global_config_file()]
    if repo_root is not None:
        layers.append(get_repo_config_file(repo_root))

    for path in layers:
        if not path.exists():
            continue
        raw = read_yaml_file(path)
        if not raw.ok:
            warn_parse_error(raw.error)
            continue
        candidate = {**merged, **raw.value}
        parsed = config_from_dict(candidate, source=str(path))
        if not parsed.ok:
            warn_parse_error(parsed.error)
            continue
        merged = candidate

    return SmartCommitConfig.model_validate(merged)


def save_global_config(config: SmartCommitConfig) -> Path:
    """Save the configuration to ~/.smartcommit/config.yaml.

    Args:
        config: Configuration to save.

    Returns:
        Path of the written file.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_file = get_global_config_file()
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            yaml.dump(
                config_to_dict(config),
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
    except OSError as e:
        raise ConfigError(f"Cannot write {config_file}: {e}")
    return config_file


def parse_branch_types(text: str, source: str = "branch types") -> ParseResult[list[BranchType]]:
    """Parse a JSON array of {value, description} objects.

    Args:
        text: JSON text.
        source: Label used in the error, if any.

    Returns:
        ParseResult with the list of BranchType.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return ParseResult.failure(source, f"invalid JSON ({e})")
    if not isinstance(data, list):
        return ParseResult.failure(source, "JSON must be an array of objects")
    try:
        return ParseResult.success([BranchType.model_validate(item) for item in data])
    except ValidationError as e:
        return ParseResult.failure(source, _format_validation_error(e))


def parse_placeholder_configs(
    text: str, source: str = "branch placeholders"
) -> ParseResult[dict[str, PlaceholderConfig]]:
    """Parse a JSON object mapping placeholder names to PlaceholderConfig.

    Args:
        text: JSON text, e.g. '{"ticketId": {"lowercase": false}}'.
        source: Label used in the error, if any.

    Returns:
        ParseResult with the placeholder mapping.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return ParseResult.failure(source, f"invalid JSON ({e})")
    if not isinstance(data, dict):
        return ParseResult.failure(source, "JSON must be an object")
    try:
        return ParseResult.success(
            {name: PlaceholderConfig.model_validate(opts) for name, opts in data.items()}
        )
    except ValidationError as e:
        return ParseResult.failure(source, _format_validation_error(e))
