"""Configuration for smartcommit.

This package provides:
- models: SmartCommitConfig and its parts (CommitType, LintRules, PlaceholderConfig, ...)
- defaults: Built-in default values
- result: ParseResult / ParseError for permissive parsing
- loader: load_config, save_global_config, JSON option parsers
"""

from smartcommit.config.models import (
    BranchConfig,
    BranchType,
    CommitType,
    LintRules,
    PlaceholderConfig,
    SmartCommitConfig,
    Steps,
    Templates,
    TypeCase,
)
from smartcommit.config.result import ParseError, ParseResult
from smartcommit.config.loader import (
    config_from_dict,
    config_to_dict,
    get_global_config_file,
    get_repo_config_file,
    load_config,
    parse_branch_types,
    parse_placeholder_configs,
    read_yaml_file,
    save_global_config,
    warn_parse_error,
)


__all__ = [
    # Models
    "BranchConfig",
    "BranchType",
    "CommitType",
    "LintRules",
    "PlaceholderConfig",
    "SmartCommitConfig",
    "Steps",
    "Templates",
    "TypeCase",
    # Results
    "ParseError",
    "ParseResult",
    # Loader
    "config_from_dict",
    "config_to_dict",
    "get_global_config_file",
    "get_repo_config_file",
    "load_config",
    "parse_branch_types",
    "parse_placeholder_configs",
    "read_yaml_file",
    "save_global_config",
    "warn_parse_error",
]
