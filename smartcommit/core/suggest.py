"""Inference helpers for the commit prompts.

Contains:
- suggest_commit_type: Best-guess commit type from staged file paths
- compute_auto_summary: Default summary text from staged file paths

Both are advisory: they only seed prompt defaults.
"""

from pathlib import PurePosixPath
from typing import Optional


SOURCE_ROOT = "src/"

# Known configuration, tooling and dependency files
CONFIG_FILES = {
    "package.json",
    "tsconfig.json",
    "pyproject.toml",
    "setup.cfg",
    "setup.py",
    "requirements.txt",
    ".eslintrc",
    ".eslintrc.json",
    ".eslintrc.js",
    ".prettierrc",
    ".babelrc",
    "babel.config.js",
    "webpack.config.js",
    "vite.config.ts",
    "vite.config.js",
    "jest.config.js",
    "jest.config.ts",
    "pytest.ini",
    "tox.ini",
    "Makefile",
    "Dockerfile",
    ".gitlab-ci.yml",
    ".travis.yml",
    "Jenkinsfile",
    ".editorconfig",
}

LOCK_FILES = {
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "poetry.lock",
    "Pipfile.lock",
    "Cargo.lock",
    "Gemfile.lock",
    "composer.lock",
    "go.sum",
}

# Test runner configuration
TEST_CONFIG_FILES = {
    "jest.config.js",
    "jest.config.ts",
    "vitest.config.js",
    "vitest.config.ts",
    "karma.conf.js",
    "cypress.config.js",
    "cypress.config.ts",
    "playwright.config.ts",
    ".mocharc.json",
    "pytest.ini",
    "tox.ini",
}

TEST_PATTERNS = ("test_", "_test.", ".test.", ".spec.", "__tests__/", "tests/", "test/")
CI_PATTERNS = (".github/workflows/", ".gitlab-ci", ".circleci/", ".travis", "Jenkinsfile")

SOURCE_SUBDIRS = (
    "src/components/",
    "src/pages/",
    "src/lib/",
    "src/features/",
    "src/api/",
    "src/services/",
    "src/hooks/",
    "src/styles/",
    "src/types/",
)
STYLE_PATTERNS = ("src/styles/", ".css", ".scss", ".sass", ".less")
TYPE_DEFINITION_PATTERNS = ("src/types/", ".d.ts")

PERF_DIRS = ("perf/", "performance/", "benchmarks/", "benchmark/")
SECURITY_DIRS = ("security/", "auth/")


def _basename(path: str) -> str:
    return PurePosixPath(path).name


def _is_test_path(path: str) -> bool:
    lowered = path.lower()
    return any(p in lowered for p in TEST_PATTERNS)


def _is_config_file(path: str) -> bool:
    name = _basename(path)
    return (
        name in CONFIG_FILES
        or name in TEST_CONFIG_FILES
        or name in LOCK_FILES
        or any(p in path for p in CI_PATTERNS)
    )


def _classify_config(paths: list[str]) -> str:
    config_paths = [p for p in paths if _is_config_file(p)]
    if any(_basename(p) in TEST_CONFIG_FILES or _is_test_path(p) for p in config_paths):
        return "test"
    if any(any(c in p for c in CI_PATTERNS) for p in config_paths):
        return "ci"
    if any(_basename(p) in LOCK_FILES for p in config_paths):
        return "build"
    return "chore"


def _under(path: str, prefixes: tuple[str, ...]) -> bool:
    return any(path.startswith(p) or f"/{p}" in path for p in prefixes)


def suggest_commit_type(staged_paths: list[str]) -> Optional[str]:
    """Suggest a commit type from the staged file paths.

    Rules are evaluated in order; the first one that applies wins:
    1. every path is Markdown -> docs
    2. a known config file is staged -> test / ci / build / chore
       (test when a test runner config or a test path is among them)
    3. every path is a test file -> test
    4. a recognized source subdirectory -> feat (style / refactor refinements)
    5. performance or security directories -> perf / security
    6. anything under src/ -> feat

    Args:
        staged_paths: Paths from ``git diff --cached --name-only``.

    Returns:
        A commit type value, or None.
    """
    paths = [p.strip() for p in staged_paths if p and p.strip()]
    if not paths:
        return None

    if all(p.endswith(".md") for p in paths):
        return "docs"

    if any(_is_config_file(p) for p in paths):
        return _classify_config(paths)

    if all(_is_test_path(p) for p in paths):
        return "test"

    if any(p.startswith(SOURCE_SUBDIRS) for p in paths):
        if any(any(s in p for s in STYLE_PATTERNS) for p in paths):
            return "style"
        if any(any(t in p for t in TYPE_DEFINITION_PATTERNS) for p in paths):
            return "refactor"
        return "feat"

    if any(_under(p, PERF_DIRS) for p in paths):
        return "perf"
    if any(_under(p, SECURITY_DIRS) for p in paths):
        return "security"

    if any(p.startswith(SOURCE_ROOT) for p in paths):
        return "feat"

    return None


def compute_auto_summary(staged_paths: list[str]) -> str:
    """Build a default summary describing what kind of files changed.

    Args:
        staged_paths: Staged file paths.

    Returns:
        Comma separated phrases, or an empty string.
    """
    summaries = []
    if "package.json" in staged_paths:
        summaries.append("Update dependencies")
    if any("Dockerfile" in p for p in staged_paths):
        summaries.append("Update Docker configuration")
    if any(p.endswith(".md") for p in staged_paths):
        summaries.append("Update documentation")
    if any(p.startswith(SOURCE_ROOT) or p.endswith((".ts", ".js")) for p in staged_paths):
        summaries.append("Update source code")
    return ", ".join(summaries)
