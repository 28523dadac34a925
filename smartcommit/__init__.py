"""Smart Commit: interactive git commit, branch and history assistant."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("smartcommit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
