"""Parse results for permissive configuration handling.

Malformed configuration (bad YAML, bad JSON, invalid regex) never stops the
tool; callers fall back to defaults. ParseResult keeps the failure visible
so it can be reported and tested.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ParseError:
    """Description of a configuration value that could not be parsed.

    Attributes:
        source: What was being parsed (file path, option name, ...).
        message: Human readable reason.
    """

    source: str
    message: str

    def __str__(self) -> str:
        return f"{self.source}: {self.message}"


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Either a parsed value or a ParseError."""

    value: Optional[T] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, source: str, message: str) -> "ParseResult[T]":
        return cls(error=ParseError(source=source, message=message))

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` if parsing failed."""
        if self.error is not None:
            return default
        return self.value
