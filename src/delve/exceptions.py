from __future__ import annotations

from typing import Any, List, Optional


class DelveError(Exception):
    """Base exception for the level generator."""


class GenerationError(DelveError):
    """Raised when a level cannot be generated (broken precondition)."""


class ContentTableError(DelveError, ValueError):
    """Raised for malformed transition tables, weight tables or archetype keys."""


class ConfigError(DelveError, ValueError):
    """Raised when generation settings are out of range."""


class DataValidationError(DelveError):
    """Raised when a data file fails JSON Schema validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_human(self) -> str:
        parts = [str(self)]
        for e in self.errors:
            path = "/".join(str(p) for p in e.path) or "<root>"
            parts.append(f" - at {path}: {e.message}")
        return "\n".join(parts)
