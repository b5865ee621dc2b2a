"""
Structured error types for mcp-translations.

Resolution never fails: a missing environment variable simply falls through
to the caller's default. The only failures this package reports come from
the file system and from the persisted JSON schema, and they are raised as
typed errors carrying a category, a structured context and the chained cause.

Manifesto:
    - **Typed errors:** Callers catch ``PersistError``, not ``OSError``
    - **Rich context:** The path and operation travel with the error
    - **Error chaining:** The original exception is kept as ``cause``
    - **Caller decides:** Nothing in this package exits the process

Architecture:
    ::

        ┌──────────────────────────────────────────────────┐
        │                TranslationError                   │
        │     (category, context, cause)                    │
        ├──────────────────────────────────────────────────┤
        │  PersistError         TranslationFileError        │
        │  (STORAGE)            (PARSE)                     │
        │                                                   │
        │  ConfigError                                      │
        │  (CONFIG)                                         │
        └──────────────────────────────────────────────────┘

Examples:
    >>> try:
    ...     persist()
    ... except PersistError as e:
    ...     log.warning("persist_failed", **e.to_dict())

Tags:
    error-handling, exception-hierarchy, error-context, mcp-translations
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories used for classification and log routing."""

    STORAGE = "STORAGE"           # Disk, permissions, encoding on write
    PARSE = "PARSE"               # Persisted file unreadable or malformed
    VALIDATION = "VALIDATION"     # Value does not match the schema
    CONFIG = "CONFIG"             # Invalid settings
    INTERNAL = "INTERNAL"         # Bugs, unexpected state


@dataclass
class ErrorContext:
    """Structured metadata attached to an error.

    Attributes:
        path: File path involved, if any
        operation: Operation that failed (e.g. ``persist``, ``load``)
        metadata: Additional key-value pairs
    """

    path: str | None = None
    operation: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for name in ("path", "operation"):
            value = getattr(self, name)
            if value is not None:
                result[name] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class TranslationError(Exception):
    """Base exception for all mcp-translations errors.

    Subclasses set ``default_category`` so callers can route on
    ``error.category`` without inspecting the concrete type.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> TranslationError:
        """
        Add context to this error (fluent API).

        Usage:
            raise PersistError("write failed").with_context(path="out.json")
        """
        for name, value in kwargs.items():
            if name != "metadata" and hasattr(self.context, name):
                setattr(self.context, name, value)
            else:
                self.context.metadata[name] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class PersistError(TranslationError):
    """Writing the resolved translations to disk failed.

    The on-disk file may be partially written; no retry is attempted.
    """

    default_category = ErrorCategory.STORAGE


class TranslationFileError(TranslationError):
    """A persisted translations file could not be read or does not match the schema."""

    default_category = ErrorCategory.PARSE


class ConfigError(TranslationError):
    """Settings are invalid."""

    default_category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "TranslationError",
    "PersistError",
    "TranslationFileError",
    "ConfigError",
]
