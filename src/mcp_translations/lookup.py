"""Lookup backends for translation overrides.

A backend answers one question: what is the value of this variable name,
or is it absent? ``None`` means absent; any string, including ``""``, means
present. The resolver only ever calls ``backend(name)``, so a plain function
with the signature ``(name: str) -> str | None`` works as well.

Examples:
    >>> backend = DictLookupBackend({"GITHUB_MCP_GREETING": "hi"})
    >>> backend("GITHUB_MCP_GREETING")
    'hi'
    >>> backend("GITHUB_MCP_MISSING") is None
    True
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Callable

LookupFunc = Callable[[str], str | None]


class LookupBackend(ABC):
    """Abstract base for override sources."""

    @abstractmethod
    def get(self, name: str) -> str | None:
        """Return the value of ``name`` or None when it is not set."""
        ...

    def __call__(self, name: str) -> str | None:
        return self.get(name)


class EnvLookupBackend(LookupBackend):
    """Read overrides from the process environment.

    Names are used exactly as given. A variable exported as the empty
    string is reported as present.
    """

    def get(self, name: str) -> str | None:
        return os.environ.get(name)


class DictLookupBackend(LookupBackend):
    """In-memory override source for tests and embedding hosts."""

    def __init__(self, values: dict[str, str] | None = None):
        self._values = dict(values) if values else {}

    def get(self, name: str) -> str | None:
        return self._values.get(name)

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

    def unset(self, name: str) -> None:
        self._values.pop(name, None)


__all__ = [
    "DictLookupBackend",
    "EnvLookupBackend",
    "LookupBackend",
    "LookupFunc",
]
