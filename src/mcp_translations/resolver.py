"""Caching translation resolver with persist-on-shutdown.

A host process asks for user-facing strings (tool descriptions, prompts,
messages) by key and supplies the built-in default. Operators override any
of them by exporting ``GITHUB_MCP_<KEY>``. Every key the host asks for is
remembered, and at shutdown the full set is written to
``github-mcp-server-config.json`` so operators can see what is overridable.

Manifesto:
    - **Stable per run:** A key resolves once; later env changes are ignored
    - **Never fails on read:** Missing overrides fall back to the default
    - **Discoverable:** Persist writes every key the host ever requested
    - **Injectable source:** Tests pass a lookup instead of mutating os.environ

Architecture:
    ::

        resolve(key, default)
              │
              ├── key cached? ──────────────► cached value
              │
              ├── lookup(prefix + key) set? ─► cache + return it (even "")
              │
              └── otherwise ────────────────► cache + return default

        persist()
              │
              └── cache ──► TranslationMap ──► JSON file (full overwrite)

Examples:
    Object form:

    >>> resolver = TranslationResolver()
    >>> resolver.resolve("TOOL_GET_ME_DESCRIPTION", "Get my user profile")
    'Get my user profile'
    >>> resolver.persist()
    PosixPath('github-mcp-server-config.json')

    Paired-handle form:

    >>> t, dump = translation_helper()
    >>> t("TOOL_GET_ME_DESCRIPTION", "Get my user profile")
    'Get my user profile'
    >>> dump()

Guardrails:
    - Single-threaded: callers sharing a resolver across threads must lock
    - Keys are used verbatim; no case folding
    - The cache is never cleared; build a new resolver for a fresh view

Tags:
    translations, resolver, caching, environment, mcp-translations
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .errors import PersistError
from .logging import get_logger
from .lookup import EnvLookupBackend, LookupBackend, LookupFunc
from .persist import dump_translation_map
from .settings import TranslationSettings, get_settings

logger = get_logger(__name__)

ENV_PREFIX = "GITHUB_MCP_"
CONFIG_FILE_NAME = "github-mcp-server-config.json"

TranslationHelperFunc = Callable[[str, str], str]


class TranslationResolver:
    """Resolve translation keys against an override source and cache the result.

    Args:
        lookup: Override source; a ``LookupBackend`` or any
            ``(name) -> str | None`` callable. Defaults to the process
            environment.
        prefix: Prepended to a key to form the variable name looked up
        path: File ``persist()`` writes, relative to the working directory
            at persist time unless absolute
        indent: JSON indentation of the persisted file
    """

    def __init__(
        self,
        lookup: LookupBackend | LookupFunc | None = None,
        *,
        prefix: str = ENV_PREFIX,
        path: str | Path = CONFIG_FILE_NAME,
        indent: int = 2,
    ):
        self._lookup = lookup if lookup is not None else EnvLookupBackend()
        self._prefix = prefix
        self._path = Path(path)
        self._indent = indent
        self._cache: dict[str, str] = {}

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def path(self) -> Path:
        return self._path

    def resolve(self, key: str, default: str) -> str:
        """Return the effective value for ``key``.

        The first call for a key consults ``prefix + key`` in the lookup
        source; a value that is set, even to ``""``, wins over ``default``.
        Whatever is chosen is cached and returned by every later call.
        """
        if key in self._cache:
            return self._cache[key]

        value = self._lookup(f"{self._prefix}{key}")
        if value is not None:
            source = "env"
        else:
            value = default
            source = "default"

        self._cache[key] = value
        logger.debug("translation_resolved", key=key, source=source)
        return value

    def persist(self) -> Path:
        """Write every resolved key and its cached value to the config file.

        Returns:
            The path written

        Raises:
            PersistError: If serialization or the write fails. The cache is
                left untouched and nothing is retried.
        """
        try:
            written = dump_translation_map(self._cache, self._path, indent=self._indent)
        except PersistError as exc:
            exc.with_context(entries=len(self._cache))
            logger.error("translations_persist_failed", **exc.to_dict())
            raise

        logger.info("translations_persisted", path=str(written), count=len(self._cache))
        return written

    def as_dict(self) -> dict[str, str]:
        """Copy of the resolved key -> value mapping."""
        return dict(self._cache)

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def __repr__(self) -> str:
        return (
            f"TranslationResolver(prefix={self._prefix!r}, "
            f"path={str(self._path)!r}, keys={len(self._cache)})"
        )


def translation_helper(
    lookup: LookupBackend | LookupFunc | None = None,
    settings: TranslationSettings | None = None,
) -> tuple[TranslationHelperFunc, Callable[[], Path]]:
    """Build a resolver and return its ``(resolve, persist)`` pair.

    Both handles share one cache. Overrides are always read from
    ``ENV_PREFIX + key`` and persisted to ``CONFIG_FILE_NAME`` in the working
    directory; only the JSON indentation comes from ``settings`` (or
    ``get_settings()``). Build a ``TranslationResolver`` directly for a
    different prefix or path.

    Example:
        >>> t, dump = translation_helper()
        >>> description = t("TOOL_LIST_ISSUES_DESCRIPTION", "List issues in a repository")
        >>> ...
        >>> dump()  # at shutdown
    """
    settings = settings or get_settings()
    resolver = TranslationResolver(
        lookup,
        prefix=ENV_PREFIX,
        path=CONFIG_FILE_NAME,
        indent=settings.json_indent,
    )
    return resolver.resolve, resolver.persist


def null_translation_helper(key: str, default: str) -> str:
    """Resolve-compatible function that always returns ``default``.

    Nothing is looked up or cached.
    """
    return default


__all__ = [
    "CONFIG_FILE_NAME",
    "ENV_PREFIX",
    "TranslationHelperFunc",
    "TranslationResolver",
    "null_translation_helper",
    "translation_helper",
]
