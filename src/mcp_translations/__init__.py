"""mcp-translations -- Runtime translation overrides for MCP server hosts.

Resolve user-facing strings by key, let operators override them through
``GITHUB_MCP_<KEY>`` environment variables, and persist the resolved set to
``github-mcp-server-config.json`` at shutdown.

Modules::

    resolver.py    TranslationResolver, translation_helper, null_translation_helper
    lookup.py      Override sources (environment, in-memory)
    persist.py     Persisted file schema, dump and load
    errors.py      Structured error hierarchy
    logging.py     structlog configuration
    settings.py    MCP_TRANSLATIONS_* settings (pydantic-settings)
"""

__version__ = "0.1.0"

from .errors import (
    ConfigError,
    ErrorCategory,
    ErrorContext,
    PersistError,
    TranslationError,
    TranslationFileError,
)
from .logging import configure_logging, configure_logging_from_settings, get_logger
from .lookup import DictLookupBackend, EnvLookupBackend, LookupBackend
from .persist import TranslationMap, dump_translation_map, load_translation_map
from .resolver import (
    CONFIG_FILE_NAME,
    ENV_PREFIX,
    TranslationResolver,
    null_translation_helper,
    translation_helper,
)
from .settings import TranslationSettings, get_settings

__all__ = [
    "CONFIG_FILE_NAME",
    "ENV_PREFIX",
    "ConfigError",
    "DictLookupBackend",
    "EnvLookupBackend",
    "ErrorCategory",
    "ErrorContext",
    "LookupBackend",
    "PersistError",
    "TranslationError",
    "TranslationFileError",
    "TranslationMap",
    "TranslationResolver",
    "TranslationSettings",
    "configure_logging",
    "configure_logging_from_settings",
    "dump_translation_map",
    "get_logger",
    "get_settings",
    "load_translation_map",
    "null_translation_helper",
    "translation_helper",
]
