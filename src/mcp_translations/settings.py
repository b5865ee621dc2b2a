"""Settings for mcp-translations.

``TranslationSettings`` reads ``MCP_TRANSLATIONS_*`` environment variables
for the tunable parts of the package: JSON indentation of the persisted file
and logging. The override prefix (``GITHUB_MCP_``) and the persisted file
name (``github-mcp-server-config.json``) are constants in
:mod:`mcp_translations.resolver` and are not configurable here.

No ``.env`` file is read; a stray one in the host's working directory must
not change how translations resolve or where they are written.

Examples:
    >>> from mcp_translations.settings import get_settings
    >>> settings = get_settings()
    >>> settings.json_indent
    2

Tags:
    settings, configuration, pydantic, environment, mcp-translations
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError


class TranslationSettings(BaseSettings):
    """Configuration for persistence formatting and logging.

    Fields
    ──────
    json_indent     : Indentation of the persisted JSON
    log_level       : Structlog log level
    log_format      : ``json`` or ``console``
    """

    model_config = SettingsConfigDict(
        env_prefix="MCP_TRANSLATIONS_",
        extra="ignore",
    )

    # ── Persistence ──────────────────────────────────────────────
    json_indent: int = Field(default=2, ge=0)

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: Literal["json", "console"] = Field(default="json")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level


_settings_cache: dict[str, TranslationSettings] = {}


def get_settings(*, _force_reload: bool = False) -> TranslationSettings:
    """Load, validate, and cache a :class:`TranslationSettings` instance.

    Raises:
        ConfigError: If any ``MCP_TRANSLATIONS_*`` value is invalid
    """
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    try:
        settings = TranslationSettings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid translation settings: {exc}", cause=exc) from exc

    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()


__all__ = [
    "TranslationSettings",
    "clear_settings_cache",
    "get_settings",
]
