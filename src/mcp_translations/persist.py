"""
Persisted translations file.

The file written at shutdown is a flat JSON object mapping every resolved
key to its resolved string. ``TranslationMap`` pins that schema down so the
file can be validated on the way out and read back by operator tooling.

Format::

    {
      "DUMP_TEST": "dump value",
      "TOOL_GET_ME_DESCRIPTION": "Get details of the authenticated user"
    }

Keys are written sorted and indented, so the same mapping always produces
the same bytes. The file is truncated and rewritten on every dump; there is
no write-to-temp-then-rename step, and a failure midway can leave a partial
file behind.

Tags:
    persistence, json, pydantic, schema, mcp-translations
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from pydantic import RootModel, ValidationError

from .errors import ErrorCategory, ErrorContext, PersistError, TranslationFileError


class TranslationMap(RootModel[dict[str, str]]):
    """Schema of the persisted file: translation key -> resolved string."""

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.root, indent=indent, sort_keys=True, ensure_ascii=False)


def dump_translation_map(
    mapping: Mapping[str, str],
    path: str | Path,
    *,
    indent: int = 2,
) -> Path:
    """Write ``mapping`` to ``path`` as a JSON object, replacing any existing file.

    A relative ``path`` is resolved against the working directory at the
    moment of the call.

    Args:
        mapping: Resolved key -> value pairs
        path: Destination file
        indent: JSON indentation

    Returns:
        The path written

    Raises:
        PersistError: If the mapping violates the schema or the write fails
    """
    target = Path(path)
    context = ErrorContext(path=str(target), operation="persist")

    try:
        payload = TranslationMap.model_validate(dict(mapping)).to_json(indent=indent)
    except ValidationError as exc:
        raise PersistError(
            f"Translations do not match the persisted schema: {exc.error_count()} error(s)",
            category=ErrorCategory.VALIDATION,
            context=context,
            cause=exc,
        ) from exc

    try:
        target.write_text(payload, encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise PersistError(
            f"Failed to write translations to {target}: {exc}",
            context=context,
            cause=exc,
        ) from exc

    return target


def load_translation_map(path: str | Path) -> dict[str, str]:
    """Read a persisted translations file back into a dict.

    Raises:
        TranslationFileError: If the file cannot be read or is not a
            JSON object of strings
    """
    source = Path(path)
    context = ErrorContext(path=str(source), operation="load")

    try:
        raw = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TranslationFileError(
            f"Cannot read translations file {source}: {exc}",
            context=context,
            cause=exc,
        ) from exc

    try:
        return TranslationMap.model_validate_json(raw).root
    except ValidationError as exc:
        raise TranslationFileError(
            f"Malformed translations file {source}",
            context=context,
            cause=exc,
        ) from exc


__all__ = [
    "TranslationMap",
    "dump_translation_map",
    "load_translation_map",
]
