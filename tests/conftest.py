"""
Shared pytest fixtures and configuration for mcp-translations tests.

This module provides:
- Environment isolation (no GITHUB_MCP_* / MCP_TRANSLATIONS_* leakage)
- Settings cache reset
- A scratch working directory for persist tests
"""

import os
import sys
from pathlib import Path

import pytest

# Ensure the package is importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mcp_translations.settings import clear_settings_cache


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark every test without an explicit marker as a unit test."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove override and settings variables set outside the test."""
    for name in list(os.environ):
        if name.startswith(("GITHUB_MCP_", "MCP_TRANSLATIONS_")):
            monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def workdir(tmp_path, monkeypatch) -> Path:
    """Empty working directory for the duration of a test."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
