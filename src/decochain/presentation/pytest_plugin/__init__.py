"""pytest plugin for decochain.

Provides fixtures for chain testing:
    cry_log: Messages captured from battle-cry actions
    character_catalog: Character catalog wired to cry_log
    coffee_catalog: Coffee catalog
    character_service: DecorationService over character_catalog
    coffee_service: DecorationService over coffee_catalog

Enable in conftest.py:
    pytest_plugins = ["decochain.presentation.pytest_plugin"]
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from decochain.presentation.pytest_plugin.fixtures import (
    character_catalog,
    character_service,
    coffee_catalog,
    coffee_service,
    cry_log,
)

if TYPE_CHECKING:
    import pytest

__all__ = [
    "character_catalog",
    "character_service",
    "coffee_catalog",
    "coffee_service",
    "cry_log",
]


def pytest_configure(config: pytest.Config) -> None:
    """Register decochain markers."""
    config.addinivalue_line(
        "markers",
        "chain: mark test as decorator chain test",
    )
