"""pytest fixtures for decorator chain tests.

Catalogs are built fresh per test, actions write to an in-memory log.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from decochain.application.catalog import characters, coffee
from decochain.application.services import DecorationService

if TYPE_CHECKING:
    from decochain.application.catalog import Catalog


@pytest.fixture
def cry_log() -> list[str]:
    """Messages emitted by actions, in order."""
    return []


@pytest.fixture
def character_catalog(cry_log: list[str]) -> Catalog:
    """Character catalog whose Warlord battle cry appends to cry_log."""
    return characters(cry_log.append)


@pytest.fixture
def coffee_catalog() -> Catalog:
    """Coffee catalog."""
    return coffee()


@pytest.fixture
def character_service(character_catalog: Catalog) -> DecorationService:
    """Facade over character_catalog."""
    return DecorationService(character_catalog)


@pytest.fixture
def coffee_service(coffee_catalog: Catalog) -> DecorationService:
    """Facade over coffee_catalog."""
    return DecorationService(coffee_catalog)
