"""Catalogs of named bases and decorations."""

from decochain.application.catalog.characters import (
    BATTLE_CRY,
    ELF,
    EPIC,
    ORC,
    battle_cry,
    characters,
    console_sink,
    warlord,
)
from decochain.application.catalog.coffee import MILK, SIMPLE_COFFEE, WHIP, coffee
from decochain.application.catalog.registry import Catalog

__all__ = [
    "Catalog",
    # Characters
    "BATTLE_CRY",
    "ORC",
    "ELF",
    "EPIC",
    "battle_cry",
    "console_sink",
    "warlord",
    "characters",
    # Coffee
    "SIMPLE_COFFEE",
    "MILK",
    "WHIP",
    "coffee",
]
