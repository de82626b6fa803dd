"""Character catalog: health points decorated by titles.

Orc (10) -> Warlord (+50) -> Epic (+30) -> Epic (+30) = 120.
Suffixes are joined without a separator.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from rich.console import Console

from decochain.application.catalog.registry import Catalog
from decochain.domain.model.component import BaseComponent
from decochain.domain.model.decoration import Decoration

CHARACTER_SEPARATOR = ""
BATTLE_CRY = "For the Horde!"

MessageSink: TypeAlias = Callable[[str], None]

ORC = BaseComponent(name="Orc", value=10)
ELF = BaseComponent(name="Elf", value=5)


def console_sink(console: Console | None = None) -> MessageSink:
    """Sink that prints messages with a rich console (stdout by default)."""
    target = console or Console()

    def _emit(message: str) -> None:
        target.print(message, markup=False, highlight=False)

    return _emit


def battle_cry(sink: MessageSink | None = None) -> Callable[[], None]:
    """Zero-argument action emitting the fixed battle cry to sink."""
    emit = sink or console_sink()

    def _cry() -> None:
        emit(BATTLE_CRY)

    return _cry


def warlord(sink: MessageSink | None = None) -> Decoration:
    """Warlord title: +50 health, can shout a battle cry."""
    return Decoration(
        name="Warlord",
        delta=50,
        suffix=" Warlord",
        separator=CHARACTER_SEPARATOR,
        action=battle_cry(sink),
    )


EPIC = Decoration(name="Epic", delta=30, suffix=" Epic", separator=CHARACTER_SEPARATOR)


def characters(sink: MessageSink | None = None) -> Catalog:
    """Build the character catalog.

    Args:
        sink: Destination of the Warlord battle cry. Rich console if None.

    Returns:
        Catalog with Orc, Elf, Warlord, Epic
    """
    return (
        Catalog("characters")
        .add_base(ORC)
        .add_base(ELF)
        .add_decoration(warlord(sink))
        .add_decoration(EPIC)
    )
