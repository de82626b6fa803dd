"""Catalog: named registry of base components and decorations."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Self

from decochain.domain.exceptions import DuplicateEntryError, UnknownEntryError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from decochain.domain.model.component import BaseComponent
    from decochain.domain.model.decoration import Decoration


class Catalog:
    """Registry of bases and decorations looked up by name.

    Registration is append-only: names cannot be replaced or removed.
    Lookups of unknown names fail with the list of known names.
    """

    def __init__(self, name: str) -> None:
        """Initialize empty catalog.

        Args:
            name: Catalog name (characters, coffee)

        Raises:
            ValueError: If name is empty
        """
        if not name:
            raise ValueError("catalog name must not be empty")
        self._name = name
        self._bases: dict[str, BaseComponent] = {}
        self._decorations: dict[str, Decoration] = {}

    @property
    def name(self) -> str:
        """Catalog name."""
        return self._name

    def add_base(self, base: BaseComponent) -> Self:
        """Register a base component under its name.

        Raises:
            DuplicateEntryError: Name already registered
        """
        if base.name in self._bases:
            raise DuplicateEntryError(kind="base", name=base.name)
        self._bases[base.name] = base
        return self

    def add_decoration(self, decoration: Decoration) -> Self:
        """Register a decoration under its name.

        Raises:
            DuplicateEntryError: Name already registered
        """
        if decoration.name in self._decorations:
            raise DuplicateEntryError(kind="decoration", name=decoration.name)
        self._decorations[decoration.name] = decoration
        return self

    def base(self, name: str) -> BaseComponent:
        """Look up base component by name.

        Raises:
            UnknownEntryError: No base with this name
        """
        try:
            return self._bases[name]
        except KeyError:
            raise UnknownEntryError(kind="base", name=name, available=tuple(self._bases)) from None

    def decoration(self, name: str) -> Decoration:
        """Look up decoration by name.

        Raises:
            UnknownEntryError: No decoration with this name
        """
        try:
            return self._decorations[name]
        except KeyError:
            raise UnknownEntryError(
                kind="decoration", name=name, available=tuple(self._decorations)
            ) from None

    @property
    def bases(self) -> Mapping[str, BaseComponent]:
        """Read-only view of registered bases."""
        return MappingProxyType(self._bases)

    @property
    def decorations(self) -> Mapping[str, Decoration]:
        """Read-only view of registered decorations."""
        return MappingProxyType(self._decorations)

    def __repr__(self) -> str:
        return f"Catalog({self._name!r}, bases={list(self._bases)}, decorations={list(self._decorations)})"
