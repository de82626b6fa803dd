"""Decoration: reusable template for one decorator variant."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from decochain.domain.model.component import is_number

if TYPE_CHECKING:
    from decochain.domain.model.component import Number


@dataclass(frozen=True, slots=True)
class Decoration:
    """Fixed contribution of one decorator layer.

    Applying a Decoration to a component yields a Decorator.
    The same Decoration can be applied any number of times (Epic twice).

    Attributes:
        name: Variant name (Warlord, Milk)
        delta: Added to the wrapped numeric value
        suffix: Appended to the wrapped description
        separator: Placed between wrapped description and suffix
        action: Optional zero-argument side effect, run only by Decorator.perform()
    """

    name: str
    delta: Number
    suffix: str
    separator: str = ""
    action: Callable[[], None] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not is_number(self.delta):
            raise TypeError(f"delta must be int, float or Decimal, got {type(self.delta).__name__}")
        if not isinstance(self.suffix, str):
            raise TypeError(f"suffix must be str, got {type(self.suffix).__name__}")
        if not isinstance(self.separator, str):
            raise TypeError(f"separator must be str, got {type(self.separator).__name__}")
        if self.action is not None and not callable(self.action):
            raise TypeError(f"action must be callable or None, got {type(self.action).__name__}")

    @property
    def has_action(self) -> bool:
        """True if this variant carries a side effect."""
        return self.action is not None

    def extend(self, description: str) -> str:
        """Append separator and suffix to a description."""
        return f"{description}{self.separator}{self.suffix}"
