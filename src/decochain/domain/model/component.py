"""Component capability contract and the fixed-value base component."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, TypeAlias, runtime_checkable

Number: TypeAlias = int | float | Decimal


@runtime_checkable
class ValueComponent(Protocol):
    """Anything exposing a numeric value and a description.

    Base components and decorators satisfy the same Protocol,
    so a decorator can wrap either.
    """

    def numeric_value(self) -> Number:
        """Numeric attribute (health points, price)."""
        ...

    def description(self) -> str:
        """Textual attribute (name, ingredient list)."""
        ...


def is_number(value: object) -> bool:
    """True for int, float, Decimal. bool is excluded."""
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class BaseComponent:
    """Innermost component: returns fixed literals, no computation.

    Attributes:
        name: Catalog name (Orc, SimpleCoffee)
        value: Fixed numeric value
        text: Fixed description, defaults to name
    """

    name: str
    value: Number
    text: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not is_number(self.value):
            raise TypeError(f"value must be int, float or Decimal, got {type(self.value).__name__}")
        if self.text is not None and not isinstance(self.text, str):
            raise TypeError(f"text must be str, got {type(self.text).__name__}")

    def numeric_value(self) -> Number:
        """Fixed value."""
        return self.value

    def description(self) -> str:
        """Fixed description, name when no text given."""
        return self.name if self.text is None else self.text
