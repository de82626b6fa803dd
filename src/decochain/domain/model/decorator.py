"""Decorator: wraps exactly one component with a fixed Decoration."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from decochain.domain.exceptions import MissingComponentError, MixedNumericError, NoActionError
from decochain.domain.model.component import BaseComponent, ValueComponent
from decochain.domain.model.decoration import Decoration

if TYPE_CHECKING:
    from decochain.domain.model.component import Number


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Decorator:
    """Component computed from one wrapped component plus a fixed contribution.

    numeric_value() = wrapped.numeric_value() + decoration.delta
    description()   = wrapped.description() + separator + suffix

    The wrapped reference is fixed at construction. Values are computed on
    demand and nothing is cached, so evaluating the same chain twice gives the
    same result.

    Construction never calls into the wrapped component. Mixed float and
    Decimal values are detected from BaseComponent.value and the deltas;
    a foreign base is not inspected, so a mismatch there surfaces as
    TypeError on evaluation.

    Equality, hashing and repr() walk the chain iteratively like unwind(),
    so they work on chains of any length. Two chains are equal when they
    share an equal base and equal decorations in the same order.

    Attributes:
        wrapped: Inner component (base or another Decorator)
        decoration: Fixed contribution of this layer
        depth: Decorator layers from base up to and including this one
    """

    wrapped: ValueComponent
    decoration: Decoration
    depth: int = field(init=False)
    _has_float: bool = field(init=False)
    _has_decimal: bool = field(init=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.decoration is None:
            raise TypeError("decoration must not be None")
        if not isinstance(self.decoration, Decoration):
            raise TypeError(f"decoration must be Decoration, got {type(self.decoration).__name__}")
        if self.wrapped is None or not isinstance(self.wrapped, ValueComponent):
            raise MissingComponentError(decoration=self.decoration.name, got=type(self.wrapped))

        if isinstance(self.wrapped, Decorator):
            depth = self.wrapped.depth + 1
            has_float = self.wrapped._has_float
            has_decimal = self.wrapped._has_decimal
        elif isinstance(self.wrapped, BaseComponent):
            depth = 1
            has_float = isinstance(self.wrapped.value, float)
            has_decimal = isinstance(self.wrapped.value, Decimal)
        else:
            depth = 1
            has_float = has_decimal = False

        has_float = has_float or isinstance(self.decoration.delta, float)
        has_decimal = has_decimal or isinstance(self.decoration.delta, Decimal)
        if has_float and has_decimal:
            raise MixedNumericError(self.decoration.name)

        object.__setattr__(self, "depth", depth)
        object.__setattr__(self, "_has_float", has_float)
        object.__setattr__(self, "_has_decimal", has_decimal)

    def _key(self) -> tuple[ValueComponent, tuple[Decoration, ...]]:
        """(base, decorations innermost-first)."""
        base, layers = unwind(self)
        return base, tuple(layer.decoration for layer in layers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Decorator):
            return NotImplemented
        if self is other:
            return True
        return self.depth == other.depth and self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        base, _ = unwind(self)
        return f"Decorator(decoration={self.decoration!r}, depth={self.depth}, base={base!r})"

    def numeric_value(self) -> Number:
        """Base value plus every delta from base outwards."""
        base, layers = unwind(self)
        value = base.numeric_value()
        for layer in layers:
            value = value + layer.decoration.delta
        return value

    def description(self) -> str:
        """Base description with every suffix appended from base outwards."""
        base, layers = unwind(self)
        text = base.description()
        for layer in layers:
            text = layer.decoration.extend(text)
        return text

    @property
    def has_action(self) -> bool:
        """True if this layer carries a side effect."""
        return self.decoration.has_action

    def perform(self) -> None:
        """Run this layer's action. Never called implicitly.

        Raises:
            NoActionError: Decoration has no action.
        """
        action = self.decoration.action
        if action is None:
            raise NoActionError(self.decoration.name)
        action()


def unwind(head: ValueComponent) -> tuple[ValueComponent, tuple[Decorator, ...]]:
    """Walk a chain down to its innermost component.

    Iterative, so chain length is not bounded by the recursion limit.
    Any ValueComponent that is not a Decorator ends the walk.

    Args:
        head: Outermost component of the chain

    Returns:
        (base, decorators innermost-first)
    """
    layers: list[Decorator] = []
    node = head
    while isinstance(node, Decorator):
        layers.append(node)
        node = node.wrapped
    layers.reverse()
    return node, tuple(layers)
