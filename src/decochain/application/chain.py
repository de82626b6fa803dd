"""Chain builder: wrap a component with a sequence of decorations.

Example:
    head = Chain.of(orc).wrap(warlord).wrap(epic).build()
    head.numeric_value()  # 90
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from decochain.domain.exceptions import ChainDepthError, MissingComponentError
from decochain.domain.model.component import ValueComponent
from decochain.domain.model.configuration import ChainConfig
from decochain.domain.model.decoration import Decoration
from decochain.domain.model.decorator import Decorator

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def decorate(
    component: ValueComponent,
    *decorations: Decoration,
    config: ChainConfig | None = None,
) -> ValueComponent:
    """Wrap component with decorations, first decoration innermost.

    Args:
        component: Base component or existing chain head
        decorations: Decorations to apply in order
        config: Optional limits (max_depth)

    Returns:
        Chain head. The component itself if no decorations given.

    Raises:
        MissingComponentError: component is None or not a ValueComponent
        ChainDepthError: Resulting chain exceeds config.max_depth
        MixedNumericError: Chain mixes float and Decimal
    """
    if component is None or not isinstance(component, ValueComponent):
        raise MissingComponentError(decoration="decorate", got=type(component))

    config = config or ChainConfig()
    start_depth = _depth_of(component)
    _check_depth(start_depth + len(decorations), config)

    head = component
    for decoration in decorations:
        head = Decorator(head, decoration)

    if decorations:
        logger.debug(
            "decorated %s with %s (depth %d)",
            type(component).__name__,
            ", ".join(d.name for d in decorations),
            start_depth + len(decorations),
        )
    return head


def _depth_of(component: ValueComponent) -> int:
    """Decorator layers already present in component."""
    return component.depth if isinstance(component, Decorator) else 0


def _check_depth(depth: int, config: ChainConfig) -> None:
    """FAIL-FIRST: raise if depth exceeds configured limit."""
    if config.max_depth is not None and depth > config.max_depth:
        raise ChainDepthError(depth=depth, max_depth=config.max_depth)


@dataclass(frozen=True, slots=True)
class Chain:
    """Immutable builder for decorator chains.

    Every wrap() returns a new Chain, so partial chains can be shared
    and extended independently.

    Attributes:
        base: Component at the bottom of the chain
        decorations: Decorations to apply, innermost-first
        config: Limits applied on wrap() and build()
    """

    base: ValueComponent
    decorations: tuple[Decoration, ...] = ()
    config: ChainConfig = ChainConfig()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.base is None or not isinstance(self.base, ValueComponent):
            raise MissingComponentError(decoration="chain", got=type(self.base))
        for decoration in self.decorations:
            if not isinstance(decoration, Decoration):
                raise TypeError(f"decoration must be Decoration, got {type(decoration).__name__}")
        _check_depth(self.depth, self.config)

    @classmethod
    def of(cls, base: ValueComponent, config: ChainConfig | None = None) -> Self:
        """Start a chain with no decorations.

        Args:
            base: Innermost component
            config: Optional limits

        Returns:
            Fresh Chain
        """
        return cls(base=base, config=config or ChainConfig())

    def wrap(self, decoration: Decoration) -> Chain:
        """New chain with decoration added as outermost layer.

        Raises:
            TypeError: decoration is not a Decoration
            ChainDepthError: New chain would exceed config.max_depth
        """
        return Chain(self.base, (*self.decorations, decoration), self.config)

    def wrap_all(self, decorations: Iterable[Decoration]) -> Chain:
        """New chain with every decoration added in order."""
        chain = self
        for decoration in decorations:
            chain = chain.wrap(decoration)
        return chain

    def build(self) -> ValueComponent:
        """Construct the decorators and return the chain head."""
        return decorate(self.base, *self.decorations, config=self.config)

    @property
    def depth(self) -> int:
        """Decorator layers in the built chain, counting layers already in base."""
        return _depth_of(self.base) + len(self.decorations)

    def __len__(self) -> int:
        """Number of decorations."""
        return len(self.decorations)
