"""Evaluation result: final value and description with per-layer breakdown."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decochain.domain.model.component import Number


@dataclass(frozen=True, slots=True)
class EvaluationStep:
    """State of the chain after one decorator layer.

    Attributes:
        name: Decoration name
        delta: Contribution of this layer
        suffix: Suffix appended by this layer
        value: Running value after this layer
        description: Running description after this layer
        has_action: Layer carries a side effect (not run)
    """

    name: str
    delta: Number
    suffix: str
    value: Number
    description: str
    has_action: bool = False


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Result of evaluating a chain.

    Attributes:
        base_name: Name of innermost component (class name for foreign components)
        base_value: Value of innermost component
        base_description: Description of innermost component
        steps: One step per decorator, innermost-first
    """

    base_name: str
    base_value: Number
    base_description: str
    steps: tuple[EvaluationStep, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.base_name:
            raise ValueError("base_name must not be empty")

    @property
    def value(self) -> Number:
        """Final numeric value (value of outermost layer)."""
        return self.steps[-1].value if self.steps else self.base_value

    @property
    def description(self) -> str:
        """Final description (description of outermost layer)."""
        return self.steps[-1].description if self.steps else self.base_description

    @property
    def depth(self) -> int:
        """Number of decorator layers."""
        return len(self.steps)

    @property
    def total_delta(self) -> Number:
        """Sum of every layer's delta."""
        return sum((step.delta for step in self.steps), start=0)

    def __str__(self) -> str:
        """Format as 'description: value'."""
        return f"{self.description}: {self.value}"
