"""Evaluator: walk a chain and record value and description per layer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from decochain.domain.exceptions import MissingComponentError
from decochain.domain.model.component import BaseComponent, ValueComponent
from decochain.domain.model.decorator import unwind
from decochain.domain.model.evaluation import Evaluation, EvaluationStep

if TYPE_CHECKING:
    from decochain.domain.model.decorator import Decorator

logger = logging.getLogger(__name__)

__all__ = ["evaluate", "unwind"]


def evaluate(head: ValueComponent) -> Evaluation:
    """Evaluate chain head into final value, description and breakdown.

    Equivalent to head.numeric_value() and head.description(), plus the
    running state after each layer. Never runs actions.

    Args:
        head: Base component or outermost decorator

    Returns:
        Evaluation with one step per decorator, innermost-first

    Raises:
        MissingComponentError: head is None or not a ValueComponent
    """
    if head is None or not isinstance(head, ValueComponent):
        raise MissingComponentError(decoration="evaluate", got=type(head))

    base, layers = unwind(head)
    value = base.numeric_value()
    description = base.description()
    evaluation = Evaluation(
        base_name=_base_name(base),
        base_value=value,
        base_description=description,
        steps=_steps(value, description, layers),
    )

    logger.debug("evaluated %s: depth %d, value %s", evaluation.base_name, evaluation.depth, evaluation.value)
    return evaluation


def _steps(value: object, description: str, layers: tuple[Decorator, ...]) -> tuple[EvaluationStep, ...]:
    """Accumulate deltas and suffixes from base outwards."""
    steps: list[EvaluationStep] = []
    for layer in layers:
        decoration = layer.decoration
        value = value + decoration.delta  # type: ignore[operator]
        description = decoration.extend(description)
        steps.append(
            EvaluationStep(
                name=decoration.name,
                delta=decoration.delta,
                suffix=decoration.suffix,
                value=value,  # type: ignore[arg-type]
                description=description,
                has_action=decoration.has_action,
            )
        )
    return tuple(steps)


def _base_name(base: ValueComponent) -> str:
    """Catalog name for BaseComponent, class name for foreign components."""
    if isinstance(base, BaseComponent):
        return base.name
    return type(base).__name__
