"""JSON reporter for machine-readable output.

Decimal values are written as strings to keep them exact.
"""

from __future__ import annotations

import json
import sys
from decimal import Decimal
from typing import TYPE_CHECKING, TextIO

from decochain.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from decochain.domain.model.component import Number
    from decochain.domain.model.evaluation import Evaluation, EvaluationStep


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, evaluation: Evaluation) -> None:
        """Report evaluation as JSON.

        Args:
            evaluation: Evaluated chain
        """
        json.dump(self.to_dict(evaluation), self._output, indent=self._indent)
        self._output.write("\n")

    def to_dict(self, evaluation: Evaluation) -> dict[str, object]:
        """Convert Evaluation to JSON-serializable dict.

        Args:
            evaluation: Evaluation to convert

        Returns:
            Dictionary suitable for json.dump()
        """
        return {
            "value": _number(evaluation.value),
            "description": evaluation.description,
            "depth": evaluation.depth,
            "total_delta": _number(evaluation.total_delta),
            "base": {
                "name": evaluation.base_name,
                "value": _number(evaluation.base_value),
                "description": evaluation.base_description,
            },
            "steps": [self._step_to_dict(step) for step in evaluation.steps],
        }

    def _step_to_dict(self, step: EvaluationStep) -> dict[str, object]:
        """Convert EvaluationStep to JSON-serializable dict."""
        return {
            "name": step.name,
            "delta": _number(step.delta),
            "suffix": step.suffix,
            "value": _number(step.value),
            "description": step.description,
            "has_action": step.has_action,
        }


def _number(value: Number) -> int | float | str:
    """Decimal as string, int and float unchanged."""
    if isinstance(value, Decimal):
        return str(value)
    return value
