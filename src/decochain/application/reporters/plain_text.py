"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from decochain.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from decochain.domain.model.evaluation import Evaluation


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, evaluation: Evaluation) -> None:
        """Report chain breakdown as plain text.

        Args:
            evaluation: Evaluated chain
        """
        self._write("=" * 50)
        self._write(f"Chain: {evaluation.base_name} (depth {evaluation.depth})")
        self._write("=" * 50)
        self._write(f"  base  {evaluation.base_value}  {evaluation.base_description}")

        for i, step in enumerate(evaluation.steps, start=1):
            marker = " *" if step.has_action else ""
            self._write(f"  {i}. {step.name}{marker}  {_signed(step.delta)} -> {step.value}  {step.description}")

        self._write("-" * 50)
        self._write(f"Result: {evaluation.description}: {evaluation.value}")

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)


def _signed(delta: object) -> str:
    """Format delta with explicit sign."""
    text = str(delta)
    return text if text.startswith("-") else f"+{text}"
