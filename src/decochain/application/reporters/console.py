"""Console reporter: Evaluation → rich formatted table."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from decochain.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from decochain.domain.model.evaluation import Evaluation


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_base: Show base component as first table row.
        show_actions: Mark layers that carry an action.
        width: Console width in characters.
        force_terminal: Emit ANSI styles even when not writing to a TTY.
    """

    show_base: bool = True
    show_actions: bool = True
    width: int = 100
    force_terminal: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

    report() writes to the configured stream (default: sys.stdout).
    render() returns the same text as str for callers that pick their own destination.
    """

    def __init__(self, config: ConsoleConfig | None = None, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
            output: Output stream (default: sys.stdout)
        """
        self._config = config or ConsoleConfig()
        self._output = output if output is not None else sys.stdout

    def report(self, evaluation: Evaluation) -> None:
        """Write evaluation as rich table to the output stream.

        Args:
            evaluation: Evaluated chain.
        """
        self._print(self._console(self._output), evaluation)

    def render(self, evaluation: Evaluation) -> str:
        """Format evaluation as rich table.

        Args:
            evaluation: Evaluated chain.

        Returns:
            Formatted string with colors and table.
        """
        output = StringIO()
        self._print(self._console(output), evaluation)
        return output.getvalue()

    def _console(self, file: TextIO) -> Console:
        return Console(
            file=file,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

    def _print(self, console: Console, evaluation: Evaluation) -> None:
        console.rule(f"[bold]{escape(evaluation.base_name)}[/bold]")
        console.print(self._build_table(evaluation))
        console.print(f"[bold]Result:[/bold] {escape(evaluation.description)}: [green]{evaluation.value}[/green]")

    def _build_table(self, evaluation: Evaluation) -> Table:
        """One row per layer, base first."""
        table = Table(title=f"Chain (depth {evaluation.depth})")
        table.add_column("#", justify="right")
        table.add_column("Layer")
        table.add_column("Delta", justify="right")
        table.add_column("Value", justify="right")
        table.add_column("Description")

        if self._config.show_base:
            table.add_row(
                "0",
                escape(evaluation.base_name),
                "",
                str(evaluation.base_value),
                escape(evaluation.base_description),
            )

        for i, step in enumerate(evaluation.steps, start=1):
            name = escape(step.name)
            if self._config.show_actions and step.has_action:
                name = f"{name} [yellow](action)[/yellow]"
            table.add_row(str(i), name, str(step.delta), str(step.value), escape(step.description))

        return table
