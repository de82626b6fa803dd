"""Reporter protocol for output formatting.

Users extend decochain by implementing this Protocol.
NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from decochain.domain.model.evaluation import Evaluation


class ReporterProtocol(Protocol):
    """Contract for reporters.

    decochain provides PlainTextReporter, JSONReporter and ConsoleReporter.
    Users can implement HTMLReporter, CSVReporter, etc.
    """

    def report(self, evaluation: Evaluation) -> None:
        """Report an evaluated chain.

        Implementation decides output format and destination.

        Args:
            evaluation: Final value, description and per-layer breakdown
        """
        ...
