"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decochain.domain.model.evaluation import Evaluation


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Example:
        class MyReporter(BaseReporter):
            def report(self, evaluation: Evaluation) -> None:
                print(f"{evaluation.description}: {evaluation.value}")
    """

    @abstractmethod
    def report(self, evaluation: Evaluation) -> None:
        """Report an evaluated chain.

        Args:
            evaluation: Final value, description and per-layer breakdown
        """
