"""Main facade for building and evaluating decorator chains.

DecorationService hides catalog lookup, chain building, evaluation and
reporting behind one object.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from decochain.application.catalog import characters, coffee
from decochain.application.chain import decorate
from decochain.application.evaluator import evaluate
from decochain.domain.model.configuration import ChainConfig
from decochain.domain.model.decorator import unwind

if TYPE_CHECKING:
    from decochain.application.catalog import Catalog
    from decochain.application.catalog.characters import MessageSink
    from decochain.domain.model.component import ValueComponent
    from decochain.domain.model.evaluation import Evaluation
    from decochain.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)


class DecorationService:
    """Facade over catalog, chain builder, evaluator and reporter.

    Composition-based: accepts catalog, config and reporter.

    Factory methods:
    - for_characters(): Orc, Elf, Warlord, Epic
    - for_coffee(): SimpleCoffee, Milk, Whip

    Example:
        service = DecorationService.for_coffee()
        result = service.evaluate("SimpleCoffee", "Milk", "Whip")
        print(result.description)  # Coffee, Milk, Whip
    """

    def __init__(
        self,
        catalog: Catalog,
        *,
        config: ChainConfig | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            catalog: Named bases and decorations
            config: Chain limits (default: unlimited)
            reporter: Optional reporter, called on every evaluate()

        Raises:
            TypeError: If catalog is None
        """
        if catalog is None:
            raise TypeError("catalog must not be None")
        self._catalog = catalog
        self._config = config or ChainConfig()
        self._reporter = reporter

    @classmethod
    def for_characters(
        cls,
        *,
        sink: MessageSink | None = None,
        config: ChainConfig | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create service over the character catalog.

        Args:
            sink: Destination of battle cries (default: rich console)
            config: Chain limits
            reporter: Optional reporter
        """
        return cls(characters(sink), config=config, reporter=reporter)

    @classmethod
    def for_coffee(
        cls,
        *,
        config: ChainConfig | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create service over the coffee catalog."""
        return cls(coffee(), config=config, reporter=reporter)

    @property
    def catalog(self) -> Catalog:
        """Underlying catalog."""
        return self._catalog

    def build(self, base: str, *decorations: str) -> ValueComponent:
        """Build chain from catalog names, first decoration innermost.

        Raises:
            UnknownEntryError: Name not in catalog
            ChainDepthError: Chain exceeds config.max_depth
        """
        component = self._catalog.base(base)
        resolved = tuple(self._catalog.decoration(name) for name in decorations)
        return decorate(component, *resolved, config=self._config)

    def evaluate(self, base: str, *decorations: str) -> Evaluation:
        """Build and evaluate chain, report if reporter configured.

        Raises:
            UnknownEntryError: Name not in catalog
            ChainDepthError: Chain exceeds config.max_depth
        """
        result = evaluate(self.build(base, *decorations))

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def perform(self, head: ValueComponent) -> int:
        """Run every action in the chain, outermost layer first.

        Value and description are unaffected.

        Args:
            head: Chain head

        Returns:
            Number of actions run
        """
        _, layers = unwind(head)
        performed = 0
        for layer in reversed(layers):
            if layer.has_action:
                layer.perform()
                performed += 1

        logger.debug("performed %d action(s) on chain of depth %d", performed, len(layers))
        return performed
